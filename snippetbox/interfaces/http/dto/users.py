from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from snippetbox.shared.validation import EMAIL_RX, Validator, matches, min_chars, not_blank

MIN_PASSWORD_CHARS = 8


class UserSignupForm(BaseModel):
    name: str = Field("", alias="name")
    email: str = Field("", alias="email")
    password: str = Field("", alias="password")

    model_config = ConfigDict(validate_by_name=True)

    def validate_into(self, v: Validator) -> Validator:
        v.check_field(not_blank(self.name), "name", "This field cannot be blank")
        v.check_field(not_blank(self.email), "email", "This field cannot be blank")
        v.check_field(
            matches(self.email, EMAIL_RX), "email", "This field must be a valid email address"
        )
        v.check_field(not_blank(self.password), "password", "This field cannot be blank")
        v.check_field(
            min_chars(self.password, MIN_PASSWORD_CHARS),
            "password",
            f"This field must be at least {MIN_PASSWORD_CHARS} characters long",
        )
        return v


class UserLoginForm(BaseModel):
    email: str = Field("", alias="email")
    password: str = Field("", alias="password")

    model_config = ConfigDict(validate_by_name=True)

    def validate_into(self, v: Validator) -> Validator:
        v.check_field(not_blank(self.email), "email", "This field cannot be blank")
        v.check_field(
            matches(self.email, EMAIL_RX), "email", "This field must be a valid email address"
        )
        v.check_field(not_blank(self.password), "password", "This field cannot be blank")
        return v
