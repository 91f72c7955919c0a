from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from snippetbox.shared.validation import Validator, max_chars, not_blank, permitted_value

PERMITTED_EXPIRES: tuple[int, ...] = (1, 7, 365)


class SnippetCreateForm(BaseModel):
    title: str = Field("", alias="title")
    content: str = Field("", alias="content")
    expires: int = Field(0, alias="expires")

    model_config = ConfigDict(validate_by_name=True)

    def validate_into(self, v: Validator) -> Validator:
        v.check_field(not_blank(self.title), "title", "This field cannot be blank")
        v.check_field(
            max_chars(self.title, 100),
            "title",
            "This field cannot be more than 100 characters long",
        )
        v.check_field(not_blank(self.content), "content", "This field cannot be blank")
        v.check_field(
            permitted_value(self.expires, *PERMITTED_EXPIRES),
            "expires",
            "This field must equal 1, 7 or 365",
        )
        return v
