# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, redirect, request, session

from snippetbox.application.use_cases.users.login_user import LoginUserUseCase
from snippetbox.application.use_cases.users.register_user import RegisterUserUseCase
from snippetbox.domain.exceptions import DuplicateEmailError, InvalidCredentialsError
from snippetbox.interfaces.http.dto import UserLoginForm, UserSignupForm
from snippetbox.interfaces.http.templates import TemplateCache, new_template_data
from snippetbox.shared.errors import FormBindingError, client_error
from snippetbox.shared.forms import FormState, decode_post_form
from snippetbox.shared.logging import logger
from snippetbox.shared.middleware.auth import require_authentication
from snippetbox.shared.middleware.csrf import csrf_protect
from snippetbox.shared.validation import Validator


class UsersController:
    PAGES: tuple[str, ...] = ("signup.html", "login.html")

    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        templates: TemplateCache,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._templates = templates

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/user")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["GET"])
        bp.add_url_rule("/signup", view_func=self.signup_post, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["GET"])
        bp.add_url_rule("/login", view_func=self.login_post, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout_post, methods=["POST"])
        return bp

    def _render_form(self, page: str, status: HTTPStatus, form: FormState):
        data = new_template_data()
        data.form = form
        return self._templates.render(page, status, data)

    def signup(self):
        return self._render_form("signup.html", HTTPStatus.OK, FormState(UserSignupForm()))

    @csrf_protect
    def signup_post(self):
        try:
            form = decode_post_form(UserSignupForm, request.form)
        except FormBindingError as exc:
            logger.info(f"users.signup: bad form {exc.context}")
            return client_error(HTTPStatus.BAD_REQUEST)

        validation = form.validate_into(Validator())
        if validation.valid():
            try:
                self._register_use_case.execute(form.name, form.email, form.password)
            except DuplicateEmailError:
                validation.add_field_error("email", "Email address is already in use")

        if not validation.valid():
            return self._render_form(
                "signup.html", HTTPStatus.UNPROCESSABLE_ENTITY, FormState(form, validation)
            )

        session.put_flash("Your signup was successful. Please log in.")
        return redirect("/user/login", code=HTTPStatus.SEE_OTHER)

    def login(self):
        return self._render_form("login.html", HTTPStatus.OK, FormState(UserLoginForm()))

    @csrf_protect
    def login_post(self):
        try:
            form = decode_post_form(UserLoginForm, request.form)
        except FormBindingError as exc:
            logger.info(f"users.login: bad form {exc.context}")
            return client_error(HTTPStatus.BAD_REQUEST)

        validation = form.validate_into(Validator())
        user_id: int | None = None
        if validation.valid():
            try:
                user_id = self._login_use_case.execute(form.email, form.password)
            except InvalidCredentialsError:
                validation.add_non_field_error("Email or password is incorrect")

        if user_id is None or not validation.valid():
            return self._render_form(
                "login.html", HTTPStatus.UNPROCESSABLE_ENTITY, FormState(form, validation)
            )

        session.renew_token()
        session.set_authenticated_user(user_id)
        logger.info(f"users.login: ok user_id={user_id}")
        return redirect("/snippet/create", code=HTTPStatus.SEE_OTHER)

    @require_authentication
    @csrf_protect
    def logout_post(self):
        session.renew_token()
        session.clear_authenticated_user()
        session.put_flash("You've been logged out successfully!")
        logger.info("users.logout: ok")
        return redirect("/", code=HTTPStatus.SEE_OTHER)
