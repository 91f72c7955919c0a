# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, redirect, request, session

from snippetbox.domain.exceptions import NoRecordError
from snippetbox.domain.repositories import SnippetRepository
from snippetbox.interfaces.http.dto import SnippetCreateForm
from snippetbox.interfaces.http.templates import TemplateCache, new_template_data
from snippetbox.shared.errors import FormBindingError, client_error, not_found
from snippetbox.shared.forms import FormState, decode_post_form
from snippetbox.shared.logging import logger
from snippetbox.shared.middleware.auth import require_authentication
from snippetbox.shared.middleware.csrf import csrf_protect
from snippetbox.shared.validation import Validator


class SnippetsController:
    PAGES: tuple[str, ...] = ("home.html", "view.html", "create.html")

    def __init__(self, *, snippets: SnippetRepository, templates: TemplateCache) -> None:
        self._snippets = snippets
        self._templates = templates

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("snippets", __name__)
        bp.add_url_rule("/", view_func=self.home, methods=["GET"])
        bp.add_url_rule(
            "/snippet/view/<int(min=1):snippet_id>",
            view_func=self.view,
            methods=["GET"],
        )
        bp.add_url_rule("/snippet/create", view_func=self.create, methods=["GET"])
        bp.add_url_rule("/snippet/create", view_func=self.create_post, methods=["POST"])
        return bp

    def home(self):
        snippets = self._snippets.latest()

        data = new_template_data()
        data.snippets = snippets
        return self._templates.render("home.html", HTTPStatus.OK, data)

    def view(self, snippet_id: int):
        try:
            snippet = self._snippets.get(snippet_id)
        except NoRecordError:
            return not_found()

        data = new_template_data()
        data.snippet = snippet
        return self._templates.render("view.html", HTTPStatus.OK, data)

    @require_authentication
    def create(self):
        data = new_template_data()
        data.form = FormState(SnippetCreateForm(expires=365))
        return self._templates.render("create.html", HTTPStatus.OK, data)

    @require_authentication
    @csrf_protect
    def create_post(self):
        try:
            form = decode_post_form(SnippetCreateForm, request.form)
        except FormBindingError as exc:
            logger.info(f"snippets.create: bad form {exc.context}")
            return client_error(HTTPStatus.BAD_REQUEST)

        validation = form.validate_into(Validator())
        if not validation.valid():
            data = new_template_data()
            data.form = FormState(form, validation)
            return self._templates.render("create.html", HTTPStatus.UNPROCESSABLE_ENTITY, data)

        snippet_id = self._snippets.insert(form.title, form.content, form.expires)
        logger.info(f"snippets.create: ok snippet_id={snippet_id}")

        session.put_flash("Snippet successfully created!")
        return redirect(f"/snippet/view/{snippet_id}", code=HTTPStatus.SEE_OTHER)
