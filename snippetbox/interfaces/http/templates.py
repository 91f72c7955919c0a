# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from http import HTTPStatus
from pathlib import Path
from typing import Any

from flask import Response, g, session
from jinja2 import (Environment, FileSystemLoader, StrictUndefined, Template,
                    TemplateError, select_autoescape)

from snippetbox.domain.entities import Snippet
from snippetbox.shared.errors import (InfrastructureError, TemplateCacheError,
                                      UnknownTemplateError)
from snippetbox.shared.forms import FormState
from snippetbox.shared.logging import logger

BASE_LAYOUT = "base.html"
PARTIALS_DIR = "partials"
PAGES_DIR = "pages"


def human_date(value: datetime | None) -> str:
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%d %b %Y at %H:%M")


@dataclass(frozen=True, slots=True)
class TemplateFunctions:
    filters: Mapping[str, Callable[..., Any]] = field(default_factory=dict)
    globals: Mapping[str, Any] = field(default_factory=dict)


def default_functions() -> TemplateFunctions:
    return TemplateFunctions(filters={"human_date": human_date})


@dataclass(slots=True)
class TemplateData:
    current_year: int
    csrf_token: str = ""
    flash: str = ""
    is_authenticated: bool = False
    snippet: Snippet | None = None
    snippets: list[Snippet] = field(default_factory=list)
    form: FormState | None = None

    def as_context(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def new_template_data() -> TemplateData:
    """Default view-model for the current request (flash is consumed here)."""
    return TemplateData(
        current_year=datetime.now(UTC).year,
        csrf_token=session.csrf_token,
        flash=session.pop_flash(),
        is_authenticated=bool(getattr(g, "is_authenticated", False)),
    )


def _compile(env: Environment, name: str) -> Template:
    try:
        return env.get_template(name)
    except (OSError, TemplateError) as exc:
        raise TemplateCacheError(name, str(exc)) from exc


class TemplateCache:
    """Pre-compiled page templates, read-only once built."""

    def __init__(self, pages: Mapping[str, Template]) -> None:
        self._pages = dict(pages)

    @classmethod
    def build(cls, template_dir: Path, functions: TemplateFunctions) -> TemplateCache:
        pages_dir = template_dir / PAGES_DIR
        if not pages_dir.is_dir():
            raise TemplateCacheError(str(pages_dir), "pages directory not found")

        env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            auto_reload=False,
        )
        env.filters.update(functions.filters)
        env.globals.update(functions.globals)

        _compile(env, BASE_LAYOUT)
        for partial in sorted((template_dir / PARTIALS_DIR).glob("*.html")):
            _compile(env, f"{PARTIALS_DIR}/{partial.name}")

        pages: dict[str, Template] = {}
        for page in sorted(pages_dir.glob("*.html")):
            pages[page.name] = _compile(env, f"{PAGES_DIR}/{page.name}")

        logger.info(f"templates.build: compiled {len(pages)} pages from {template_dir}")
        return cls(pages)

    def __contains__(self, name: object) -> bool:
        return name in self._pages

    def names(self) -> list[str]:
        return sorted(self._pages)

    def require(self, names: Iterable[str]) -> None:
        missing = sorted(set(names) - set(self._pages))
        if missing:
            raise TemplateCacheError(", ".join(missing), "referenced page is not in the cache")

    def render(self, name: str, status: HTTPStatus | int, data: TemplateData) -> Response:
        template = self._pages.get(name)
        if template is None:
            raise UnknownTemplateError(name)
        try:
            body = template.render(**data.as_context())
        except Exception as exc:
            raise InfrastructureError(
                "template_render_failed", context={"template": name}
            ) from exc
        return Response(body, status=int(status), mimetype="text/html")


__all__ = [
    "TemplateCache",
    "TemplateData",
    "TemplateFunctions",
    "default_functions",
    "human_date",
    "new_template_data",
]
