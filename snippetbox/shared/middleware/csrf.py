# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from functools import wraps

from flask import Flask, current_app, request, session

from snippetbox.shared.errors import CSRFError
from snippetbox.shared.logging import logger

SAFE_METHODS: tuple[str, ...] = ("GET", "HEAD", "OPTIONS")
FORM_FIELD = "csrf_token"
HEADER = "X-CSRF-Token"
_EXTENSION_KEY = "snippetbox.csrf"


def configure_csrf(app: Flask, *, enabled: bool) -> None:
    app.extensions[_EXTENSION_KEY] = enabled


def _is_enabled() -> bool:
    return bool(current_app.extensions.get(_EXTENSION_KEY, True))


def csrf_protect(f: Callable):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not _is_enabled() or request.method in SAFE_METHODS:
            return f(*args, **kwargs)
        submitted = (request.form.get(FORM_FIELD) or request.headers.get(HEADER) or "").strip()
        expected = session.issued_csrf_token
        if not submitted or not expected or not secrets.compare_digest(submitted, expected):
            logger.warning(f"csrf: token mismatch on {request.method} {request.path}")
            raise CSRFError()
        return f(*args, **kwargs)

    return wrapper


__all__ = ["configure_csrf", "csrf_protect"]
