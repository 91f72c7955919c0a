# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from http import HTTPStatus

from flask import Flask, g, make_response, redirect, request, session

from snippetbox.domain.repositories import UserRepository
from snippetbox.shared.logging import logger

LOGIN_PATH = "/user/login"


def configure_authentication(app: Flask, users: UserRepository) -> None:
    @app.before_request
    def _authenticate() -> None:
        g.is_authenticated = False
        if request.endpoint == "static":
            return
        user_id = session.authenticated_user_id
        if user_id is None:
            return
        if users.exists(user_id):
            g.is_authenticated = True
            g.user_id = user_id
        else:
            logger.warning(f"auth: session refers to missing user={user_id}")


def require_authentication(f: Callable):
    @wraps(f)
    def inner(*a, **kw):
        if not getattr(g, "is_authenticated", False):
            logger.info(f"auth: redirecting anonymous {request.method} {request.path} to login")
            return redirect(LOGIN_PATH, code=HTTPStatus.SEE_OTHER)

        response = make_response(f(*a, **kw))
        response.headers["Cache-Control"] = "no-store"
        return response

    return inner


__all__ = ["LOGIN_PATH", "configure_authentication", "require_authentication"]
