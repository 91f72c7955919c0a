# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, request
from werkzeug.exceptions import HTTPException

from snippetbox.shared.logging import logger

from .base import AppError


def client_error(status: HTTPStatus) -> Response:
    return Response(status.phrase, status=status, mimetype="text/plain")


def not_found() -> Response:
    return client_error(HTTPStatus.NOT_FOUND)


def server_error(exc: BaseException) -> Response:
    logger.opt(exception=exc).error(
        f"Unhandled exception: {request.method} {request.path}"
    )
    response = client_error(HTTPStatus.INTERNAL_SERVER_ERROR)
    response.headers["Connection"] = "close"
    return response


def handle_app_error(error: AppError) -> Response:
    if error.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return server_error(error)
    logger.warning(
        f"Client error {error.code} ({int(error.status)}) on {request.method} {request.path}"
    )
    return client_error(error.status)


def handle_http_exception(exc: HTTPException) -> Response:
    status = HTTPStatus(exc.code or HTTPStatus.INTERNAL_SERVER_ERROR)
    response = client_error(status)
    for header, value in exc.get_headers():
        if header.lower() == "allow":
            response.headers["Allow"] = value
    return response


def register_error_handler(app: Flask) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return handle_http_exception(exc)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        return server_error(exc)
