# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from flask import Flask, Request, Response
from flask.sessions import SessionInterface, SessionMixin
from werkzeug.datastructures import CallbackDict

from snippetbox.shared.config import SecurityConfig, SessionConfig
from snippetbox.shared.logging import logger

from .store import SqlAlchemySessionStore

_FLASH_KEY = "flash"
_AUTH_KEY = "authenticatedUserID"
_CSRF_KEY = "csrf_token"


def new_token() -> str:
    return secrets.token_urlsafe(32)


class SessionBag(CallbackDict, SessionMixin):
    """Per-request key/value bag for one visitor.

    Only JSON-serialisable values can be stored. Handlers should go through the
    typed accessors (flash, authenticated user, CSRF token) rather than raw keys.
    """

    def __init__(
        self,
        initial: dict[str, Any] | None = None,
        *,
        token: str | None = None,
        deadline: datetime | None = None,
        invalidate: Callable[[str], None] | None = None,
    ) -> None:
        def on_update(self: SessionBag) -> None:
            self.modified = True
            self.accessed = True

        super().__init__(initial, on_update)
        self.token = token
        self.deadline = deadline
        self.new = token is None
        self.modified = False
        self.accessed = False
        self._invalidate = invalidate

    def __getitem__(self, key: str) -> Any:
        self.accessed = True
        return super().__getitem__(key)

    def get(self, key: str, default: Any = None) -> Any:
        self.accessed = True
        return super().get(key, default)

    def put(self, key: str, value: Any) -> None:
        self[key] = value

    def remove(self, key: str) -> None:
        self.pop(key, None)

    def pop_string(self, key: str) -> str:
        value = self.pop(key, None)
        return value if isinstance(value, str) else ""

    def renew_token(self) -> None:
        old = self.token
        self.token = new_token()
        self.deadline = None
        self.modified = True
        if old and self._invalidate is not None:
            self._invalidate(old)

    def put_flash(self, message: str) -> None:
        self[_FLASH_KEY] = message

    def pop_flash(self) -> str:
        return self.pop_string(_FLASH_KEY)

    @property
    def authenticated_user_id(self) -> int | None:
        value = self.get(_AUTH_KEY)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    def set_authenticated_user(self, user_id: int) -> None:
        self[_AUTH_KEY] = user_id

    def clear_authenticated_user(self) -> None:
        self.remove(_AUTH_KEY)

    @property
    def issued_csrf_token(self) -> str:
        """The token already stored for this session, or "" if none was issued."""
        token = self.get(_CSRF_KEY)
        return token if isinstance(token, str) else ""

    @property
    def csrf_token(self) -> str:
        token = self.get(_CSRF_KEY)
        if not isinstance(token, str) or not token:
            token = new_token()
            self[_CSRF_KEY] = token
        return token


class ServerSideSessionInterface(SessionInterface):
    def __init__(
        self,
        store: SqlAlchemySessionStore,
        session_config: SessionConfig,
        security_config: SecurityConfig,
    ) -> None:
        self._store = store
        self._cookie_name = session_config.cookie_name
        self._lifetime = timedelta(seconds=session_config.lifetime)
        self._secure = security_config.cookie_secure
        self._samesite = security_config.cookie_samesite

    def open_session(self, app: Flask, request: Request) -> SessionBag:
        token = request.cookies.get(self._cookie_name, "")
        if token:
            found = self._store.find(token)
            if found is not None:
                data, deadline = found
                return SessionBag(
                    data, token=token, deadline=deadline, invalidate=self._store.delete
                )
            logger.debug("sessions.open: unknown or expired token, starting empty")
        return SessionBag(invalidate=self._store.delete)

    def save_session(self, app: Flask, session: SessionMixin, response: Response) -> None:
        if not isinstance(session, SessionBag):
            return
        if session.accessed:
            response.vary.add("Cookie")
        if not session.modified:
            return

        path = self.get_cookie_path(app)
        domain = self.get_cookie_domain(app)
        if not session:
            if session.token:
                self._store.delete(session.token)
            if not session.new:
                response.delete_cookie(
                    self._cookie_name,
                    path=path,
                    domain=domain,
                    secure=self._secure,
                    httponly=True,
                    samesite=self._samesite,
                )
            return

        if session.token is None:
            session.token = new_token()
        if session.deadline is None:
            session.deadline = datetime.now(UTC) + self._lifetime

        self._store.commit(session.token, dict(session), session.deadline)
        response.set_cookie(
            self._cookie_name,
            session.token,
            expires=session.deadline,
            path=path,
            domain=domain,
            secure=self._secure,
            httponly=True,
            samesite=self._samesite,
        )


__all__ = ["ServerSideSessionInterface", "SessionBag", "new_token"]
