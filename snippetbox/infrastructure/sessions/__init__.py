# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interface import ServerSideSessionInterface, SessionBag, new_token
from .store import SqlAlchemySessionStore

__all__ = [
    "ServerSideSessionInterface",
    "SessionBag",
    "SqlAlchemySessionStore",
    "new_token",
]
