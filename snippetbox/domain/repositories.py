# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Snippet, User


class SnippetRepository(Protocol):
    def insert(self, title: str, content: str, expires: int) -> int: ...
    def get(self, snippet_id: int) -> Snippet: ...
    def latest(self) -> list[Snippet]: ...


class UserRepository(Protocol):
    def insert(self, name: str, email: str, hashed_password: str) -> int: ...
    def find_by_email(self, email: str) -> User | None: ...
    def exists(self, user_id: int) -> bool: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
