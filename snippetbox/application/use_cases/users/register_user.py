# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from snippetbox.domain.repositories import PasswordHasher, UserRepository
from snippetbox.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> int:
        """Store a new user; raises DuplicateEmailError if the address is taken."""
        hashed = self._password_hasher.hash(password)
        user_id = self._users.insert(name, email, hashed)
        logger.info(f"users.register: ok user_id={user_id}")
        return user_id
