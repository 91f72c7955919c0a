# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from snippetbox.domain.exceptions import InvalidCredentialsError
from snippetbox.domain.repositories import PasswordHasher, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> int:
        user = self._users.find_by_email(email)
        password_valid = user and self._password_hasher.verify(password, user.hashed_password)

        if not password_valid:
            raise InvalidCredentialsError()

        return user.id
