# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Snippet, User
from .exceptions import DuplicateEmailError, InvalidCredentialsError, NoRecordError
from .repositories import PasswordHasher, SnippetRepository, UserRepository

__all__ = [
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "NoRecordError",
    "PasswordHasher",
    "Snippet",
    "SnippetRepository",
    "User",
    "UserRepository",
]
