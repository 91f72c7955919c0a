# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .snippets import SqlAlchemySnippetRepository
from .users import SqlAlchemyUserRepository

__all__ = ["SqlAlchemySnippetRepository", "SqlAlchemyUserRepository"]
