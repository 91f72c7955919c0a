# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .models import SessionRecord, SnippetRecord, UserRecord
from .session import Base, Database

__all__ = ["Base", "Database", "SessionRecord", "SnippetRecord", "UserRecord"]
