# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Snippet:

    id: int
    title: str
    content: str
    created: datetime
    expires: datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    email: str
    hashed_password: str
    created: datetime
