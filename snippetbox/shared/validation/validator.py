# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Field-level validation predicates and the error accumulator used by forms."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

EMAIL_RX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


@dataclass(slots=True)
class Validator:
    """Accumulates validation errors for one form submission.

    Field errors keep the first message recorded through ``check_field``;
    non-field errors describe the submission as a whole.
    """

    field_errors: dict[str, str] = field(default_factory=dict)
    non_field_errors: list[str] = field(default_factory=list)

    def valid(self) -> bool:
        return not self.field_errors and not self.non_field_errors

    def add_field_error(self, key: str, message: str) -> None:
        self.field_errors[key] = message

    def add_non_field_error(self, message: str) -> None:
        self.non_field_errors.append(message)

    def check_field(self, ok: bool, key: str, message: str) -> None:
        if not ok and key not in self.field_errors:
            self.field_errors[key] = message


def not_blank(value: str) -> bool:
    return value.strip() != ""


def max_chars(value: str, n: int) -> bool:
    # len() on str counts code points, not encoded bytes
    return len(value) <= n


def min_chars(value: str, n: int) -> bool:
    return len(value) >= n


def matches(value: str, rx: re.Pattern[str]) -> bool:
    return rx.fullmatch(value) is not None


def permitted_value(value: Any, *permitted: Any) -> bool:
    return value in permitted


def in_range(value: int | float, low: int | float, high: int | float) -> bool:
    return low <= value <= high


__all__ = [
    "EMAIL_RX",
    "Validator",
    "in_range",
    "matches",
    "max_chars",
    "min_chars",
    "not_blank",
    "permitted_value",
]
