from __future__ import annotations

import pytest

from snippetbox.shared.validation import (
    EMAIL_RX,
    Validator,
    in_range,
    matches,
    max_chars,
    min_chars,
    not_blank,
    permitted_value,
)


def test_check_field_keeps_first_error() -> None:
    v = Validator()
    v.check_field(False, "title", "This field cannot be blank")
    v.check_field(False, "title", "This field cannot be more than 100 characters long")

    assert v.field_errors == {"title": "This field cannot be blank"}
    assert v.valid() is False


def test_check_field_ignores_passing_checks() -> None:
    v = Validator()
    v.check_field(True, "title", "unused")
    assert v.valid() is True
    assert v.field_errors == {}


def test_non_field_errors_make_validator_invalid() -> None:
    v = Validator()
    v.add_non_field_error("Email or password is incorrect")
    v.add_non_field_error("Email or password is incorrect")

    assert v.field_errors == {}
    assert v.non_field_errors == ["Email or password is incorrect"] * 2
    assert v.valid() is False


def test_add_field_error_is_unconditional() -> None:
    v = Validator()
    v.check_field(False, "email", "first")
    v.add_field_error("email", "Email address is already in use")
    assert v.field_errors["email"] == "Email address is already in use"


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_not_blank_rejects_whitespace(value: str) -> None:
    assert not_blank(value) is False


def test_length_checks_count_characters_not_bytes() -> None:
    title = "é" * 100
    assert len(title.encode("utf-8")) == 200
    assert max_chars(title, 100) is True
    assert max_chars(title + "é", 100) is False
    assert min_chars("日本語のパス", 6) is True
    assert min_chars("日本語", 8) is False


def test_email_pattern() -> None:
    assert matches("ann@example.com", EMAIL_RX) is True
    assert matches("bad-email", EMAIL_RX) is False
    assert matches("ann@", EMAIL_RX) is False


def test_permitted_value_and_range() -> None:
    assert permitted_value(365, 1, 7, 365) is True
    assert permitted_value(30, 1, 7, 365) is False
    assert in_range(5, 1, 10) is True
    assert in_range(11, 1, 10) is False


@pytest.mark.parametrize("value", ["ann@example.com\n", "ann@example.com\r\n", " ann@example.com"])
def test_matches_requires_the_whole_value(value: str) -> None:
    assert matches(value, EMAIL_RX) is False
