from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from snippetbox.domain import DuplicateEmailError, NoRecordError
from snippetbox.infrastructure.db import Database, SnippetRecord
from snippetbox.infrastructure.repositories import (SqlAlchemySnippetRepository,
                                                    SqlAlchemyUserRepository)


def _insert_expired(database: Database, title: str) -> int:
    now = datetime.now(UTC)
    with database.session_scope() as session:
        row = SnippetRecord(
            title=title,
            content="gone",
            created=now - timedelta(days=2),
            expires=now - timedelta(days=1),
        )
        session.add(row)
        session.flush()
        return row.id


def test_snippet_insert_and_get(database: Database) -> None:
    repo = SqlAlchemySnippetRepository(database)

    snippet_id = repo.insert("O snail", "Climb Mount Fuji", 7)
    snippet = repo.get(snippet_id)

    assert snippet.title == "O snail"
    assert snippet.content == "Climb Mount Fuji"
    assert snippet.created.tzinfo is not None
    assert timedelta(days=6, hours=23) < snippet.expires - snippet.created <= timedelta(days=7)


def test_snippet_get_missing_or_expired(database: Database) -> None:
    repo = SqlAlchemySnippetRepository(database)
    expired_id = _insert_expired(database, "old")

    with pytest.raises(NoRecordError):
        repo.get(expired_id)
    with pytest.raises(NoRecordError):
        repo.get(12345)


def test_latest_is_newest_first_unexpired_and_limited(database: Database) -> None:
    repo = SqlAlchemySnippetRepository(database)
    _insert_expired(database, "old")
    ids = [repo.insert(f"snippet {n}", "body", 1) for n in range(12)]

    latest = repo.latest()

    assert [s.id for s in latest] == list(reversed(ids))[:10]
    assert all(s.title != "old" for s in latest)


def test_user_insert_and_lookup(database: Database) -> None:
    repo = SqlAlchemyUserRepository(database)

    user_id = repo.insert("Ann", "ann@example.com", "hash")
    user = repo.find_by_email("ann@example.com")

    assert user is not None
    assert user.id == user_id
    assert user.name == "Ann"
    assert repo.exists(user_id)
    assert not repo.exists(user_id + 1)
    assert repo.find_by_email("nobody@example.com") is None


def test_user_duplicate_email(database: Database) -> None:
    repo = SqlAlchemyUserRepository(database)
    repo.insert("Ann", "ann@example.com", "hash")

    with pytest.raises(DuplicateEmailError):
        repo.insert("Other", "ann@example.com", "hash2")
