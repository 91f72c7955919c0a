# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from snippetbox.domain.entities import Snippet
from snippetbox.domain.exceptions import NoRecordError
from snippetbox.domain.repositories import SnippetRepository
from snippetbox.infrastructure.db import Database, SnippetRecord
from snippetbox.infrastructure.db.models import as_utc

LATEST_LIMIT = 10


def _to_domain(row: SnippetRecord) -> Snippet:
    return Snippet(
        id=row.id,
        title=row.title,
        content=row.content,
        created=as_utc(row.created),
        expires=as_utc(row.expires),
    )


class SqlAlchemySnippetRepository(SnippetRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    def insert(self, title: str, content: str, expires: int) -> int:
        now = datetime.now(UTC)
        with self._db.session_scope() as session:
            row = SnippetRecord(
                title=title,
                content=content,
                created=now,
                expires=now + timedelta(days=expires),
            )
            session.add(row)
            session.flush()
            return row.id

    def get(self, snippet_id: int) -> Snippet:
        with self._db.session_scope() as session:
            row = (
                session.query(SnippetRecord)
                .filter(
                    SnippetRecord.id == snippet_id,
                    SnippetRecord.expires > datetime.now(UTC),
                )
                .first()
            )
            if not row:
                raise NoRecordError(context={"snippet_id": snippet_id})
            return _to_domain(row)

    def latest(self) -> list[Snippet]:
        with self._db.session_scope() as session:
            rows = (
                session.query(SnippetRecord)
                .filter(SnippetRecord.expires > datetime.now(UTC))
                .order_by(SnippetRecord.id.desc())
                .limit(LATEST_LIMIT)
                .all()
            )
            return [_to_domain(row) for row in rows]
