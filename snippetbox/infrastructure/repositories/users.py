# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError

from snippetbox.domain.entities import User
from snippetbox.domain.exceptions import DuplicateEmailError
from snippetbox.domain.repositories import UserRepository
from snippetbox.infrastructure.db import Database, UserRecord
from snippetbox.infrastructure.db.models import as_utc


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    def insert(self, name: str, email: str, hashed_password: str) -> int:
        try:
            with self._db.session_scope() as session:
                row = UserRecord(
                    name=name,
                    email=email,
                    hashed_password=hashed_password,
                    created=datetime.now(UTC),
                )
                session.add(row)
                session.flush()
                return row.id
        except IntegrityError as exc:
            if "email" in str(exc.orig).lower():
                raise DuplicateEmailError() from exc
            raise

    def find_by_email(self, email: str) -> User | None:
        with self._db.session_scope() as session:
            row = session.query(UserRecord).filter(UserRecord.email == email).first()
            if not row:
                return None
            return User(
                id=row.id,
                name=row.name,
                email=row.email,
                hashed_password=row.hashed_password,
                created=as_utc(row.created),
            )

    def exists(self, user_id: int) -> bool:
        with self._db.session_scope() as session:
            return (
                session.query(UserRecord.id).filter(UserRecord.id == user_id).first()
                is not None
            )
