# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
import threading
from datetime import UTC, datetime
from typing import Any

from snippetbox.infrastructure.db import Database, SessionRecord
from snippetbox.infrastructure.db.models import as_utc
from snippetbox.shared.logging import logger


class SqlAlchemySessionStore:
    """Durable token -> (bag, expiry) store backed by the ``sessions`` table."""

    def __init__(self, db: Database) -> None:
        self._db = db
        self._stop = threading.Event()
        self._reaper: threading.Thread | None = None

    def find(self, token: str) -> tuple[dict[str, Any], datetime] | None:
        with self._db.session_scope() as session:
            row = session.get(SessionRecord, token)
            if row is None:
                return None
            expiry = as_utc(row.expiry)
            if expiry <= datetime.now(UTC):
                session.delete(row)
                logger.debug("sessions.find: purged expired session")
                return None
            try:
                data = json.loads(row.data)
            except ValueError:
                logger.warning("sessions.find: discarding undecodable session data")
                session.delete(row)
                return None
            return data, expiry

    def commit(self, token: str, data: dict[str, Any], expiry: datetime) -> None:
        payload = json.dumps(data)
        with self._db.session_scope() as session:
            row = session.get(SessionRecord, token)
            if row is None:
                session.add(SessionRecord(token=token, data=payload, expiry=expiry))
            else:
                row.data = payload
                row.expiry = expiry

    def delete(self, token: str) -> None:
        with self._db.session_scope() as session:
            session.query(SessionRecord).filter(SessionRecord.token == token).delete()

    def delete_expired(self) -> int:
        with self._db.session_scope() as session:
            removed = (
                session.query(SessionRecord)
                .filter(SessionRecord.expiry <= datetime.now(UTC))
                .delete()
            )
        if removed:
            logger.info(f"sessions.cleanup: removed {removed} expired sessions")
        return removed

    def start_cleanup(self, interval: float) -> None:
        if interval <= 0 or self._reaper is not None:
            return
        self._stop.clear()

        def _run() -> None:
            while not self._stop.wait(interval):
                try:
                    self.delete_expired()
                except Exception:
                    logger.exception("sessions.cleanup: failed")

        self._reaper = threading.Thread(target=_run, name="session-reaper", daemon=True)
        self._reaper.start()
        logger.info(f"sessions.cleanup: reaper started interval={interval:.0f}s")

    def stop_cleanup(self) -> None:
        if self._reaper is None:
            return
        self._stop.set()
        self._reaper.join(timeout=5)
        self._reaper = None


__all__ = ["SqlAlchemySessionStore"]
