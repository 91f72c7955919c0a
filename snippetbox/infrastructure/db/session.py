# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from snippetbox.shared.config import DatabaseConfig
from snippetbox.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _build_engine(config: DatabaseConfig) -> Engine:
    if config.url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
        return create_engine(config.url, echo=False, connect_args=connect_args)
    return create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        pool_timeout=config.pool_timeout,
    )


class Database:
    """Engine plus a thread-local session registry for one application."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = _build_engine(config)
        self.session_factory = scoped_session(
            sessionmaker(
                bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
            )
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self.session_factory()
        logger.debug("db.session: opened scoped session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed scoped session")
        except Exception:
            logger.exception("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            self.session_factory.remove()
            logger.debug("db.session: closed scoped session")

    def init_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        self.session_factory.remove()
        self.engine.dispose()
