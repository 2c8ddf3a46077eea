# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from rentcar.shared.config import DatabaseConfig
from rentcar.shared.logging import logger


class Base(DeclarativeBase):
    pass


def build_engine(config: DatabaseConfig) -> Engine:
    options: dict[str, Any] = {"pool_pre_ping": True}
    if config.url.startswith("sqlite"):
        # Worker threads share the file; pool sizing does not apply to SQLite.
        options["connect_args"] = {
            "check_same_thread": False,
            "timeout": config.pool_timeout,
        }
    else:
        options |= {
            "pool_size": config.pool_size,
            "max_overflow": config.max_overflow,
            "pool_timeout": config.pool_timeout,
        }
    return create_engine(config.url, **options)


class Database:
    """Engine plus thread-scoped sessions for one ``DatabaseConfig``."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine = build_engine(config)
        self.sessions = scoped_session(
            sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """One unit of work: commit on success, roll back and re-raise on failure."""
        session = self.sessions()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            logger.opt(exception=True).warning("db.session: rolled back")
            raise
        finally:
            self.sessions.remove()

    def create_schema(self) -> None:
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info(f"db: schema ready ({self.engine.dialect.name})")

    def drop_schema(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def ping(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.scalar(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("db: unreachable")
            return False
        return True

    def dispose(self) -> None:
        self.sessions.remove()
        self.engine.dispose()
