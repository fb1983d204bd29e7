"""Thin adapter owning the SQLAlchemy engine and session factory."""

from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from typing import Any

from sqlalchemy import create_engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from image_uploads.core.config import DatabaseConfig
from image_uploads.core.infrastructure.sql.schema import Base


class DatabaseAdapter:
    """Low-level database access (mechanical, no error handling).

    This adapter:
    - Builds the engine from an explicit DatabaseConfig
    - Hands out transactional sessions
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, config: DatabaseConfig) -> None:
        url = make_url(config.url)
        engine_kwargs: dict[str, Any] = {"echo": config.echo}

        # In-memory SQLite lives in a single connection that must be shared.
        if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(url, **engine_kwargs)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session inside a transaction.

        Commits when the block exits cleanly, rolls back on error.
        """
        with self._session_factory.begin() as session:
            yield session

    def create_schema(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


@lru_cache(maxsize=1)
def default_database_adapter() -> DatabaseAdapter:
    """Process-wide adapter built from the environment.

    Warm Lambda invocations reuse its engine and connection pool.
    """
    return DatabaseAdapter(DatabaseConfig.from_env())
