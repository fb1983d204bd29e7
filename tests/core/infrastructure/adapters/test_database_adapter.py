import pytest
from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError

from image_uploads.core.config import DatabaseConfig
from image_uploads.core.infrastructure.adapters.database_adapter import (
    DatabaseAdapter,
    default_database_adapter,
)
from image_uploads.core.infrastructure.sql.schema import UploadRecord
from image_uploads.core.infrastructure.sql.sql_upload_metadata import SqlUploadMetadata
from image_uploads.core.models.errors import ConfigurationError


class TestDatabaseAdapter:
    def test_create_schema(self, database) -> None:
        assert inspect(database.engine).has_table("uploads")

    def test_in_memory_database_is_shared_across_sessions(self, database) -> None:
        with database.session() as session:
            session.add(UploadRecord(name="a.png", remote_key="images/a.png", remote_url="u"))

        with database.session() as session:
            names = list(session.scalars(select(UploadRecord.name)))

        assert names == ["a.png"]

    def test_session_rolls_back_on_error(self, database, count_uploads) -> None:
        with pytest.raises(IntegrityError):
            with database.session() as session:
                session.add(UploadRecord(name="a.png", remote_key="images/a.png", remote_url="u"))
                session.add(UploadRecord(name="b.png", remote_key="images/a.png", remote_url="u"))

        assert count_uploads() == 0

    def test_file_database_creates_schema(self, tmp_path) -> None:
        adapter = DatabaseAdapter(DatabaseConfig(url=f"sqlite:///{tmp_path / 'uploads.db'}"))
        adapter.create_schema()

        assert inspect(adapter.engine).has_table("uploads")
        adapter.dispose()


@pytest.fixture
def fresh_default_adapter():
    """Clear the process-wide adapter before and after the test."""
    default_database_adapter.cache_clear()
    yield
    if default_database_adapter.cache_info().currsize:
        default_database_adapter().dispose()
    default_database_adapter.cache_clear()


class TestDefaultDatabaseAdapter:
    def test_is_shared_between_repositories(self, fresh_default_adapter) -> None:
        first = SqlUploadMetadata()
        second = SqlUploadMetadata()

        assert first._db is second._db
        assert first._db is default_database_adapter()

    def test_missing_url_is_not_cached(self, fresh_default_adapter, monkeypatch) -> None:
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ConfigurationError):
            default_database_adapter()

        monkeypatch.setenv("DATABASE_URL", "sqlite://")

        assert isinstance(default_database_adapter(), DatabaseAdapter)
