"""
Tests for store selection and the storage context.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from snippet_catalog.config import Config
from snippet_catalog.storage import DatabaseStorage, MemoryStorage, StorageContext, create_storage


class TestCreateStorage:
    """The database URL alone decides which store is built."""

    def test_without_url_uses_memory(self):
        assert isinstance(create_storage(None), MemoryStorage)
        assert isinstance(create_storage(""), MemoryStorage)

    def test_with_url_uses_database(self):
        storage = create_storage("postgresql://localhost/catalog")

        assert isinstance(storage, DatabaseStorage)
        assert storage.db.database_url == "postgresql://localhost/catalog"
        assert storage.db.pool is None

    def test_defaults_to_config(self, monkeypatch):
        monkeypatch.setattr(Config, "DATABASE_URL", "postgresql://localhost/catalog")
        assert isinstance(create_storage(), DatabaseStorage)

        monkeypatch.setattr(Config, "DATABASE_URL", None)
        assert isinstance(create_storage(), MemoryStorage)


class TestStorageContext:
    """Lifecycle of the process-wide store."""

    @pytest.mark.asyncio
    async def test_memory_context(self):
        context = StorageContext(MemoryStorage())

        async with context as storage:
            assert storage is context.storage
            assert context.database is None
            assert len(await storage.get_categories()) == 7

    @pytest.mark.asyncio
    async def test_database_context_connects_and_closes(self):
        db = MagicMock()
        db.connect = AsyncMock()
        db.close = AsyncMock()
        context = StorageContext(DatabaseStorage(db))

        async with context as storage:
            db.connect.assert_awaited_once()
            assert isinstance(storage, DatabaseStorage)

        db.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_same_instance_for_all_callers(self, monkeypatch):
        monkeypatch.setattr(Config, "DATABASE_URL", None)
        context = StorageContext()

        async with context as first:
            assert first is context.storage
            assert isinstance(first, MemoryStorage)

    @pytest.mark.asyncio
    async def test_contexts_are_isolated(self, make_component):
        first = StorageContext(MemoryStorage())
        second = StorageContext(MemoryStorage())

        await first.storage.create_component(make_component())

        assert len(await first.storage.get_components()) == 5
        assert len(await second.storage.get_components()) == 4
