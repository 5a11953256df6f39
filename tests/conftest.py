"""
Shared fixtures for catalog storage tests.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from snippet_catalog.models import CategoryCreate, ComponentCreate
from snippet_catalog.storage import MemoryStorage, SeedData


@pytest.fixture
def store():
    """Memory store seeded with Buttons (id 1) and Headings (id 2) only."""
    return MemoryStorage(SeedData(categories=[
        CategoryCreate(name="Buttons", icon="fas fa-hand-pointer"),
        CategoryCreate(name="Headings", icon="fas fa-heading"),
    ]))


@pytest.fixture
def demo_store():
    """Memory store with the default demo data."""
    return MemoryStorage()


@pytest.fixture
def make_component():
    """Factory for component insert data."""
    def _make(name="Card", category_id=1, **kwargs):
        data = {
            "name": name,
            "html": f"<div class=\"{name.lower()}\"></div>",
            "css": f".{name.lower()} {{ display: block; }}",
            "js": "",
            "category_id": category_id,
        }
        data.update(kwargs)
        return ComponentCreate(**data)
    return _make


@pytest.fixture
def mock_conn():
    """Mock asyncpg connection; transaction() works as an async context manager."""
    conn = MagicMock()
    conn.fetch = AsyncMock(return_value=[])
    conn.fetchrow = AsyncMock(return_value=None)
    conn.fetchval = AsyncMock(return_value=None)
    conn.execute = AsyncMock(return_value="UPDATE 1")
    return conn


@pytest.fixture
def mock_db(mock_conn):
    """Mock Database whose acquire() yields mock_conn."""
    db = MagicMock()
    db.acquire.return_value.__aenter__.return_value = mock_conn
    return db
