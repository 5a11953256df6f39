"""
Selection of the active catalog store.

The store is chosen once, when the ``StorageContext`` is built, and the same
instance is handed to every caller for the lifetime of the process.
"""
import logging
from typing import Optional

from ..config import Config
from ..database.database import Database
from .database_storage import DatabaseStorage
from .interface import Storage
from .memory_storage import MemoryStorage

logger = logging.getLogger(__name__)

# Sentinel so an explicit None can force the in-memory store
_FROM_CONFIG = object()


def create_storage(database_url=_FROM_CONFIG) -> Storage:
    """
    Build the store for the given configuration.

    Args:
        database_url: Database connection URL. Defaults to
            ``Config.DATABASE_URL``; a falsy value selects the in-memory store.

    Returns:
        A ``DatabaseStorage`` (not yet connected) or a seeded ``MemoryStorage``
    """
    if database_url is _FROM_CONFIG:
        database_url = Config.DATABASE_URL

    if database_url:
        logger.info("DATABASE_URL is set, using database storage")
        return DatabaseStorage(Database(database_url))

    logger.info("No DATABASE_URL configured, using in-memory storage")
    return MemoryStorage()


class StorageContext:
    """Holds the process-wide store and manages its connection lifecycle.

    Build one at start-up and pass it to the request-handling layer.
    """

    def __init__(self, storage: Optional[Storage] = None):
        self.storage = storage if storage is not None else create_storage()

    @property
    def database(self) -> Optional[Database]:
        if isinstance(self.storage, DatabaseStorage):
            return self.storage.db
        return None

    async def startup(self):
        """Connect the database store; nothing to do for the in-memory one"""
        if self.database is not None:
            await self.database.connect()

    async def shutdown(self):
        if self.database is not None:
            await self.database.close()

    async def __aenter__(self) -> Storage:
        await self.startup()
        return self.storage

    async def __aexit__(self, exc_type, exc, tb):
        await self.shutdown()
