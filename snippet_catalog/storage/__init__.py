"""
Catalog storage layer.
Two interchangeable stores behind one interface, selected at start-up.
"""
from .interface import Storage, matches_query
from .memory_storage import MemoryStorage
from .database_storage import DatabaseStorage
from .seed_data import SeedData, DEMO_SEED
from .factory import StorageContext, create_storage

__all__ = [
    'Storage',
    'matches_query',
    'MemoryStorage',
    'DatabaseStorage',
    'SeedData',
    'DEMO_SEED',
    'StorageContext',
    'create_storage',
]
