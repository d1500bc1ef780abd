"""
File: database/__init__.py
Created: 2026-10-14
Last Modified: 2026-10-14
"""

from .common import DATA_DIR, DEFAULT_STORE_KEY, LOCAL_DB_PATH
from .contacts import load_collection, save_collection
from .create_tables import init_local_database

__all__ = [
    "DATA_DIR",
    "DEFAULT_STORE_KEY",
    "LOCAL_DB_PATH",
    "init_local_database",
    "load_collection",
    "save_collection",
]
