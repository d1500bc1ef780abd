"""
File: database/create_tables.py
Created: 2026-10-14
Last Modified: 2026-10-14
"""

import logging
from pathlib import Path

import aiosqlite

from .common import LOCAL_DB_PATH

log = logging.getLogger(__name__)


async def init_local_database(db_path: Path = LOCAL_DB_PATH) -> None:
    """Initialize the local SQLite key-value store."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as conn:
        await conn.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,  -- JSON payload
                updated_at TEXT DEFAULT CURRENT_TIMESTAMP
            )
        """)
        await conn.commit()

    log.debug(f"Store ready at {db_path}")
