"""
Load and save the contact collection in the key-value store.

File: database/contacts.py
Created: 2026-10-14
Last Modified: 2026-10-16
"""

from datetime import datetime, timezone
import json
import logging
from pathlib import Path
from typing import List, Sequence

import aiosqlite
from pydantic import ValidationError

from ..models import Contact
from .common import DEFAULT_STORE_KEY, LOCAL_DB_PATH
from .create_tables import init_local_database

log = logging.getLogger(__name__)


async def load_collection(
    key: str = DEFAULT_STORE_KEY,
    db_path: Path = LOCAL_DB_PATH,
) -> List[Contact]:
    """
    Load the collection stored under `key`.

    A missing store, missing key or unreadable payload yields an empty
    collection. Individual entries that fail validation are skipped.
    """
    if not Path(db_path).exists():
        return []

    try:
        async with aiosqlite.connect(db_path) as conn:
            async with conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ) as cursor:
                row = await cursor.fetchone()
    except Exception as e:
        log.error(f"Error reading store {db_path}: {e}")
        return []

    if not row:
        return []

    try:
        payload = json.loads(row[0])
    except json.JSONDecodeError as e:
        log.error(f"Stored collection under '{key}' is not valid JSON: {e}")
        return []

    if not isinstance(payload, list):
        log.error(f"Stored collection under '{key}' is not a list")
        return []

    contacts = []
    for entry in payload:
        try:
            contacts.append(Contact.from_store_dict(entry))
        except (ValidationError, TypeError, ValueError) as e:
            log.warning(f"Skipping unreadable stored contact {entry!r}: {e}")

    log.info(f"Loaded {len(contacts)} contacts from '{key}'")
    return contacts


async def save_collection(
    contacts: Sequence[Contact],
    key: str = DEFAULT_STORE_KEY,
    db_path: Path = LOCAL_DB_PATH,
) -> int:
    """
    Replace the collection stored under `key`.

    Returns:
        Number of contacts written
    """
    await init_local_database(db_path)

    payload = json.dumps([c.to_store_dict() for c in contacts], ensure_ascii=False)
    async with aiosqlite.connect(db_path) as conn:
        await conn.execute("""
            INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                value = excluded.value,
                updated_at = excluded.updated_at
        """, (key, payload, datetime.now(timezone.utc).isoformat()))
        await conn.commit()

    log.info(f"Saved {len(contacts)} contacts under '{key}'")
    return len(contacts)
