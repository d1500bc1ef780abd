"""Tests for the SQLite key-value store."""

import asyncio
import json

import aiosqlite

from gestor.database import init_local_database, load_collection, save_collection
from gestor.models import ContactStatus


def test_missing_store_loads_empty(tmp_path):
    assert asyncio.run(load_collection("k", tmp_path / "none.db")) == []


def test_save_then_load(tmp_path, make_contact):
    db_path = tmp_path / "contacts.db"
    contacts = [make_contact("Ana", phone="111", status=ContactStatus.PLAYING), make_contact("Bruno")]

    written = asyncio.run(save_collection(contacts, "k", db_path))
    loaded = asyncio.run(load_collection("k", db_path))

    assert written == 2
    assert loaded == contacts


def test_save_replaces_previous_value(tmp_path, make_contact):
    db_path = tmp_path / "contacts.db"
    asyncio.run(save_collection([make_contact("Ana"), make_contact("Bruno")], "k", db_path))
    asyncio.run(save_collection([make_contact("Carla")], "k", db_path))

    assert [c.name for c in asyncio.run(load_collection("k", db_path))] == ["Carla"]


def test_keys_are_independent(tmp_path, make_contact):
    db_path = tmp_path / "contacts.db"
    asyncio.run(save_collection([make_contact("Ana")], "a", db_path))

    assert asyncio.run(load_collection("b", db_path)) == []


async def _write_raw(db_path, key, value):
    await init_local_database(db_path)
    async with aiosqlite.connect(db_path) as conn:
        await conn.execute("INSERT INTO kv_store (key, value) VALUES (?, ?)", (key, value))
        await conn.commit()


def test_corrupted_payload_loads_empty(tmp_path):
    db_path = tmp_path / "contacts.db"
    asyncio.run(_write_raw(db_path, "k", "{not json"))
    assert asyncio.run(load_collection("k", db_path)) == []


def test_bad_entries_are_skipped(tmp_path):
    db_path = tmp_path / "contacts.db"
    payload = json.dumps([
        {"name": "Ana", "status": "contactado"},
        {"name": ""},
        {"name": "Bruno", "status": "???"},
        "junk",
    ])
    asyncio.run(_write_raw(db_path, "k", payload))

    loaded = asyncio.run(load_collection("k", db_path))
    assert [c.name for c in loaded] == ["Ana"]
    assert loaded[0].status == ContactStatus.CONTACTED
