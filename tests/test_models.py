"""Tests for the Contact model."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from gestor.models import Contact, ContactOrigin, ContactStatus, is_discard_name


def test_defaults():
    contact = Contact(name="Ana")
    assert contact.id
    assert contact.phone == ""
    assert contact.status == ContactStatus.UNREVIEWED
    assert contact.origin == ContactOrigin.TABULAR
    assert not (contact.seen_replied or contact.recovered or contact.interested)
    assert contact.last_updated.tzinfo is not None


def test_ids_are_unique():
    assert Contact(name="Ana").id != Contact(name="Ana").id


def test_phone_is_reduced_to_digits():
    contact = Contact(name="Ana", phone="+54 (351) 000-111")
    assert contact.phone == "54351000111"

    contact.phone = "011-4444"
    assert contact.phone == "0114444"

    assert Contact(name="Ana", phone=None).phone == ""


@pytest.mark.parametrize("name", ["", "   ", "eliminado", "ELIMINADO", " Deleted "])
def test_unusable_names_are_rejected(name):
    assert is_discard_name(name)
    with pytest.raises(ValidationError):
        Contact(name=name)


def test_status_labels():
    assert ContactStatus.NO_MESSAGING.label == "Sin WSP"
    assert ContactStatus("jugando") is ContactStatus.PLAYING


class TestStoreDict:

    def test_round_trip(self):
        contact = Contact(
            name="Ana",
            phone="111",
            origin=ContactOrigin.CARD,
            status=ContactStatus.CONTACTED,
            recovered=True,
        )
        data = contact.to_store_dict()

        assert data["status"] == "contactado"
        assert data["origin"] == "PC"
        assert Contact.from_store_dict(data) == contact

    def test_legacy_browser_entry(self):
        entry = {
            "id": "abc",
            "name": "Ana",
            "phone": "111",
            "origin": "PLANILLA",
            "status": "jugando",
            "seenReplied": True,
            "recovered": False,
            "interested": True,
            "lastUpdated": 1767225600000,
        }
        contact = Contact.from_store_dict(entry)

        assert contact.id == "abc"
        assert contact.status == ContactStatus.PLAYING
        assert contact.seen_replied is True
        assert contact.last_updated == datetime(2026, 1, 1, tzinfo=timezone.utc)

    def test_unknown_keys_ignored(self):
        contact = Contact.from_store_dict({"name": "Ana", "color": "blue"})
        assert contact.name == "Ana"

    def test_zulu_timestamp(self):
        contact = Contact.from_store_dict({"name": "Ana", "last_updated": "2026-01-01T00:00:00Z"})
        assert contact.last_updated == datetime(2026, 1, 1, tzinfo=timezone.utc)

    def test_json_dump_uses_iso_timestamps(self):
        contact = Contact(name="Ana", last_updated=datetime(2026, 1, 1, tzinfo=timezone.utc))

        assert "json_encoders" not in Contact.model_config
        assert '"last_updated":"2026-01-01T00:00:00Z"' in contact.model_dump_json()
