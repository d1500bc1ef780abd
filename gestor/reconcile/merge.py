"""
Merges freshly parsed contacts into the held collection.

File: reconcile/merge.py
Created: 2026-10-13
Last Modified: 2026-10-16
"""

from dataclasses import dataclass
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..models import Contact
from .identity import IdentityStrategy, NameIdentity, normalize_name

log = logging.getLogger(__name__)

# Fields an incoming record never overwrites on an existing one
_PRESERVED_FIELDS = ("id", "origin", "phone")


@dataclass
class MergeSummary:
    """Counts of what a merge did to the collection."""

    added: int = 0
    updated: int = 0

    @property
    def total(self) -> int:
        return self.added + self.updated


def merge_record(existing: Contact, incoming: Contact) -> Contact:
    """
    Overlay an incoming record onto an existing one with the same identity.

    Every field comes from `incoming` except the id and origin, which stay with
    the existing record, and the phone, which only falls back to the incoming
    value when the existing one is empty.
    """
    update = {
        field: getattr(incoming, field)
        for field in Contact.model_fields
        if field not in _PRESERVED_FIELDS
    }
    update["phone"] = existing.phone or incoming.phone
    return existing.model_copy(update=update)


def reconcile(
    existing: Iterable[Contact],
    incoming: Iterable[Contact],
    identity: Optional[IdentityStrategy] = None,
) -> Tuple[List[Contact], MergeSummary]:
    """
    Merge incoming contacts into an existing collection.

    Existing entries keep their relative order; contacts with a new key are
    appended in the order first seen. Neither input is mutated.

    An incoming record is matched by its identity key first and by its
    normalized name second, so a planilla row without a phone still lands on
    the contact a phone-keyed strategy filed under its number.

    Args:
        existing: Collection currently held
        incoming: Records produced by one of the parsers
        identity: Key strategy, defaults to NameIdentity

    Returns:
        Tuple of (merged collection, MergeSummary)
    """
    identity = identity or NameIdentity()
    summary = MergeSummary()

    # slot key -> contact, plus every lookup key (identity and name) -> slot key
    by_key: Dict[str, Contact] = {}
    aliases: Dict[str, str] = {}

    def register(slot: str, contact: Contact) -> None:
        aliases.setdefault(identity.resolve(contact), slot)
        aliases.setdefault(normalize_name(contact.name), slot)

    for contact in existing:
        key = identity.resolve(contact)
        by_key[key] = contact
        register(key, contact)

    for contact in incoming:
        key = identity.resolve(contact)
        slot = aliases.get(key) or aliases.get(normalize_name(contact.name))
        if slot is None:
            slot = key
            by_key[slot] = contact
            summary.added += 1
        else:
            by_key[slot] = merge_record(by_key[slot], contact)
            summary.updated += 1
        register(slot, by_key[slot])

    log.info(f"Merged {summary.total} contacts: {summary.added} added, {summary.updated} updated")
    return list(by_key.values()), summary


def merge_contacts(
    existing: Iterable[Contact],
    incoming: Iterable[Contact],
    identity: Optional[IdentityStrategy] = None,
) -> List[Contact]:
    """Merge incoming contacts into an existing collection, see `reconcile`."""
    merged, _ = reconcile(existing, incoming, identity)
    return merged
