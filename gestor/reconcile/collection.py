"""
Operations on a held contact collection: stats, search and single-record edits.

File: reconcile/collection.py
Created: 2026-10-14
Last Modified: 2026-10-16

Every function takes the collection and returns a new value; the caller owns
the collection and decides when to persist it.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..models import Contact, ContactStatus, digits_only, is_discard_name

log = logging.getLogger(__name__)


def status_counts(contacts: Sequence[Contact]) -> Dict[str, int]:
    """Count contacts per status, plus a "total" entry."""
    counts = {"total": len(contacts)}
    for status in ContactStatus:
        counts[status.value] = sum(1 for c in contacts if c.status == status)
    return counts


def filter_contacts(
    contacts: Sequence[Contact],
    status: Optional[ContactStatus] = None,
    search: str = "",
) -> List[Contact]:
    """
    Contacts matching a status (None for all) and a search term.

    The term matches case-insensitively against the name, or as a plain
    substring of the phone.
    """
    term = (search or "").lower()
    return [
        c for c in contacts
        if (status is None or c.status == status)
        and (term in c.name.lower() or term in c.phone)
    ]


def find_contact(contacts: Sequence[Contact], contact_id: str) -> Optional[Contact]:
    return next((c for c in contacts if c.id == contact_id), None)


def set_status(contacts: Sequence[Contact], contact_id: str, status: ContactStatus) -> List[Contact]:
    """Set the status of one contact; unknown ids leave the collection unchanged."""
    if find_contact(contacts, contact_id) is None:
        log.warning(f"No contact with id {contact_id}, status not changed")
        return list(contacts)

    return [
        c.model_copy(update={"status": ContactStatus(status)}).touch() if c.id == contact_id else c
        for c in contacts
    ]


def edit_contact(
    contacts: Sequence[Contact],
    contact_id: str,
    name: Optional[str] = None,
    phone: Optional[str] = None,
) -> List[Contact]:
    """
    Edit the name and/or phone of one contact.

    The phone is reduced to its digits. An empty or deleted-sentinel name is
    rejected and leaves the collection unchanged.
    """
    if find_contact(contacts, contact_id) is None:
        log.warning(f"No contact with id {contact_id}, nothing edited")
        return list(contacts)

    update = {}
    if name is not None:
        if is_discard_name(name):
            log.warning(f"Rejected name '{name}' for contact {contact_id}")
            return list(contacts)
        update["name"] = name.strip()
    if phone is not None:
        update["phone"] = digits_only(phone)

    return [
        c.model_copy(update=update).touch() if c.id == contact_id else c
        for c in contacts
    ]


def delete_contact(contacts: Sequence[Contact], contact_id: str) -> List[Contact]:
    """Remove a contact by id."""
    remaining = [c for c in contacts if c.id != contact_id]
    if len(remaining) == len(contacts):
        log.warning(f"No contact with id {contact_id}, nothing deleted")
    return remaining


def clear_contacts() -> List[Contact]:
    """Drop the whole collection."""
    return []
