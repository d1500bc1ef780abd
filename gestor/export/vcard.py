"""
vCard 3.0 export.

File: export/vcard.py
Created: 2026-10-14
Last Modified: 2026-10-14
"""

from typing import Sequence

from ..models import Contact


def contact_to_vcard(contact: Contact) -> str:
    """Render one contact as a vCard block (empty phones still get a TEL line)."""
    return "\n".join([
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"FN:{contact.name}",
        f"TEL;TYPE=CELL:{contact.phone}",
        f"NOTE:Origin:{contact.origin.value} Status:{contact.status.value}",
        "END:VCARD",
    ])


def export_vcard(contacts: Sequence[Contact]) -> str:
    """Render the collection as vCard text, blocks separated by a blank line."""
    return "\n\n".join(contact_to_vcard(c) for c in contacts)
