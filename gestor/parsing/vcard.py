"""
Parser for vCard (.vcf) contact exports.

File: parsing/vcard.py
Created: 2026-10-12
Last Modified: 2026-10-14
"""

import logging
import re
from typing import List

from ..models import Contact, ContactOrigin, ContactStatus, digits_only, is_discard_name

log = logging.getLogger(__name__)

NO_NAME = "Sin nombre"

_BLOCK_END = re.compile(r"END:VCARD", re.IGNORECASE)
_BLOCK_BEGIN = re.compile(r"BEGIN:VCARD", re.IGNORECASE)
# Optional "item1." group prefix as written by Apple Contacts
_FN_LINE = re.compile(r"^(?:[\w-]+\.)?FN(?:;[^:\r\n]*)?:(.*)$", re.IGNORECASE | re.MULTILINE)
_TEL_LINE = re.compile(r"^(?:[\w-]+\.)?TEL[^:\r\n]*:(.*)$", re.IGNORECASE | re.MULTILINE)
_FOLDED = re.compile(r"\r?\n[ \t]")


def unfold_lines(text: str) -> str:
    """Join folded continuation lines (leading space or tab) onto the previous line."""
    return _FOLDED.sub("", text)


def parse_vcard(text: str) -> List[Contact]:
    """
    Parse vCard text into new Contact records.

    Each BEGIN:VCARD ... END:VCARD block yields one contact with the first FN
    value as name and the digits of the first TEL value as phone. Blocks
    without a BEGIN marker, or named with the deleted sentinel, are ignored.

    Args:
        text: Raw file contents

    Returns:
        One Contact per valid block, in file order
    """
    contacts = []
    for block in _BLOCK_END.split(unfold_lines(text or "")):
        if not _BLOCK_BEGIN.search(block):
            continue

        name_match = _FN_LINE.search(block)
        name = name_match.group(1).strip() if name_match else ""
        if not name:
            name = NO_NAME
        elif is_discard_name(name):
            log.debug(f"Skipping vCard marked as deleted: '{name}'")
            continue

        phone_match = _TEL_LINE.search(block)
        phone = digits_only(phone_match.group(1)) if phone_match else ""

        contacts.append(Contact(
            name=name,
            phone=phone,
            origin=ContactOrigin.CARD,
            status=ContactStatus.UNREVIEWED,
            seen_replied=False,
            recovered=False,
            interested=False,
        ))

    log.info(f"Parsed {len(contacts)} contacts from vCard")
    return contacts
