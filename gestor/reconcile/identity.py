"""
Identity resolution: which key two records must share to be the same person.

File: reconcile/identity.py
Created: 2026-10-13
Last Modified: 2026-10-15
"""

import logging
from typing import Optional, Protocol

import phonenumbers

from ..models import Contact

log = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    """Lower-case, trimmed name used as the deduplication key."""
    return (name or "").strip().lower()


class IdentityStrategy(Protocol):
    """Maps a contact to the key it is merged under."""

    def resolve(self, contact: Contact) -> str:
        ...


class NameIdentity:
    """Default strategy: the normalized name is the identity."""

    def resolve(self, contact: Contact) -> str:
        return normalize_name(contact.name)


class PhoneIdentity:
    """
    Phone-first strategy.

    Contacts with a valid phone number are keyed by its E.164 form, so a
    renamed contact still merges onto the same record. Contacts without a
    usable phone fall back to the normalized name.
    """

    def __init__(self, default_region: str = "AR"):
        self.default_region = default_region

    def _e164(self, phone: str) -> Optional[str]:
        if not phone:
            return None
        # Stored phones are bare digits, so try them as international first
        for candidate, region in ((f"+{phone}", None), (phone, self.default_region)):
            try:
                parsed = phonenumbers.parse(candidate, region)
            except phonenumbers.NumberParseException:
                continue
            if phonenumbers.is_valid_number(parsed):
                return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
        log.debug(f"Phone '{phone}' is not a valid number, keying by name")
        return None

    def resolve(self, contact: Contact) -> str:
        e164 = self._e164(contact.phone)
        if e164:
            return f"tel:{e164}"
        return normalize_name(contact.name)


def get_identity_strategy(name: str, default_region: str = "AR") -> IdentityStrategy:
    """Build a strategy from its config name ("name" or "phone")."""
    if name == "phone":
        return PhoneIdentity(default_region)
    if name != "name":
        log.warning(f"Unknown identity strategy '{name}', using name")
    return NameIdentity()
