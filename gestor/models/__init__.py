"""
Shared data models for the contact manager.
"""

from .contact import (
    DISCARD_SENTINELS,
    STATUS_LABELS,
    Contact,
    ContactOrigin,
    ContactStatus,
    digits_only,
    is_discard_name,
)

__all__ = [
    "DISCARD_SENTINELS",
    "STATUS_LABELS",
    "Contact",
    "ContactOrigin",
    "ContactStatus",
    "digits_only",
    "is_discard_name",
]
