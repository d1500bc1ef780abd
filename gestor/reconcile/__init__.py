"""
Reconciliation of parsed contacts against the held collection.

File: reconcile/__init__.py
Created: 2026-10-13
Last Modified: 2026-10-14
"""

from .collection import (
    clear_contacts,
    delete_contact,
    edit_contact,
    filter_contacts,
    find_contact,
    set_status,
    status_counts,
)
from .identity import (
    IdentityStrategy,
    NameIdentity,
    PhoneIdentity,
    get_identity_strategy,
    normalize_name,
)
from .merge import MergeSummary, merge_contacts, merge_record, reconcile

__all__ = [
    "clear_contacts",
    "delete_contact",
    "edit_contact",
    "filter_contacts",
    "find_contact",
    "set_status",
    "status_counts",
    "IdentityStrategy",
    "NameIdentity",
    "PhoneIdentity",
    "get_identity_strategy",
    "normalize_name",
    "MergeSummary",
    "merge_contacts",
    "merge_record",
    "reconcile",
]
