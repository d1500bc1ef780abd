"""
Contact record model.

File: models/contact.py
Created: 2026-10-12
Last Modified: 2026-10-18
"""

from datetime import datetime, timezone
from enum import Enum
import re
from typing import Any, Dict
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Names that mark a row as deleted in the source planilla
DISCARD_SENTINELS = frozenset({"eliminado", "deleted"})

_NON_DIGITS = re.compile(r"\D")


class ContactStatus(str, Enum):
    """Outreach workflow state. Values are the labels used in exports and storage."""

    UNREVIEWED = "sin revisar"
    PLAYING = "jugando"
    CONTACTED = "contactado"
    NOT_INTERESTED = "no interesado"
    NO_MESSAGING = "sin wsp"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = {
    ContactStatus.UNREVIEWED: "Sin Revisar",
    ContactStatus.PLAYING: "Jugando",
    ContactStatus.CONTACTED: "Contactado",
    ContactStatus.NOT_INTERESTED: "No Interesado",
    ContactStatus.NO_MESSAGING: "Sin WSP",
}


class ContactOrigin(str, Enum):
    """Source format that created the record"""

    TABULAR = "PLANILLA"
    CARD = "PC"


def digits_only(value: str) -> str:
    """Strip every non-digit character from a phone string."""
    return _NON_DIGITS.sub("", value or "")


def is_discard_name(name: str) -> bool:
    """True for blank names and the deleted-row sentinel."""
    if not name or not name.strip():
        return True
    return name.strip().lower() in DISCARD_SENTINELS


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Contact(BaseModel):
    """
    One person reconciled across the planilla and vCard sources.

    The `id` is assigned once at creation and survives every merge. The
    natural key used for deduplication is the normalized name, see
    `reconcile.identity`.
    """
    model_config = ConfigDict(
        validate_assignment=True,
        extra='ignore'
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Opaque stable identifier", min_length=1)
    name: str = Field(..., description="Display name, also the identity key once normalized", min_length=1)
    phone: str = Field("", description="Digits only, empty when unknown")
    origin: ContactOrigin = Field(ContactOrigin.TABULAR, description="Format that first created the record")
    status: ContactStatus = Field(ContactStatus.UNREVIEWED, description="Workflow status")
    seen_replied: bool = Field(False, description="VISTO, RESPONDIDO? column")
    recovered: bool = Field(False, description="RECUPERADO column")
    interested: bool = Field(False, description="Answered yes to 'interesado en jugar?'")
    last_updated: datetime = Field(default_factory=_utcnow, description="Time of last mutation")

    @field_validator("name")
    @classmethod
    def _name_not_discarded(cls, value: str) -> str:
        if is_discard_name(value):
            raise ValueError(f"'{value}' is not a usable contact name")
        return value

    @field_validator("phone", mode="before")
    @classmethod
    def _phone_digits(cls, value: Any) -> str:
        if value is None:
            return ""
        return digits_only(str(value))

    def touch(self) -> "Contact":
        """Return a copy with `last_updated` set to now."""
        return self.model_copy(update={"last_updated": _utcnow()})

    def to_store_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dictionary for the key-value store"""
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "origin": self.origin.value,
            "status": self.status.value,
            "seen_replied": self.seen_replied,
            "recovered": self.recovered,
            "interested": self.interested,
            "last_updated": self.last_updated.isoformat(),
        }

    @classmethod
    def from_store_dict(cls, data: Dict[str, Any]) -> "Contact":
        """
        Create a Contact from a stored dictionary.

        Accepts the camelCase keys and millisecond epoch timestamps written by
        the older browser version of the tool.
        """
        data = dict(data)

        for legacy, current in (
            ("seenReplied", "seen_replied"),
            ("lastUpdated", "last_updated"),
        ):
            if legacy in data and current not in data:
                data[current] = data.pop(legacy)

        stamp = data.get("last_updated")
        if isinstance(stamp, (int, float)):
            data["last_updated"] = datetime.fromtimestamp(stamp / 1000, tz=timezone.utc)
        elif isinstance(stamp, str):
            # fromisoformat only accepts a trailing Z from 3.11 on
            if stamp.endswith(("Z", "z")):
                stamp = stamp[:-1] + "+00:00"
            data["last_updated"] = datetime.fromisoformat(stamp)

        return cls(**data)
