"""
Serializers rendering the collection back to planilla or vCard text.

File: export/__init__.py
Created: 2026-10-14
Last Modified: 2026-10-15
"""

from datetime import date
from typing import Optional

from .tabular import PLANILLA_HEADERS, export_tabular
from .vcard import contact_to_vcard, export_vcard

EXPORT_KINDS = ("csv", "vcf")


def export_filename(kind: str, when: Optional[date] = None) -> str:
    """Default download name for an export, e.g. planilla_gestion_2026-10-14.csv"""
    when = when or date.today()
    if kind == "csv":
        return f"planilla_gestion_{when.isoformat()}.csv"
    if kind == "vcf":
        return f"contactos_export_{when.isoformat()}.vcf"
    raise ValueError(f"Unknown export kind: {kind}")


__all__ = [
    "EXPORT_KINDS",
    "PLANILLA_HEADERS",
    "contact_to_vcard",
    "export_filename",
    "export_tabular",
    "export_vcard",
]
