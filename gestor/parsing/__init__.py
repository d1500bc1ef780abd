"""
Parsers turning raw planilla / vCard text into Contact records.

File: parsing/__init__.py
Created: 2026-10-12
Last Modified: 2026-10-12
"""

from .status import classify_status
from .tabular import parse_tabular, split_row
from .vcard import NO_NAME, parse_vcard, unfold_lines

__all__ = [
    "classify_status",
    "parse_tabular",
    "split_row",
    "parse_vcard",
    "unfold_lines",
    "NO_NAME",
]
