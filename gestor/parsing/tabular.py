"""
Parser for the planilla (CSV) export.

File: parsing/tabular.py
Created: 2026-10-12
Last Modified: 2026-10-15

The planilla is a loose CSV: the first line is the header, cells are split on
every comma and double quotes are simply removed. Quoted cells containing
commas are not supported by the format.
"""

import logging
import re
from typing import List, Optional

from ..models import Contact, ContactOrigin, is_discard_name
from .status import classify_status

log = logging.getLogger(__name__)

# Header names, matched case-insensitively after quotes are removed
USERS_COLUMN = "usuarios"
REVIEW_COLUMN = "estado de revision"
ACTUAL_COLUMN = "estado actual"
INTEREST_COLUMN = "interesado en jugar?"

# Fixed positional boolean columns
SEEN_REPLIED_INDEX = 4
RECOVERED_INDEX = 5

YES_TOKEN = "SI"

_LINE_SPLIT = re.compile(r"\r?\n")


def _clean_cell(cell: str) -> str:
    return cell.replace('"', "").strip()


def split_row(line: str) -> List[str]:
    """Split a planilla line into cleaned cells."""
    return [_clean_cell(cell) for cell in line.split(",")]


def _cell(cells: List[str], index: Optional[int]) -> str:
    if index is None or index >= len(cells):
        return ""
    return cells[index]


def _column_index(headers: List[str], name: str) -> Optional[int]:
    try:
        return headers.index(name)
    except ValueError:
        return None


def parse_tabular(text: str) -> List[Contact]:
    """
    Parse planilla text into new Contact records.

    Rows with an empty user cell or the "eliminado" sentinel are skipped. If
    the header has no "usuarios" column the text is not a planilla and an
    empty list is returned.

    The `interested` flag is True only when the interest cell explicitly
    says "si"; an empty answer counts as not interested.

    Args:
        text: Raw file contents

    Returns:
        One Contact per accepted row, in file order
    """
    lines = _LINE_SPLIT.split(text or "")
    if len(lines) < 2:
        log.warning("Planilla has no data rows")
        return []

    headers = [cell.lower() for cell in split_row(lines[0])]
    idx_user = _column_index(headers, USERS_COLUMN)
    idx_review = _column_index(headers, REVIEW_COLUMN)
    idx_actual = _column_index(headers, ACTUAL_COLUMN)
    idx_interest = _column_index(headers, INTEREST_COLUMN)

    if idx_user is None:
        log.warning(f"No '{USERS_COLUMN}' column in header, not a planilla: {headers}")
        return []

    contacts = []
    skipped = 0
    for line_no, line in enumerate(lines[1:], start=2):
        cells = split_row(line)
        name = _cell(cells, idx_user)

        if is_discard_name(name):
            skipped += 1
            log.debug(f"Skipping line {line_no}: empty or deleted user '{name}'")
            continue

        review = _cell(cells, idx_review).lower()
        actual = _cell(cells, idx_actual).lower()
        interest = _cell(cells, idx_interest).lower()

        contacts.append(Contact(
            name=name,
            phone="",
            origin=ContactOrigin.TABULAR,
            status=classify_status(review, actual, interest),
            seen_replied=_cell(cells, SEEN_REPLIED_INDEX).upper() == YES_TOKEN,
            recovered=_cell(cells, RECOVERED_INDEX).upper() == YES_TOKEN,
            interested=interest == YES_TOKEN.lower(),
        ))

    log.info(f"Parsed {len(contacts)} contacts from planilla ({skipped} rows skipped)")
    return contacts
