"""
Import and export of contact files against the stored collection.

File: service/transfer.py
Created: 2026-10-15
Last Modified: 2026-10-16
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from ..database import DEFAULT_STORE_KEY, LOCAL_DB_PATH, load_collection, save_collection
from ..export import export_tabular, export_vcard
from ..models import Contact
from ..parsing import parse_tabular, parse_vcard
from ..reconcile import IdentityStrategy, MergeSummary, reconcile

log = logging.getLogger(__name__)

PARSERS: Dict[str, Callable[[str], List[Contact]]] = {
    "csv": parse_tabular,
    "vcf": parse_vcard,
}

SERIALIZERS: Dict[str, Callable[[List[Contact]], str]] = {
    "csv": export_tabular,
    "vcf": export_vcard,
}

_EXTENSIONS = {
    ".csv": "csv",
    ".vcf": "vcf",
    ".vcard": "vcf",
}


def detect_format(path: Path) -> Optional[str]:
    """Source format from the file extension: "csv", "vcf", or None."""
    return _EXTENSIONS.get(Path(path).suffix.lower())


def decode_source(raw: bytes) -> str:
    """
    Decode import bytes as UTF-8 (BOM dropped), falling back to cp1252.

    Spreadsheets saved on Windows are often cp1252/Latin-1; undecodable bytes
    become U+FFFD instead of failing the import.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        log.warning("Source is not valid UTF-8, decoding as cp1252")
        return raw.decode("cp1252", errors="replace")


async def read_source(path: Path) -> str:
    """Read an import file as text."""
    raw = await asyncio.to_thread(Path(path).read_bytes)
    return decode_source(raw)


def parse_source(text: str, kind: str) -> List[Contact]:
    """Run the parser for `kind` over raw text."""
    parser = PARSERS.get(kind)
    if parser is None:
        log.warning(f"No parser for format '{kind}'")
        return []
    return parser(text)


async def import_file(
    path: Path,
    kind: Optional[str] = None,
    store_key: str = DEFAULT_STORE_KEY,
    db_path: Path = LOCAL_DB_PATH,
    identity: Optional[IdentityStrategy] = None,
) -> Tuple[List[Contact], MergeSummary]:
    """
    Parse a planilla or vCard file and merge it into the stored collection.

    Args:
        path: File to import
        kind: "csv" or "vcf"; detected from the extension when omitted
        store_key: Key of the collection in the store
        db_path: SQLite store location
        identity: Merge key strategy

    Returns:
        Tuple of (collection after the import, MergeSummary)
    """
    kind = kind or detect_format(path)
    existing = await load_collection(store_key, db_path)

    if kind is None:
        log.warning(f"Unrecognized file type for {path}, nothing imported")
        return existing, MergeSummary()

    text = await read_source(path)
    incoming = parse_source(text, kind)
    if not incoming:
        log.warning(f"No contacts found in {path}")
        return existing, MergeSummary()

    merged, summary = reconcile(existing, incoming, identity)
    await save_collection(merged, store_key, db_path)
    log.info(f"Imported {path}: {summary.added} new, {summary.updated} updated")
    return merged, summary


async def export_file(
    kind: str,
    out_path: Path,
    store_key: str = DEFAULT_STORE_KEY,
    db_path: Path = LOCAL_DB_PATH,
) -> int:
    """
    Write the stored collection to `out_path` as planilla CSV or vCard.

    Returns:
        Number of contacts exported
    """
    serializer = SERIALIZERS.get(kind)
    if serializer is None:
        raise ValueError(f"Unknown export format: {kind}")

    contacts = await load_collection(store_key, db_path)
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    await asyncio.to_thread(out_path.write_text, serializer(contacts), encoding="utf-8")

    log.info(f"Exported {len(contacts)} contacts to {out_path}")
    return len(contacts)
