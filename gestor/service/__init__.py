"""
File-level import/export wiring parsers, merge and storage together.

File: service/__init__.py
Created: 2026-10-15
Last Modified: 2026-10-15
"""

from .transfer import (
    decode_source,
    detect_format,
    export_file,
    import_file,
    parse_source,
    read_source,
)

__all__ = [
    "decode_source",
    "detect_format",
    "export_file",
    "import_file",
    "parse_source",
    "read_source",
]
