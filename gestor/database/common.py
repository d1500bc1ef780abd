"""
Common database constants

File: database/common.py
Created: 2026-10-14
Last Modified: 2026-10-14
"""

from pathlib import Path

DATA_DIR = Path(__file__).parent.parent.parent / "data"
LOCAL_DB_PATH = DATA_DIR / "contacts.db"

# Key the collection lives under, shared with the browser version's localStorage
DEFAULT_STORE_KEY = "gestor_v3_final_data"

__all__ = [
    "DATA_DIR",
    "LOCAL_DB_PATH",
    "DEFAULT_STORE_KEY",
]
