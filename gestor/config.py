"""
Runtime configuration for the contact manager.

File: config.py
Created: 2026-10-15
Last Modified: 2026-10-16
"""

from dataclasses import dataclass, field
import os
from pathlib import Path

from .database.common import DEFAULT_STORE_KEY, LOCAL_DB_PATH


@dataclass
class GestorConfig:
    """Paths, store key and merge options. Override through GESTOR_* env vars."""

    # Storage
    db_path: Path = field(default_factory=lambda: LOCAL_DB_PATH)
    store_key: str = DEFAULT_STORE_KEY

    # Merge
    identity: str = "name"  # "name" or "phone"
    phone_region: str = "AR"  # Region for numbers stored without country code

    # Output
    export_dir: Path = field(default_factory=lambda: Path("exports"))
    log_dir: Path = field(default_factory=lambda: Path("logs"))
    log_level: str = "INFO"

    def __post_init__(self):
        # Ensure paths are Path objects
        if isinstance(self.db_path, str):
            self.db_path = Path(self.db_path)
        if isinstance(self.export_dir, str):
            self.export_dir = Path(self.export_dir)
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)

    @classmethod
    def from_env(cls) -> "GestorConfig":
        """Build a config from the environment (call load_dotenv() first)."""
        defaults = cls()
        return cls(
            db_path=os.getenv("GESTOR_DB_PATH", defaults.db_path),
            store_key=os.getenv("GESTOR_STORE_KEY", defaults.store_key),
            identity=os.getenv("GESTOR_IDENTITY", defaults.identity).lower(),
            phone_region=os.getenv("GESTOR_PHONE_REGION", defaults.phone_region).upper(),
            export_dir=os.getenv("GESTOR_EXPORT_DIR", defaults.export_dir),
            log_dir=os.getenv("GESTOR_LOG_DIR", defaults.log_dir),
            log_level=os.getenv("GESTOR_LOG_LEVEL", defaults.log_level).upper(),
        )
