"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MANAGER_PASSWORD = "admin"
DEFAULT_STORE_NAME = "Marites Store"


@dataclass(frozen=True)
class Settings:
    home: Path
    manager_password: str = DEFAULT_MANAGER_PASSWORD
    store_name: str = DEFAULT_STORE_NAME

    @property
    def data_dir(self) -> Path:
        return self.home / "data"

    @property
    def catalog_file(self) -> Path:
        return self.data_dir / "inventory.csv"

    @property
    def reports_dir(self) -> Path:
        return self.home / "reports"

    @property
    def receipts_dir(self) -> Path:
        return self.home / "receipts"

    @property
    def log_file(self) -> Path:
        return self.home / "logs" / "shelfpos.log"

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        """Build settings from ``SHELFPOS_*`` variables.

        ``SHELFPOS_HOME`` defaults to the current working directory, which
        matches running the store program from its own folder.
        """
        env = os.environ if environ is None else environ
        return Settings(
            home=Path(env.get("SHELFPOS_HOME") or Path.cwd()).expanduser(),
            manager_password=env.get("SHELFPOS_MANAGER_PASSWORD", DEFAULT_MANAGER_PASSWORD),
            store_name=env.get("SHELFPOS_STORE_NAME", DEFAULT_STORE_NAME),
        )
