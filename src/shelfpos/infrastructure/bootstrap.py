"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shelfpos.infrastructure.config import Settings
from shelfpos.infrastructure.persistence.csv_catalog_repository import (
    CsvCatalogRepository,
)
from shelfpos.infrastructure.persistence.text_ledger_repository import (
    TextLedgerRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def catalog_repository(config: Settings | None = None) -> CsvCatalogRepository:
    config = config or settings()
    return CsvCatalogRepository(config.catalog_file)


def ledger_repository(config: Settings | None = None) -> TextLedgerRepository:
    config = config or settings()
    return TextLedgerRepository(config.reports_dir)


def prepare_directories(config: Settings) -> None:
    """Create the data, reports and receipts folders if they are missing."""
    for directory in (config.data_dir, config.reports_dir, config.receipts_dir):
        directory.mkdir(parents=True, exist_ok=True)
