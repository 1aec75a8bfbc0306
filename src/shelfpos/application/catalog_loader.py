"""Shared helper: turn a repository load into a Catalog."""

from __future__ import annotations

import logging

from shelfpos.domain.model.catalog import Catalog
from shelfpos.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


def load_catalog(catalog_repo: CatalogRepository) -> Catalog:
    report = catalog_repo.load()
    if report.rejected:
        logger.info("Catalog loaded with %d record(s) skipped", len(report.rejected))
    return Catalog(report.records)
