"""CSV-file-backed implementation of CatalogRepository.

File layout (header row, one item per line)::

    ID,Name,Category,Quantity,Price
    P1,Rice 1kg,Grocery,10,55.00

Prices are written with the precision they carry; display rounding
happens elsewhere.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from pathlib import Path

from shelfpos.domain.exceptions import MalformedRecord, StorageIOFailure, ValidationError
from shelfpos.domain.model.item import Item
from shelfpos.domain.model.value_objects import Money
from shelfpos.domain.repository.catalog_repository import CatalogRepository
from shelfpos.domain.repository.load_report import LoadReport

logger = logging.getLogger(__name__)

HEADER = ["ID", "Name", "Category", "Quantity", "Price"]


class CsvCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CatalogRepository interface ------------------------------------------

    def load(self) -> LoadReport[Item]:
        report: LoadReport[Item] = LoadReport()
        seen: set[str] = set()
        rows = csv.reader(io.StringIO(self._read_text()))
        for line_number, row in enumerate(rows, start=1):
            if line_number == 1 or not any(cell.strip() for cell in row):
                continue
            try:
                item = decode_row(row, line_number)
                if item.id in seen:
                    raise MalformedRecord(line_number, ",".join(row), f"duplicate ID '{item.id}'")
            except MalformedRecord as error:
                logger.warning("Skipping malformed catalog record %s", error)
                report.rejected.append(error)
                continue
            seen.add(item.id)
            report.records.append(item)
        logger.debug(
            "Loaded %d item(s) from %s (%d skipped)",
            len(report.records), self._file_path, len(report.rejected),
        )
        return report

    def save(self, items: Iterable[Item]) -> None:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(HEADER)
        for item in items:
            writer.writerow(encode_item(item))
        try:
            self._file_path.write_text(buffer.getvalue(), encoding="utf-8")
        except OSError as exc:
            raise StorageIOFailure(f"Error saving inventory file {self._file_path}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _read_text(self) -> str:
        try:
            return self._file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOFailure(f"Error loading inventory file {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(",".join(HEADER) + "\n", encoding="utf-8")
        except OSError as exc:
            raise StorageIOFailure(f"Cannot create inventory file {self._file_path}: {exc}") from exc
        logger.info("Created inventory file %s", self._file_path)


# --- Serialization ------------------------------------------------------------


def encode_item(item: Item) -> list[str]:
    return [item.id, item.name, item.category, str(item.quantity), str(item.price.amount)]


def decode_row(row: list[str], line_number: int) -> Item:
    """Decode one CSV row into an Item or raise MalformedRecord."""
    raw = ",".join(row)
    if len(row) != len(HEADER):
        raise MalformedRecord(line_number, raw, f"expected {len(HEADER)} fields, got {len(row)}")
    item_id, name, category, quantity_text, price_text = (cell.strip() for cell in row)
    try:
        quantity = int(quantity_text)
    except ValueError:
        raise MalformedRecord(line_number, raw, f"quantity {quantity_text!r} is not an integer")
    try:
        price = Money(Decimal(price_text))
    except InvalidOperation:
        raise MalformedRecord(line_number, raw, f"price {price_text!r} is not a number")
    except ValidationError as exc:
        raise MalformedRecord(line_number, raw, str(exc))
    try:
        return Item.create(item_id, name, category, quantity, price)
    except ValidationError as exc:
        raise MalformedRecord(line_number, raw, str(exc))
