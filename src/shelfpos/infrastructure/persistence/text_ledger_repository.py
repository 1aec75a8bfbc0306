"""Pipe-delimited text implementation of LedgerRepository.

One file per reporting period, ``Monthly_Sales_Report_YYYY_MM.txt``,
one line per item name and no header::

    Rice 1kg|4|220.00

The whole file is rewritten on every save.  Lines that did not decode
are handed back by the caller and written out as they were.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from pathlib import Path

from shelfpos.domain.exceptions import MalformedRecord, StorageIOFailure, ValidationError
from shelfpos.domain.model.ledger import LedgerEntry, validate_period_key
from shelfpos.domain.model.value_objects import Money
from shelfpos.domain.repository.ledger_repository import LedgerRepository
from shelfpos.domain.repository.load_report import LoadReport

logger = logging.getLogger(__name__)

_FILE_PREFIX = "Monthly_Sales_Report_"
_FILE_RE = re.compile(r"^Monthly_Sales_Report_(\d{4})_(\d{2})\.txt$")


class TextLedgerRepository(LedgerRepository):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def path_for(self, period_key: str) -> Path:
        year, month = validate_period_key(period_key).split("-")
        return self._directory / f"{_FILE_PREFIX}{year}_{month}.txt"

    # --- LedgerRepository interface -------------------------------------------

    def load(self, period_key: str) -> LoadReport[LedgerEntry]:
        report: LoadReport[LedgerEntry] = LoadReport()
        path = self.path_for(period_key)
        if not path.exists():
            return report
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOFailure(f"Error reading sales ledger {path}: {exc}") from exc

        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                report.records.append(decode_line(line, line_number))
            except MalformedRecord as error:
                logger.warning("Skipping malformed ledger record in %s %s", path.name, error)
                report.rejected.append(error)
        return report

    def save(
        self,
        period_key: str,
        entries: Iterable[LedgerEntry],
        unreadable: Iterable[str] = (),
    ) -> None:
        path = self.path_for(period_key)
        lines = [encode_entry(entry) for entry in entries]
        lines.extend(unreadable)
        text = "".join(line + "\n" for line in lines)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageIOFailure(f"Error writing sales ledger {path}: {exc}") from exc

    def periods(self) -> list[str]:
        if not self._directory.is_dir():
            return []
        found = []
        for path in self._directory.iterdir():
            match = _FILE_RE.match(path.name)
            if match:
                found.append(f"{match.group(1)}-{match.group(2)}")
        return sorted(found)


# --- Serialization ------------------------------------------------------------


def encode_entry(entry: LedgerEntry) -> str:
    return f"{entry.name}|{entry.quantity}|{entry.revenue.amount}"


def decode_line(line: str, line_number: int) -> LedgerEntry:
    """Decode ``Name|Quantity|Revenue``; the name itself may contain ``|``."""
    parts = line.rsplit("|", 2)
    if len(parts) != 3:
        raise MalformedRecord(line_number, line, "expected Name|Quantity|Revenue")
    name, quantity_text, revenue_text = parts
    try:
        quantity = int(quantity_text.strip())
    except ValueError:
        raise MalformedRecord(line_number, line, f"quantity {quantity_text!r} is not an integer")
    try:
        revenue = Money(Decimal(revenue_text.strip()))
    except InvalidOperation:
        raise MalformedRecord(line_number, line, f"revenue {revenue_text!r} is not a number")
    except ValidationError as exc:
        raise MalformedRecord(line_number, line, str(exc))
    try:
        return LedgerEntry(name, quantity, revenue)
    except ValidationError as exc:
        raise MalformedRecord(line_number, line, str(exc))
