"""Outcome of reading a delimited data file record by record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from shelfpos.domain.exceptions import MalformedRecord

T = TypeVar("T")


@dataclass
class LoadReport(Generic[T]):
    """Decoded records plus the lines that were skipped.

    A bad line never aborts a load; it ends up in ``rejected``.
    """

    records: list[T] = field(default_factory=list)
    rejected: list[MalformedRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.rejected
