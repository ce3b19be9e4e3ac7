"""Error hierarchy for flattening, unflattening and nested tabular I/O."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable


class NestedCsvError(Exception):
    """Base class for every error raised by nested-csv."""


class PathConflict(NestedCsvError, ValueError):
    """Flattened paths cannot be mapped onto a single tree."""


class HeaderMismatch(NestedCsvError, ValueError):
    """A record flattened to a different key set than the captured header."""

    def __init__(self, missing: Iterable[str], unexpected: Iterable[str], record: int) -> None:
        self.missing = list(missing)
        self.unexpected = list(unexpected)
        self.record = record
        msg = f"record {record} does not match header: missing={self.missing} unexpected={self.unexpected}"
        super().__init__(msg)


class CellDecodeError(NestedCsvError, ValueError):
    """A cell does not hold a valid scalar encoding."""

    def __init__(self, cell: str, reason: str, header: str | None = None) -> None:
        self.cell = cell
        self.reason = reason
        self.header = header
        location = f" in column {header!r}" if header is not None else ""
        msg = f"invalid cell {cell!r}{location}: {reason}"
        super().__init__(msg)


class RecordConversionError(NestedCsvError, ValueError):
    """The typed record layer rejected a value or a record."""


class MissingField(NestedCsvError, ValueError):
    """A data row and the header row disagree in length."""

    def __init__(self, field: str | None, idx: int, record: int) -> None:
        self.field = field
        self.idx = idx
        self.record = record
        if field is None:
            msg = f"unexpected extra field (idx: {idx}) for record number {record}"
        else:
            msg = f"missing field '{field}' (idx: {idx}) for record number {record}"
        super().__init__(msg)


class NoHeaders(NestedCsvError):
    """The row source has no header row."""
