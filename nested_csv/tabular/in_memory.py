"""In-memory row reader and writer implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, override

from .protocol import RowReader, RowWriter


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence


class InMemoryRowWriter(RowWriter):
    """List-backed row sink for local development and tests."""

    def __init__(self) -> None:
        super().__init__()
        self.header: list[str] | None = None
        self.rows: list[list[str]] = []

    @override
    def write_header(self, headers: Sequence[str]) -> None:
        """Store the header row."""
        if self.header is not None:
            msg = "header row already written"
            raise RuntimeError(msg)
        self.header = list(headers)

    @override
    def write_row(self, cells: Sequence[str]) -> None:
        """Append one data row."""
        self.rows.append(list(cells))


class InMemoryRowReader(RowReader):
    """Row source over a header row and an iterable of data rows."""

    def __init__(self, header: Sequence[str] | None, rows: Iterable[Sequence[str]] = ()) -> None:
        super().__init__()
        self._header = None if header is None else list(header)
        self._rows = iter(rows)

    @override
    def headers(self) -> list[str] | None:
        """Return the header row."""
        return self._header

    @override
    def rows(self) -> Iterator[list[str]]:
        """Iterate the remaining data rows."""
        for row in self._rows:
            yield list(row)
