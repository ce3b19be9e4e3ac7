"""CSV row reader and writer over text streams."""

from __future__ import annotations

import csv
from typing import TYPE_CHECKING, Any, override

from .protocol import RowReader, RowWriter


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import IO


class CsvRowWriter(RowWriter):
    """Write rows to a text stream with the standard ``csv`` module.

    Parameters
    ----------
    stream
        Text stream opened with ``newline=""``.
    **csv_options
        Dialect and formatting parameters forwarded to ``csv.writer``.
    """

    def __init__(self, stream: IO[str], **csv_options: Any) -> None:
        super().__init__()
        self._stream = stream
        self._writer = csv.writer(stream, **csv_options)
        self._header_written = False

    @override
    def write_header(self, headers: Sequence[str]) -> None:
        """Write the header row."""
        if self._header_written:
            msg = "header row already written"
            raise RuntimeError(msg)
        self._writer.writerow(headers)
        self._header_written = True

    @override
    def write_row(self, cells: Sequence[str]) -> None:
        """Write one data row."""
        self._writer.writerow(cells)

    @override
    def flush(self) -> None:
        """Flush the underlying stream."""
        self._stream.flush()


class CsvRowReader(RowReader):
    """Read rows from a text stream with the standard ``csv`` module.

    The first row is the header row. Blank lines after it are skipped unless
    the header itself is empty, in which case each one is a record without
    columns.
    """

    def __init__(self, stream: IO[str], **csv_options: Any) -> None:
        super().__init__()
        self._reader = csv.reader(stream, **csv_options)
        self._header: list[str] | None = None
        self._header_read = False

    @override
    def headers(self) -> list[str] | None:
        """Read the header row once and cache it."""
        if not self._header_read:
            self._header = next(self._reader, None)
            self._header_read = True
        return self._header

    @override
    def rows(self) -> Iterator[list[str]]:
        """Iterate the data rows following the header row."""
        header = self.headers()
        for row in self._reader:
            if row or not header:
                yield row
