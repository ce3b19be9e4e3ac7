"""Row reader and writer interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class RowWriter(ABC):
    """Sink accepting one header row followed by data rows."""

    @abstractmethod
    def write_header(self, headers: Sequence[str]) -> None:
        """Write the header row; callable at most once."""

    @abstractmethod
    def write_row(self, cells: Sequence[str]) -> None:
        """Write one data row aligned with the header."""

    def flush(self) -> None:
        """Flush buffered rows to the underlying sink."""
        return


class RowReader(ABC):
    """Source yielding one header row followed by data rows."""

    @abstractmethod
    def headers(self) -> list[str] | None:
        """Return the header row, or None when the source is empty."""

    @abstractmethod
    def rows(self) -> Iterator[list[str]]:
        """Iterate the remaining data rows."""
