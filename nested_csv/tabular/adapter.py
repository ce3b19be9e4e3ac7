"""Record-at-a-time bridge between typed records and flat tabular rows."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from nested_csv.errors import CellDecodeError, HeaderMismatch, MissingField, NoHeaders, PathConflict
from nested_csv.key_mapping import DEFAULT_CODEC, MixedKeys, PathCodec, flatten, unflatten
from nested_csv.records import RecordCodec, record_codec_for

from .cells import decode_cell, encode_cell
from .csv_rows import CsvRowReader, CsvRowWriter


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from typing import IO

    from .protocol import RowReader, RowWriter


logger = logging.getLogger(__name__)

_T = TypeVar("_T")

CellEncoder = Callable[[Any], str]
CellDecoder = Callable[[str], Any]


class NestedRowWriter(Generic[_T]):
    """Flatten records into rows, deriving the header from the first record.

    Every record written through one instance must flatten to the same key
    set as the first one; nothing is written for a record that does not.
    """

    def __init__(
        self,
        row_writer: RowWriter,
        record_codec: RecordCodec[_T] | None = None,
        *,
        codec: PathCodec = DEFAULT_CODEC,
        cell_encoder: CellEncoder = encode_cell,
    ) -> None:
        super().__init__()
        self._row_writer = row_writer
        self._record_codec = record_codec
        self._codec = codec
        self._cell_encoder = cell_encoder
        self._headers: list[str] | None = None
        self._count = 0

    @property
    def headers(self) -> list[str] | None:
        """Header captured from the first record, or None before any write."""
        return None if self._headers is None else list(self._headers)

    @property
    def count(self) -> int:
        """Number of records written so far."""
        return self._count

    def write_record(self, record: _T) -> list[str]:
        """Write one record as a row and return its cells."""
        record_no = self._count + 1
        value = record if self._record_codec is None else self._record_codec.to_value(record)
        flat = flatten(value, self._codec)

        headers = self._headers
        if headers is None:
            headers = list(flat)
        elif flat.keys() != (expected := set(headers)):
            missing = [header for header in headers if header not in flat]
            unexpected = [key for key in flat if key not in expected]
            logger.debug("Rejecting record %d: missing=%s unexpected=%s", record_no, missing, unexpected)
            raise HeaderMismatch(missing, unexpected, record_no)

        cells = [self._cell_encoder(flat[header]) for header in headers]
        if self._headers is None:
            self._row_writer.write_header(headers)
            self._headers = headers
            logger.debug("Captured %d header columns from record %d", len(headers), record_no)
        self._row_writer.write_row(cells)
        self._count = record_no
        return cells

    def write_records(self, records: Iterable[_T]) -> int:
        """Write every record in order and return how many were written."""
        written = 0
        for record in records:
            _ = self.write_record(record)
            written += 1
        return written

    def flush(self) -> None:
        """Flush the underlying row writer."""
        self._row_writer.flush()


class NestedRowReader(Generic[_T]):
    """Rebuild records from a header row plus one data row at a time.

    Iterating the reader consumes the underlying row source; it can only be
    iterated once.
    """

    def __init__(
        self,
        row_reader: RowReader,
        record_codec: RecordCodec[_T] | None = None,
        *,
        codec: PathCodec = DEFAULT_CODEC,
        cell_decoder: CellDecoder = decode_cell,
        mixed_keys: MixedKeys = "object",
    ) -> None:
        super().__init__()
        self._row_reader = row_reader
        self._record_codec = record_codec
        self._codec = codec
        self._cell_decoder = cell_decoder
        self._mixed_keys = mixed_keys
        self._count = 0
        self._iterated = False

    @property
    def count(self) -> int:
        """Number of records read so far."""
        return self._count

    def _decode(self, header: str, cell: str) -> Any:
        try:
            return self._cell_decoder(cell)
        except CellDecodeError as exc:
            raise CellDecodeError(cell, exc.reason, header) from exc
        except ValueError as exc:
            raise CellDecodeError(cell, str(exc), header) from exc

    def read_record(self, headers: Sequence[str], cells: Sequence[str]) -> _T:
        """Decode one data row against the header row into a record."""
        record_no = self._count + 1
        if len(cells) < len(headers):
            raise MissingField(headers[len(cells)], len(cells), record_no)
        if len(cells) > len(headers):
            raise MissingField(None, len(headers), record_no)

        flat: dict[str, Any] = {}
        for header, cell in zip(headers, cells, strict=True):
            if header in flat:
                msg = f"duplicate column {header!r} in header row"
                raise PathConflict(msg)
            flat[header] = self._decode(header, cell)

        value = unflatten(flat, self._codec, mixed_keys=self._mixed_keys)
        record = value if self._record_codec is None else self._record_codec.from_value(value)
        self._count = record_no
        return record

    def __iter__(self) -> Iterator[_T]:
        if self._iterated:
            msg = "nested row reader can only be iterated once"
            raise RuntimeError(msg)
        self._iterated = True
        headers = self._row_reader.headers()
        if headers is None:
            msg = "row source has no header row"
            raise NoHeaders(msg)
        return self._records(headers)

    def _records(self, headers: list[str]) -> Iterator[_T]:
        for cells in self._row_reader.rows():
            yield self.read_record(headers, cells)


def write_nested_csv(
    stream: IO[str],
    records: Iterable[Any],
    record_type: type[Any] | RecordCodec[Any] | Any | None = None,
    *,
    codec: PathCodec = DEFAULT_CODEC,
    cell_encoder: CellEncoder = encode_cell,
    **csv_options: Any,
) -> int:
    """Write records to a CSV text stream as flattened rows.

    ``record_type`` selects the record codec; without one the records must
    already be plain nested values. Returns the number of records written.
    """
    writer: NestedRowWriter[Any] = NestedRowWriter(
        CsvRowWriter(stream, **csv_options),
        record_codec_for(record_type),
        codec=codec,
        cell_encoder=cell_encoder,
    )
    written = writer.write_records(records)
    writer.flush()
    return written


def read_nested_csv(
    stream: IO[str],
    record_type: type[Any] | RecordCodec[Any] | Any | None = None,
    *,
    codec: PathCodec = DEFAULT_CODEC,
    cell_decoder: CellDecoder = decode_cell,
    mixed_keys: MixedKeys = "object",
    strict: bool = False,
    **csv_options: Any,
) -> Iterator[Any]:
    """Lazily read records from a CSV text stream of flattened rows.

    ``strict`` turns off pydantic type coercion when ``record_type`` is a type.
    """
    reader: NestedRowReader[Any] = NestedRowReader(
        CsvRowReader(stream, **csv_options),
        record_codec_for(record_type, strict=strict),
        codec=codec,
        cell_decoder=cell_decoder,
        mixed_keys=mixed_keys,
    )
    return iter(reader)
