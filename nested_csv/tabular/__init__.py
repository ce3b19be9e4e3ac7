"""Row-oriented tabular I/O for flattened records."""

from .adapter import NestedRowReader, NestedRowWriter, read_nested_csv, write_nested_csv
from .cells import decode_cell, encode_cell
from .csv_rows import CsvRowReader, CsvRowWriter
from .in_memory import InMemoryRowReader, InMemoryRowWriter
from .protocol import RowReader, RowWriter


__all__ = [
    "CsvRowReader",
    "CsvRowWriter",
    "InMemoryRowReader",
    "InMemoryRowWriter",
    "NestedRowReader",
    "NestedRowWriter",
    "RowReader",
    "RowWriter",
    "decode_cell",
    "encode_cell",
    "read_nested_csv",
    "write_nested_csv",
]
