"""nested-csv - carry nested records through flat tabular formats"""

from ._version import version as __version__
from .errors import (
    CellDecodeError,
    HeaderMismatch,
    MissingField,
    NestedCsvError,
    NoHeaders,
    PathConflict,
    RecordConversionError,
)
from .key_mapping import DEFAULT_CODEC, NESTED_FIELD_DELIMITER, PathCodec, flatten, unflatten
from .records import PydanticRecordCodec, RecordCodec
from .tabular import NestedRowReader, NestedRowWriter, read_nested_csv, write_nested_csv


__all__ = [
    "DEFAULT_CODEC",
    "NESTED_FIELD_DELIMITER",
    "CellDecodeError",
    "HeaderMismatch",
    "MissingField",
    "NestedCsvError",
    "NestedRowReader",
    "NestedRowWriter",
    "NoHeaders",
    "PathCodec",
    "PathConflict",
    "PydanticRecordCodec",
    "RecordCodec",
    "RecordConversionError",
    "__version__",
    "flatten",
    "read_nested_csv",
    "unflatten",
    "write_nested_csv",
]
