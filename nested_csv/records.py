"""Conversion between typed records and plain nested values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar, override

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from nested_csv.errors import RecordConversionError


_T = TypeVar("_T")


class RecordCodec(ABC, Generic[_T]):
    """Capability to turn records into plain values and back."""

    @abstractmethod
    def to_value(self, record: _T) -> Any:
        """Return the plain nested value for a record."""

    @abstractmethod
    def from_value(self, value: Any) -> _T:
        """Build a record from a plain nested value."""


class PydanticRecordCodec(RecordCodec[_T]):
    """Record codec backed by a pydantic ``TypeAdapter``.

    Works for models, dataclasses, ``TypedDict`` and plain container types.
    Validation runs in pydantic's lax mode unless ``strict`` is set, so a
    JSON string such as ``"1"`` may fill an ``int`` field. Strict mode only
    accepts values whose JSON type already matches the field; fields dumped
    as strings (datetimes, UUIDs, enums by value) then fail to read back.
    """

    def __init__(self, record_type: type[_T] | Any, *, strict: bool = False) -> None:
        super().__init__()
        self.record_type = record_type
        self.strict = strict
        self._adapter: TypeAdapter[_T] = TypeAdapter(record_type)

    @override
    def to_value(self, record: _T) -> Any:
        try:
            return self._adapter.dump_python(record, mode="json")
        except PydanticSerializationError as exc:
            msg = f"cannot convert {type(record).__name__} record to a value: {exc}"
            raise RecordConversionError(msg) from exc

    @override
    def from_value(self, value: Any) -> _T:
        try:
            return self._adapter.validate_python(value, strict=self.strict)
        except ValidationError as exc:
            msg = f"cannot convert value to {self._type_name()}: {exc}"
            raise RecordConversionError(msg) from exc

    def _type_name(self) -> str:
        return getattr(self.record_type, "__name__", repr(self.record_type))

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._type_name()})"


def record_codec_for(
    record_type: type[Any] | RecordCodec[Any] | Any | None, *, strict: bool = False
) -> RecordCodec[Any] | None:
    """Resolve a record type or codec into a codec; ``None`` passes through.

    ``strict`` only applies when a pydantic codec is built for a type.
    """
    if record_type is None or isinstance(record_type, RecordCodec):
        return record_type
    return PydanticRecordCodec(record_type, strict=strict)
