"""Path codec, flattening and nested reconstruction utilities."""

from .codec import DEFAULT_CODEC, NESTED_FIELD_DELIMITER, PathCodec
from .flatten import flatten, is_scalar
from .nested import MixedKeys, is_index, unflatten


__all__ = [
    "DEFAULT_CODEC",
    "NESTED_FIELD_DELIMITER",
    "MixedKeys",
    "PathCodec",
    "flatten",
    "is_index",
    "is_scalar",
    "unflatten",
]
