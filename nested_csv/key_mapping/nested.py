"""Nested structure reconstruction from flattened key paths."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from nested_csv.errors import PathConflict

from .codec import DEFAULT_CODEC, PathCodec
from .flatten import is_scalar


if TYPE_CHECKING:
    from collections.abc import Mapping


MixedKeys = Literal["object", "reject"]
MIXED_KEY_POLICIES: tuple[MixedKeys, ...] = ("object", "reject")

_Item = tuple[tuple[str, ...], Any]


def is_index(segment: str) -> bool:
    """Return True when a segment is a canonical non-negative integer."""
    if not (segment.isascii() and segment.isdigit()):
        return False
    return segment == "0" or not segment.startswith("0")


def _describe(prefix: tuple[str, ...], sep: str) -> str:
    return repr(sep.join(prefix)) if prefix else "the root"


def _build(items: list[_Item], prefix: tuple[str, ...], sep: str, mixed_keys: MixedKeys) -> Any:
    leaf_exists = False
    leaf_value: Any = None
    grouped_children: dict[str, list[_Item]] = {}
    for path, value in items:
        if not path:
            leaf_exists = True
            leaf_value = value
            continue
        grouped_children.setdefault(path[0], []).append((path[1:], value))

    if not grouped_children:
        return leaf_value

    if leaf_exists:
        msg = f"{_describe(prefix, sep)} holds both a scalar and nested children"
        raise PathConflict(msg)

    numeric = [segment for segment in grouped_children if is_index(segment)]
    if len(numeric) == len(grouped_children):
        indices = sorted(int(segment) for segment in numeric)
        for expected, idx in enumerate(indices):
            if expected != idx:
                msg = f"array at {_describe(prefix, sep)} is missing index {expected}"
                raise PathConflict(msg)
        return [
            _build(grouped_children[str(idx)], (*prefix, str(idx)), sep, mixed_keys) for idx in range(len(indices))
        ]

    if numeric and mixed_keys == "reject":
        msg = f"container at {_describe(prefix, sep)} mixes array indices {numeric} with object keys"
        raise PathConflict(msg)

    return {
        segment: _build(children, (*prefix, segment), sep, mixed_keys)
        for segment, children in grouped_children.items()
    }


def unflatten(
    flat: Mapping[str, Any],
    codec: PathCodec = DEFAULT_CODEC,
    *,
    mixed_keys: MixedKeys = "object",
) -> Any:
    """Reconstruct a nested value from a flattened key/leaf mapping.

    Children are grouped per level before a container kind is chosen. A
    container becomes a list only when every child segment is an index; the
    indices must then be exactly ``0..n-1``. With ``mixed_keys="object"``
    a level mixing indices and names becomes a dict with string keys, with
    ``mixed_keys="reject"`` it raises :class:`PathConflict`.

    The empty mapping reconstructs to ``None``.
    """
    if mixed_keys not in MIXED_KEY_POLICIES:
        msg = f"mixed_keys must be one of {MIXED_KEY_POLICIES}, got {mixed_keys!r}"
        raise ValueError(msg)

    items: list[_Item] = []
    for key, value in flat.items():
        path = codec.split(key)
        if any(not segment for segment in path):
            msg = f"invalid key path with empty segment: {key!r}"
            raise PathConflict(msg)
        if not is_scalar(value):
            msg = f"value for {key!r} must be a scalar, got {type(value).__name__}"
            raise PathConflict(msg)
        items.append((path, value))

    if not items:
        return None
    return _build(items, (), codec.sep, mixed_keys)
