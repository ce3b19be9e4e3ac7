"""Flatten nested values into separator-keyed leaf mappings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nested_csv.errors import PathConflict

from .codec import DEFAULT_CODEC, PathCodec


if TYPE_CHECKING:
    from collections.abc import Iterator


_SCALARS = (str, int, float, bool, type(None))


def is_scalar(value: Any) -> bool:
    """Return True for leaf values (None, bool, numbers and strings)."""
    return isinstance(value, _SCALARS)


def _iter_leaves(value: Any, prefix: tuple[str, ...]) -> Iterator[tuple[tuple[str, ...], Any]]:
    if isinstance(value, dict):
        for key, child in value.items():
            if not isinstance(key, str):
                msg = f"object keys must be strings, got {type(key).__name__} at {prefix!r}"
                raise TypeError(msg)
            yield from _iter_leaves(child, (*prefix, key))
    elif isinstance(value, (list, tuple)):
        for idx, child in enumerate(value):
            yield from _iter_leaves(child, (*prefix, str(idx)))
    elif is_scalar(value):
        yield prefix, value
    else:
        msg = f"unsupported value of type {type(value).__name__} at {prefix!r}"
        raise TypeError(msg)


def flatten(value: Any, codec: PathCodec = DEFAULT_CODEC) -> dict[str, Any]:
    """Flatten a nested value into an ordered mapping of joined path to leaf.

    Keys follow a pre-order traversal: object keys in insertion order, array
    elements by ascending index. A bare scalar flattens to ``{"": value}``;
    empty objects and arrays contribute no entries.

    >>> flatten({"user": {"name": "John", "tags": ["a", "b"]}})
    {'user__name': 'John', 'user__tags__0': 'a', 'user__tags__1': 'b'}
    """
    flat: dict[str, Any] = {}
    for path, leaf in _iter_leaves(value, ()):
        key = codec.join(path)
        if key in flat:
            msg = f"flattened key {key!r} produced by more than one leaf"
            raise PathConflict(msg)
        flat[key] = leaf
    return flat
