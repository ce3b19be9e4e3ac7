"""Self-describing scalar encoding for tabular cells."""

from __future__ import annotations

import json
import math
from typing import Any

from nested_csv.errors import CellDecodeError
from nested_csv.key_mapping import is_scalar


def encode_cell(value: Any) -> str:
    """Render a scalar as compact JSON text.

    Strings are always quoted so ``"00123"`` never reads back as a number.
    """
    if not is_scalar(value):
        msg = f"only scalar values can be encoded as cells, got {type(value).__name__}"
        raise TypeError(msg)
    if isinstance(value, float) and not math.isfinite(value):
        msg = f"non-finite number {value!r} has no cell encoding"
        raise ValueError(msg)
    return json.dumps(value, ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    msg = f"non-finite number {name} has no cell encoding"
    raise ValueError(msg)


def decode_cell(text: str) -> Any:
    """Parse a cell written by :func:`encode_cell`.

    The empty cell decodes to ``None``.
    """
    if not text:
        return None
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise CellDecodeError(text, str(exc)) from exc
    if not is_scalar(value):
        raise CellDecodeError(text, f"expected a scalar, found {type(value).__name__}")
    return value
