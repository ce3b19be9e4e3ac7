"""Path codec for separator-joined flattened keys."""

from __future__ import annotations

from typing import TYPE_CHECKING, override

from nested_csv.errors import PathConflict


if TYPE_CHECKING:
    from collections.abc import Iterable


# Delimiter between nested path segments in flattened column names.
# Example: {"user": {"email": "a@b.c"}} -> "user__email"
NESTED_FIELD_DELIMITER = "__"


class PathCodec:
    """Join path segments into flattened keys and split them back."""

    def __init__(self, sep: str = NESTED_FIELD_DELIMITER) -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def join(self, segments: Iterable[str]) -> str:
        """Build a flattened key from path segments.

        The empty sequence joins to the empty string, which names the root.
        """
        parts = tuple(segments)
        for part in parts:
            if not part:
                msg = "path segments must not be empty"
                raise PathConflict(msg)
            if self.sep in part:
                msg = f"path segment {part!r} must not contain separator {self.sep!r}"
                raise PathConflict(msg)
        joined = self.sep.join(parts)
        if self.split(joined) != parts:
            msg = f"path segments {parts!r} are ambiguous with separator {self.sep!r}"
            raise PathConflict(msg)
        return joined

    def split(self, path: str) -> tuple[str, ...]:
        """Split a flattened key into path segments.

        Never raises; malformed keys may yield empty segments.
        """
        if not path:
            return ()
        return tuple(path.split(self.sep))

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}(sep={self.sep!r})"


DEFAULT_CODEC = PathCodec()
