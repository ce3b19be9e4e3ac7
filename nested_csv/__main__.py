"""Interface for ``python -m nested_csv``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from contextlib import ExitStack
from typing import TYPE_CHECKING, Any

from ._version import version
from .errors import NestedCsvError
from .key_mapping import NESTED_FIELD_DELIMITER, MixedKeys, PathCodec
from .key_mapping.nested import MIXED_KEY_POLICIES
from .tabular import read_nested_csv, write_nested_csv


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import IO


__all__ = ["main"]

logger = logging.getLogger("nested_csv")


def _open(path: str, mode: str, stack: ExitStack) -> IO[str]:
    if path == "-":
        stream = sys.stdin if "r" in mode else sys.stdout
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(newline="")
        return stream
    return stack.enter_context(open(path, mode, encoding="utf-8", newline=""))


def _iter_json_lines(stream: IO[str]) -> Iterator[Any]:
    for line_num, raw_line in enumerate(stream, start=1):
        line = raw_line.strip()
        if not line:
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as exc:
            msg = f"line {line_num}: malformed JSON: {exc}"
            raise ValueError(msg) from exc


def _to_csv(source: IO[str], target: IO[str], codec: PathCodec) -> int:
    return write_nested_csv(target, _iter_json_lines(source), codec=codec)


def _from_csv(source: IO[str], target: IO[str], codec: PathCodec, mixed_keys: MixedKeys) -> int:
    count = 0
    for record in read_nested_csv(source, codec=codec, mixed_keys=mixed_keys):
        _ = target.write(json.dumps(record, ensure_ascii=False) + "\n")
        count += 1
    target.flush()
    return count


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="nested_csv", description="Convert between JSON Lines and nested CSV.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--verbose", action="store_true", help="log at DEBUG level")
    commands = parser.add_subparsers(dest="command", required=True)

    to_csv = commands.add_parser("to-csv", help="flatten JSON Lines records into CSV rows")
    from_csv = commands.add_parser("from-csv", help="rebuild JSON Lines records from CSV rows")
    for command in (to_csv, from_csv):
        _ = command.add_argument("input", help="input path, or - for stdin")
        _ = command.add_argument("output", help="output path, or - for stdout")
        _ = command.add_argument(
            "--sep", default=NESTED_FIELD_DELIMITER, help=f"path separator (default: {NESTED_FIELD_DELIMITER!r})"
        )
    _ = from_csv.add_argument(
        "--mixed-keys",
        choices=MIXED_KEY_POLICIES,
        default="object",
        help="how to rebuild a level mixing array indices and names",
    )

    options = parser.parse_args(args)
    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        codec = PathCodec(sep=options.sep)
        with ExitStack() as stack:
            source = _open(options.input, "r", stack)
            target = _open(options.output, "w", stack)
            if options.command == "to-csv":
                count = _to_csv(source, target, codec)
            else:
                count = _from_csv(source, target, codec, options.mixed_keys)
    except (NestedCsvError, ValueError, OSError) as exc:
        logger.error("%s failed: %s", options.command, exc)
        return 1

    logger.info("%s: converted %d records", options.command, count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
