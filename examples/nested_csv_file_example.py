"""Round-trip nested records through a CSV file on disk."""

import tempfile
from pathlib import Path

from nested_csv import read_nested_csv, write_nested_csv


RECORDS = [
    {"user": {"name": "John", "address": {"city": "NYC"}}, "items": [{"id": 1}, {"id": 2}]},
    {"user": {"name": "Jane", "address": {"city": "LA"}}, "items": [{"id": 3}, {"id": 4}]},
]


def main() -> None:
    """Write plain nested dicts to a CSV file and read them back."""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "records.csv"
        with path.open("w", encoding="utf-8", newline="") as stream:
            written = write_nested_csv(stream, RECORDS)
        print(f"wrote {written} records:")
        print(path.read_text(encoding="utf-8"))

        with path.open(encoding="utf-8", newline="") as stream:
            for record in read_nested_csv(stream):
                print(record)


if __name__ == "__main__":
    main()
