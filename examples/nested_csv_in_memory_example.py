"""Minimal example writing typed records through the in-memory row writer."""

from pydantic import BaseModel

from nested_csv.records import PydanticRecordCodec
from nested_csv.tabular.adapter import NestedRowReader, NestedRowWriter
from nested_csv.tabular.in_memory import InMemoryRowReader, InMemoryRowWriter


class Address(BaseModel):
    city: str
    zip: str


class User(BaseModel):
    name: str
    address: Address
    tags: list[str]


def main() -> None:
    """Write two users as rows, print them and read them back."""
    codec = PydanticRecordCodec(User)
    sink = InMemoryRowWriter()
    writer = NestedRowWriter(sink, codec)
    _ = writer.write_records(
        [
            User(name="John", address=Address(city="NYC", zip="10001"), tags=["admin", "ops"]),
            User(name="Jane", address=Address(city="LA", zip="90001"), tags=["dev", "ops"]),
        ]
    )
    print("header:", sink.header)
    for row in sink.rows:
        print("row:", row)

    reader = NestedRowReader(InMemoryRowReader(sink.header, sink.rows), codec)
    for user in reader:
        print(f"{user=}")


if __name__ == "__main__":
    main()
