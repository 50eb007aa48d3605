from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Iterator

from .entry import Entry

if TYPE_CHECKING:
    from .table import Table


class StaleCursorError(Exception):
    pass


@dataclass(eq=False)
class HashCursor:
    """Position in a table's bucket list: a bucket index and an entry of
    that bucket's chain.

    Walks bucket 0's chain, then bucket 1's chain, and so on. The end
    position has ``entry is None``; cursors compare equal when they sit on
    the same entry, so every end cursor equals every exhausted cursor.

    A cursor remembers the table generation it was made under. Once the
    table grows, removes a key or is cleared, the cursor is stale and
    ``get``, ``set`` and ``advance`` raise ``StaleCursorError``.
    """

    table: "Table | None"
    buckets: list[Entry | None]
    capacity: int
    generation: int
    bucket_index: int = 0
    entry: Entry | None = None

    @classmethod
    def begin(
        cls,
        table: "Table",
        buckets: list[Entry | None],
        capacity: int,
        generation: int,
    ):
        cursor = cls(table, buckets, capacity, generation)
        cursor._check()
        cursor.entry = buckets[0]
        cursor._skip_empty()
        return cursor

    @classmethod
    def end(cls):
        return cls(table=None, buckets=[], capacity=0, generation=0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashCursor):
            return NotImplemented
        return self.entry is other.entry

    def advance(self) -> "HashCursor":
        self._check()
        if self.entry is None:
            raise IndexError("advance past end of table")
        self.entry = self.entry.next
        self._skip_empty()
        return self

    def current(self) -> Entry:
        self._check()
        if self.entry is None:
            raise IndexError("dereference of end cursor")
        return self.entry

    def _skip_empty(self):
        while self.entry is None:
            self.bucket_index += 1
            if self.bucket_index >= self.capacity:
                break
            self.entry = self.buckets[self.bucket_index]

    def _check(self):
        if self.table is not None and self.table.generation != self.generation:
            raise StaleCursorError(
                "table changed structurally", self.generation, self.table.generation
            )


class KeyCursor(HashCursor):
    def get(self) -> Any:
        return self.current().key


class ValueCursor(HashCursor):
    def get(self) -> Any:
        return self.current().value

    def set(self, value: Any):
        self.current().value = value


class EntryCursor(HashCursor):
    def get(self) -> Entry:
        return self.current()


@dataclass(eq=False)
class _View:
    table: "Table"
    buckets: list[Entry | None]
    capacity: int
    generation: int

    cursor_type: ClassVar[type[HashCursor]] = HashCursor

    @classmethod
    def of(cls, table: "Table"):
        return cls(table, table.buckets, table.capacity, table.generation)

    def begin(self):
        return self.cursor_type.begin(
            self.table, self.buckets, self.capacity, self.generation
        )

    def end(self):
        return self.cursor_type.end()

    def __iter__(self) -> Iterator[Any]:
        cursor = self.begin()
        end = self.end()
        while cursor != end:
            yield cursor.get()
            cursor.advance()


class KeyView(_View):
    cursor_type = KeyCursor


class ValueView(_View):
    cursor_type = ValueCursor


class EntryView(_View):
    cursor_type = EntryCursor
