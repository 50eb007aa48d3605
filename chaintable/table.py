from dataclasses import dataclass, field
from typing import Any, Callable

from .cursor import EntryView, KeyView, ValueView
from .entry import Entry, copy_entry, new_entry
from .hashing import DEFAULT_KEY_OPS, KeyOps
from .shared import no_value, printf


@dataclass(frozen=True)
class NotFound:
    pass


TABLE_INITIAL_CAPACITY = 16
TABLE_MAX_LOAD = 0.75


_debug_trace_growth = False


def set_debug_trace_growth(b: bool):
    global _debug_trace_growth
    _debug_trace_growth = b


@dataclass
class Table:
    """Separate-chaining hash table.

    Each bucket holds the head of a singly linked chain of ``Entry`` nodes.
    New keys are appended to the tail of their chain. When an insertion
    pushes ``entry_count`` past ``max_count`` the bucket list doubles and
    every entry is re-placed before the insertion returns.

    Views and cursors from ``keys``, ``values`` and ``entries`` read live
    storage; do not grow, remove from or clear the table while one is in
    use (``generation`` changes and the cursor raises ``StaleCursorError``).
    """

    buckets: list[Entry | None]
    capacity: int
    entry_count: int
    load_factor: float
    max_count: int
    generation: int
    key_ops: KeyOps = field(repr=False)
    default_factory: Callable[[], Any] = field(repr=False)

    def __init__(
        self,
        capacity: int = TABLE_INITIAL_CAPACITY,
        load_factor: float = TABLE_MAX_LOAD,
        default_factory: Callable[[], Any] = no_value,
        key_ops: KeyOps = DEFAULT_KEY_OPS,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError("capacity must be a positive integer", capacity)
        if not 0 < load_factor <= 1:
            raise ValueError("load factor must be in (0, 1]", load_factor)
        if int(load_factor * capacity) < 1:
            raise ValueError(
                "load factor leaves no room in the initial capacity",
                capacity,
                load_factor,
            )

        self.capacity = capacity
        self.load_factor = load_factor
        self.max_count = int(load_factor * capacity)
        self.buckets = [None] * capacity
        self.entry_count = 0
        self.generation = 0
        self.key_ops = key_ops
        self.default_factory = default_factory

    def count(self) -> int:
        return self.entry_count

    def __len__(self) -> int:
        return self.entry_count

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def bucket_index(self, key: Any) -> int:
        return self.key_ops.hash_fn(key) % self.capacity

    def place(self, key: Any, value: Any) -> bool:
        """Set ``key`` to ``value``. Returns True if the key already existed."""
        existed = self._place_entry(new_entry(key, value, self.key_ops))
        if not existed and self.entry_count > self.max_count:
            self._grow()
        return existed

    def get(self, key: Any) -> Any | NotFound:
        entry = self.find_entry(key)
        if entry is None:
            return NotFound()
        return entry.value

    def contains(self, key: Any) -> bool:
        return self.find_entry(key) is not None

    def get_or_insert_entry(self, key: Any) -> Entry:
        """Return the entry for ``key``, inserting a default value if absent.

        Assigning to the returned entry's ``value`` updates the table. This
        never reports absence: use ``get`` or ``contains`` to tell the two
        cases apart.
        """
        entry = self.find_entry(key)
        if entry is None:
            self.place(key, self.default_factory())
            # growth may have moved the key to a new chain
            entry = self.find_entry(key)
            assert entry is not None
        return entry

    def get_or_insert_default(self, key: Any) -> Any:
        return self.get_or_insert_entry(key).value

    def remove(self, key: Any) -> bool:
        hash_code = self.key_ops.hash_fn(key)
        index = hash_code % self.capacity

        last: Entry | None = None
        entry = self.buckets[index]
        while entry is not None:
            if entry.hash_code == hash_code and self.key_ops.eq_fn(entry.key, key):
                if last is None:
                    self.buckets[index] = entry.next
                else:
                    last.next = entry.next
                entry.next = None
                self.entry_count -= 1
                self.generation += 1
                return True
            last = entry
            entry = entry.next

        return False

    def clear(self):
        for i in range(self.capacity):
            self.buckets[i] = None
        self.entry_count = 0
        self.generation += 1

    def add_all(self, from_t: "Table"):
        for entry in from_t.entries():
            self.place(entry.key, entry.value)

    def keys(self) -> KeyView:
        return KeyView.of(self)

    def values(self) -> ValueView:
        return ValueView.of(self)

    def entries(self) -> EntryView:
        return EntryView.of(self)

    def find_entry(self, key: Any) -> Entry | None:
        hash_code = self.key_ops.hash_fn(key)
        entry = self.buckets[hash_code % self.capacity]
        while entry is not None:
            # cached hash first, equality only on a hash match
            if entry.hash_code == hash_code and self.key_ops.eq_fn(entry.key, key):
                return entry
            entry = entry.next
        return None

    def _place_entry(self, new: Entry) -> bool:
        index = new.hash_code % self.capacity

        last: Entry | None = None
        entry = self.buckets[index]
        while entry is not None:
            if entry.hash_code == new.hash_code and self.key_ops.eq_fn(
                entry.key, new.key
            ):
                entry.value = new.value
                return True
            last = entry
            entry = entry.next

        if last is None:
            self.buckets[index] = new
        else:
            last.next = new
        self.entry_count += 1
        return False

    def _grow(self):
        old_buckets = self.buckets
        old_capacity = self.capacity

        # swap first: re-placement below indexes by the new capacity
        self.buckets = [None] * (old_capacity * 2)
        self.capacity = old_capacity * 2
        self.max_count = int(self.load_factor * self.capacity)
        self.entry_count = 0
        self.generation += 1

        for i in range(old_capacity):
            entry = old_buckets[i]
            while entry is not None:
                self._place_entry(copy_entry(entry))
                entry = entry.next

        if _debug_trace_growth:
            printf(
                "grow {0:d} -> {1:d} ({2:d} entries)\n",
                old_capacity,
                self.capacity,
                self.entry_count,
            )
