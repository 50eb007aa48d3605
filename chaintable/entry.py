from dataclasses import dataclass, field
from typing import Any

from .hashing import KeyOps


@dataclass(eq=False)
class Entry:
    hash_code: int
    key: Any
    value: Any
    next: "Entry | None" = field(default=None, repr=False)


def new_entry(key: Any, value: Any, key_ops: KeyOps) -> Entry:
    return Entry(hash_code=key_ops.hash_fn(key), key=key, value=value)


def copy_entry(entry: Entry) -> Entry:
    # the cached hash travels with the key; keys are never rehashed
    return Entry(hash_code=entry.hash_code, key=entry.key, value=entry.value)
