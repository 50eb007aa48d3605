from dataclasses import dataclass
import operator
from typing import Any, Callable


HashFn = Callable[[Any], int]
EqFn = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class KeyOps:
    hash_fn: HashFn
    eq_fn: EqFn


def hash_string(key: str) -> int:
    # 32-bit FNV-1a
    hash = 2166136261
    for i in range(len(key)):
        hash ^= ord(key[i])
        hash = (hash * 16777619) & 0xFFFFFFFF
    return hash


DEFAULT_KEY_OPS = KeyOps(hash_fn=hash, eq_fn=operator.eq)
STRING_KEY_OPS = KeyOps(hash_fn=hash_string, eq_fn=operator.eq)
