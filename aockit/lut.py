"""Fixed-size chained hash table keyed by 64-bit unsigned integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

_MASK64 = (1 << 64) - 1
_FNV1A_OFFSET = 0xCBF29CE484222325
_FNV1A_PRIME = 0x100000001B3

HashFn = Callable[[bytes], int]


def fnv1a(data: bytes) -> int:
    """64-bit FNV-1a hash of ``data``."""
    h = _FNV1A_OFFSET
    for byte in data:
        h ^= byte
        h = (h * _FNV1A_PRIME) & _MASK64
    return h


@dataclass(eq=False)
class LutNode:
    """An entry of a LookupTable with a zero-initialised data area."""

    key: int
    data: bytearray = field(default_factory=bytearray)


class LookupTable:
    """Hash table with ``2 ** shift`` buckets, each a chain of nodes."""

    def __init__(self, shift: int, data_size: int = 0,
                 hashfn: Optional[HashFn] = None) -> None:
        if shift <= 0:
            raise ValueError("shift must be positive")
        if data_size < 0:
            raise ValueError("data_size must not be negative")
        self.shift = shift
        self.size = 1 << shift
        self.data_size = data_size
        self.hashfn = hashfn
        self._table: list[list[LutNode]] = [[] for _ in range(self.size)]

    @staticmethod
    def _normalize(key: int) -> int:
        return key & _MASK64

    def slot(self, key: int) -> int:
        """Index of the bucket that ``key`` falls in."""
        raw = self._normalize(key).to_bytes(8, "little")
        h = self.hashfn(raw) if self.hashfn is not None else fnv1a(raw)
        return h & (self.size - 1)

    def add(self, key: int) -> LutNode:
        """Return the node for ``key``, creating it if absent."""
        key = self._normalize(key)
        chain = self._table[self.slot(key)]
        for node in chain:
            if node.key == key:
                return node
        node = LutNode(key, bytearray(self.data_size))
        chain.append(node)
        return node

    def remove(self, node: LutNode) -> None:
        """Remove ``node`` from the table; does nothing if it is not there."""
        chain = self._table[self.slot(node.key)]
        for i, candidate in enumerate(chain):
            if candidate is node:
                del chain[i]
                return

    def lookup(self, key: int) -> Optional[LutNode]:
        """Return the node for ``key``, or None."""
        key = self._normalize(key)
        for node in self._table[self.slot(key)]:
            if node.key == key:
                return node
        return None

    def bucket(self, i: int) -> list[LutNode]:
        """Nodes of bucket ``i`` in chain order; raises IndexError if out of range."""
        if not 0 <= i < self.size:
            raise IndexError("bucket index out of range")
        return list(self._table[i])

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._table)

    def __iter__(self) -> Iterator[LutNode]:
        for chain in self._table:
            yield from chain