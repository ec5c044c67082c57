"""Whole-file input cache giving byte access by index."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Union


class InputCache:
    """Raw bytes of an input, addressable by index."""

    def __init__(self, raw: bytes = b"") -> None:
        self._raw = bytes(raw)

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> InputCache:
        """Read the whole file at ``path``; raises OSError on failure."""
        with open(path, "rb") as handle:
            return cls(handle.read())

    def __len__(self) -> int:
        return len(self._raw)

    def __getitem__(self, idx: int) -> int:
        return self._raw[idx]

    def __iter__(self) -> Iterator[int]:
        return iter(self._raw)

    def __bytes__(self) -> bytes:
        return self._raw

    def get(self, idx: int) -> Optional[int]:
        """Return the byte at ``idx``, or None when it is out of range."""
        if 0 <= idx < len(self._raw):
            return self._raw[idx]
        return None