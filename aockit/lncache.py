"""Line-oriented view of an input, skipping empty lines."""

from __future__ import annotations

import os
import sys
from typing import Iterator, Optional, TextIO, Union

from aockit.incache import InputCache


class LineCache:
    """The non-empty lines of an input, split on newline characters."""

    def __init__(self, text: Union[str, bytes] = "") -> None:
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8")
        self._lines = [line for line in text.split("\n") if line]

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> LineCache:
        """Read and split the file at ``path``; raises OSError on failure."""
        return cls(bytes(InputCache.from_file(path)))

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, idx: int) -> str:
        return self._lines[idx]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write every line, each followed by a newline, to ``file`` or stdout."""
        stream = sys.stdout if file is None else file
        for line in self._lines:
            stream.write(line)
            stream.write("\n")

    def __repr__(self) -> str:
        return f"LineCache({len(self._lines)} lines)"