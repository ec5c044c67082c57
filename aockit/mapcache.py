"""Cursor over a rectangular character map read line by line."""

from __future__ import annotations

import os
from typing import Optional, Union

from aockit.incache import InputCache


class MapCache:
    """A grid of tiles with a movable cursor and a remembered start tile.

    Moves that would leave the map return None and keep the cursor in place.
    """

    def __init__(self, text: Union[str, bytes] = "") -> None:
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8")
        newline = text.find("\n")
        self._linesize = newline if newline != -1 else len(text)
        self._data = text.replace("\n", "")
        self._pos = 0
        self._start = 0

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> MapCache:
        """Read the map stored at ``path``; raises OSError on failure."""
        return cls(bytes(InputCache.from_file(path)))

    def _in_bounds(self, idx: int) -> bool:
        return 0 <= idx < len(self._data)

    def tile(self) -> str:
        """The tile under the cursor; raises IndexError on an empty map."""
        if not self._data:
            raise IndexError("map is empty")
        return self._data[self._pos]

    def tile_id(self) -> int:
        """An identifier of the tile under the cursor, unique within the map."""
        return self._pos

    def set_start(self) -> None:
        """Remember the current tile as the starting point."""
        self._start = self._pos

    def reset(self) -> None:
        """Move the cursor back to the starting point."""
        self._pos = self._start

    def _move(self, target: Optional[int]) -> Optional[str]:
        if target is None:
            return None
        self._pos = target
        return self._data[target]

    def _peek(self, target: Optional[int]) -> Optional[str]:
        return None if target is None else self._data[target]

    def _offset(self, offset: int) -> Optional[int]:
        target = self._pos + offset
        return target if self._in_bounds(target) else None

    def _vertical(self, up: bool) -> Optional[int]:
        return self._offset(-self._linesize if up else self._linesize)

    def _horizontal(self, left: bool) -> Optional[int]:
        if self._linesize == 0:
            return None
        leftmost = (self._pos // self._linesize) * self._linesize
        rightmost = leftmost + self._linesize
        target = self._pos + (-1 if left else 1)
        if leftmost <= target < rightmost and self._in_bounds(target):
            return target
        return None

    def walk_forward(self) -> Optional[str]:
        """Move to the next tile, wrapping onto the following row."""
        return self._move(self._offset(1))

    def walk_backward(self) -> Optional[str]:
        """Move to the previous tile, wrapping onto the preceding row."""
        return self._move(self._offset(-1))

    def step_up(self) -> Optional[str]:
        return self._move(self._vertical(True))

    def step_down(self) -> Optional[str]:
        return self._move(self._vertical(False))

    def step_left(self) -> Optional[str]:
        return self._move(self._horizontal(True))

    def step_right(self) -> Optional[str]:
        return self._move(self._horizontal(False))

    def peek_up(self) -> Optional[str]:
        return self._peek(self._vertical(True))

    def peek_down(self) -> Optional[str]:
        return self._peek(self._vertical(False))

    def peek_left(self) -> Optional[str]:
        return self._peek(self._horizontal(True))

    def peek_right(self) -> Optional[str]:
        return self._peek(self._horizontal(False))