"""Substring element (``key``, ``Nkey``, ``keyN``, ``AkeyB``, ``keyA,B``)."""

from __future__ import annotations

from enum import Enum

from .base import DataElement


class SliceMode(str, Enum):
    FULL = "full"
    LEADING = "leading"
    TRAILING = "trailing"
    RANGE = "range"


class SubstringElement(DataElement):
    """
    Takes a slice of the data value of its key.

    - FULL: the whole value, one alternative.
    - LEADING: ``count`` characters from the start. Alternatives move the
      window one character to the right until it hits the end of the value.
    - TRAILING: ``count`` characters from the end. Alternatives move the
      window one character to the left until it hits the start of the value.
    - RANGE: characters ``start`` to ``end`` (1-based, inclusive), clamped to
      the value. One alternative.
    """

    def __init__(
        self,
        element: str,
        key: str,
        mode: SliceMode = SliceMode.FULL,
        count: int = 0,
        start: int = 0,
        end: int = 0,
    ):
        super().__init__(element, key)
        self.mode = mode
        self.count = count
        self.start = start
        self.end = end
        self.offset = 0
        self.rendered = False

    def reset(self) -> None:
        self.offset = 0
        self.rendered = False

    def _max_offset(self) -> int:
        if self.mode not in (SliceMode.LEADING, SliceMode.TRAILING):
            return 0
        return max(len(self.data or "") - self.count, 0)

    def _slice(self, offset: int) -> str:
        value = self.data or ""
        if self.mode == SliceMode.LEADING:
            return value[offset : offset + self.count]
        if self.mode == SliceMode.TRAILING:
            stop = len(value) - offset
            return value[max(stop - self.count, 0) : stop]
        if self.mode == SliceMode.RANGE:
            return value[self.start - 1 : self.end]
        return value

    def has_alternatives(self) -> bool:
        if not self.rendered:
            return True
        return self.offset < self._max_offset()

    def render(self) -> str:
        if self.rendered and self.offset < self._max_offset():
            self.offset += 1
        self.rendered = True
        return self._slice(self.offset)
