"""Random pick element (``key+``)."""

from __future__ import annotations

import random
from typing import List, Optional

from .base import DataElement


class RandomElement(DataElement):
    """
    Picks one character at random from the data value of its key.

    Characters are drawn without replacement: every render picks among the
    characters that were not returned yet, so a pool of N distinct characters
    is exhausted after N renders. Random elements start out as resolvers.
    """

    def __init__(self, element: str, key: str, rng: Optional[random.Random] = None):
        super().__init__(element, key)
        self.rng = rng or random.Random()
        self.remaining: List[str] = []
        self.current = ""
        self.set_resolver(True)

    def reset(self) -> None:
        # dict.fromkeys keeps the pool order while dropping duplicates
        self.remaining = list(dict.fromkeys(self.data or ""))
        self.current = ""

    def has_alternatives(self) -> bool:
        return len(self.remaining) > 0

    def render(self) -> str:
        if self.remaining:
            index = self.rng.randrange(len(self.remaining))
            self.current = self.remaining.pop(index)
        return self.current
