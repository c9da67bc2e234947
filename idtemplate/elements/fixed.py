"""Fixed string element (``=text=``)."""

from __future__ import annotations

from .base import Element


class FixedElement(Element):
    def __init__(self, element: str, text: str):
        super().__init__(element)
        self.text = text

    def is_complete(self) -> bool:
        return True

    def has_alternatives(self) -> bool:
        # A literal only ever has the one rendering
        return False

    def render(self) -> str:
        return self.text
