"""Base element interface shared by all parsed template elements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Element(ABC):
    """
    One parsed unit of a template string.

    Elements keep their parsed definition (which data key they read and how)
    together with their enumeration state. ``render`` returns the current
    alternative and advances to the next one; once an element has no
    alternatives left it keeps returning its last value.
    """

    def __init__(self, element: str, key: Optional[str] = None):
        self.element = element
        self.key = key
        self.is_resolver = False

    def needs_external_data(self) -> bool:
        return self.key is not None

    def set_data(self, value: Optional[str]) -> None:
        """Receive the data value for ``key``; elements without a key ignore it."""
        return None

    def set_resolver(self, flag: bool) -> None:
        self.is_resolver = flag

    @abstractmethod
    def is_complete(self) -> bool:
        pass

    @abstractmethod
    def has_alternatives(self) -> bool:
        pass

    @abstractmethod
    def render(self) -> str:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.element!r})"


class DataElement(Element):
    """Element whose output is derived from one value of the data map."""

    def __init__(self, element: str, key: str):
        super().__init__(element, key)
        self.data: Optional[str] = None

    def set_data(self, value: Optional[str]) -> None:
        self.data = value
        self.reset()

    def is_complete(self) -> bool:
        return self.data is not None

    @abstractmethod
    def reset(self) -> None:
        pass
