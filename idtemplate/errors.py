"""Exceptions raised by the template engine and its parser."""

from __future__ import annotations

from typing import Any


class IdTemplateError(Exception):
    """Base class for all idtemplate errors."""


class TemplateNotSetError(IdTemplateError):
    """Raised when a template is used before a template string was set."""

    exit_code = 176

    def __init__(self, message: str = "Template string has not been initialized"):
        super().__init__(message)


class IncompleteElementError(IdTemplateError):
    """Raised when an element is rendered without the data it requires."""

    exit_code = 175

    def __init__(self, element: Any):
        self.element = element
        super().__init__(
            f"Incomplete element {type(element).__name__} "
            f'(element="{element.element}", key={element.key!r})'
        )


class TemplateSyntaxError(IdTemplateError, ValueError):
    """Raised by the parser for a token it cannot understand."""

    exit_code = 2

    def __init__(self, message: str, token: str, position: int):
        self.token = token
        self.position = position
        super().__init__(f"{message}: {token!r} at position {position}")
