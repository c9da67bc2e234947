"""
idtemplate: build identifier candidates from a compact template language.

A template such as ``1f:l:N+`` combines data fields (here the first character
of ``f`` and the whole of ``l``) with literal text, substrings and random
characters. :class:`Template` returns one candidate per call and walks
through all alternatives before signalling exhaustion with an empty string.
"""

from .charclasses import get_predefined_data
from .config import IdTemplateConfig, load_config
from .errors import (
    IdTemplateError,
    IncompleteElementError,
    TemplateNotSetError,
    TemplateSyntaxError,
)
from .parser import Parser
from .template import Template

__all__ = [
    "IdTemplateConfig",
    "IdTemplateError",
    "IncompleteElementError",
    "Parser",
    "Template",
    "TemplateNotSetError",
    "TemplateSyntaxError",
    "get_predefined_data",
    "load_config",
]
