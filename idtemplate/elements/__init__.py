"""
Template elements.

A template string is decomposed by the parser into an ordered list of
elements. The set of element kinds is fixed by the template language:
fixed strings, random picks and substrings.
"""

from .base import Element, DataElement
from .fixed import FixedElement
from .random import RandomElement
from .substring import SliceMode, SubstringElement

__all__ = [
    "Element",
    "DataElement",
    "FixedElement",
    "RandomElement",
    "SliceMode",
    "SubstringElement",
]
