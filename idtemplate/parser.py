"""
Parser for the template description language.

The language avoids characters that have a meaning in the shell so that
templates can be passed on the command line without quoting trouble.

  • ``:``            element delimiter
  • ``=text=``       fixed string, may contain ``:`` and ``+``
  • ``key+``         one random character from the value of ``key``
  • ``key``          the whole value of ``key``
  • ``Nkey``         the first N characters of the value
  • ``keyN``         the last N characters of the value
  • ``AkeyB``        characters A to B of the value (1-based, inclusive)
  • ``keyA,B``       same as ``AkeyB``

Example: ``=x-=:1f:l:N+`` renders as ``x-`` followed by the first character
of ``f``, the whole of ``l`` and, once everything else is used up, a digit.
"""

from __future__ import annotations

import logging
import random
import re
from typing import List, Optional

from .elements import (
    Element,
    FixedElement,
    RandomElement,
    SliceMode,
    SubstringElement,
)
from .errors import TemplateSyntaxError

logger = logging.getLogger(__name__)

DELIMITER = ":"
LITERAL_DELIMITER = "="
RANDOM_INDICATOR = "+"


class Parser:
    """Turns a template string into an ordered list of fresh elements."""

    _TOKEN_RX = re.compile(
        r"(?P<lead>\d*)(?P<key>[A-Za-z]+)(?P<trail>\d*)"
        r"(?:,(?P<end>\d+))?(?P<random>\+)?"
    )

    @classmethod
    def get_elements(
        cls, template: str, rng: Optional[random.Random] = None
    ) -> List[Element]:
        elements: List[Element] = []
        i = 0
        n = len(template)

        while i < n:
            if template[i] == DELIMITER:
                i += 1
                continue

            if template[i] == LITERAL_DELIMITER:
                j = template.find(LITERAL_DELIMITER, i + 1)
                if j == -1:
                    raise TemplateSyntaxError(
                        "Unterminated fixed string", template[i:], i
                    )
                if j + 1 < n and template[j + 1] != DELIMITER:
                    raise TemplateSyntaxError(
                        "Fixed string must be followed by a delimiter",
                        template[i : j + 2],
                        i,
                    )
                elements.append(FixedElement(template[i : j + 1], template[i + 1 : j]))
                i = j + 1
                continue

            j = template.find(DELIMITER, i)
            if j == -1:
                j = n
            elements.append(cls.parse_token(template[i:j], i, rng))
            i = j

        logger.debug(f"Parsed {len(elements)} elements from template {template!r}")
        return elements

    @classmethod
    def parse_token(
        cls, token: str, position: int = 0, rng: Optional[random.Random] = None
    ) -> Element:
        """Build the element for a single non-literal token."""
        match = cls._TOKEN_RX.fullmatch(token)
        if match is None:
            raise TemplateSyntaxError("Invalid element", token, position)

        lead, key, trail, end = match.group("lead", "key", "trail", "end")

        if match.group("random"):
            if lead or trail or end:
                raise TemplateSyntaxError(
                    "Random elements take no ranges", token, position
                )
            return RandomElement(token, key, rng=rng)

        if end is not None:
            if lead or not trail:
                raise TemplateSyntaxError("Invalid range", token, position)
            return cls._range(token, key, int(trail), int(end), position)

        if lead and trail:
            return cls._range(token, key, int(lead), int(trail), position)

        if lead or trail:
            count = int(lead or trail)
            if count < 1:
                raise TemplateSyntaxError(
                    "Character count must be positive", token, position
                )
            mode = SliceMode.LEADING if lead else SliceMode.TRAILING
            return SubstringElement(token, key, mode=mode, count=count)

        return SubstringElement(token, key)

    @staticmethod
    def _range(
        token: str, key: str, start: int, end: int, position: int
    ) -> SubstringElement:
        if start < 1 or end < start:
            raise TemplateSyntaxError("Invalid range", token, position)
        return SubstringElement(token, key, mode=SliceMode.RANGE, start=start, end=end)
