"""
Template engine building identifier candidates from a template string.

The template string describes what a generated id should look like in
reference to the data it is given (see :mod:`idtemplate.parser` for the
language). Each call to :meth:`Template.build_string` returns one candidate;
repeated calls walk through the alternatives of all elements until every
combination has been produced, after which an empty string is returned.

Random elements are resolvers: they stay out of the output while any other
element still has alternatives and are switched on one at a time, in
template order, once everything else is used up.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterator, List, Mapping, Optional

from .charclasses import get_predefined_data
from .elements import Element
from .errors import IncompleteElementError, TemplateNotSetError
from .parser import Parser

logger = logging.getLogger(__name__)


class Template:
    """
    A single generation session.

    Setting the template or merging data only marks the parsed elements or
    their data as stale; both are rebuilt at the start of the next
    :meth:`build_string` call. Instances are not safe for concurrent use.
    """

    def __init__(
        self,
        template: Optional[str] = None,
        data: Optional[Mapping[str, str]] = None,
        prefix: str = "T",
        rng: Optional[random.Random] = None,
    ):
        """
        :param template: The template string; may also be given through ``data``
        :param data: Initial data map, keys already carrying ``prefix``
        :param prefix: Prefix of all data keys and the reserved template key
        :param rng: Random source handed to random elements
        """
        self.prefix = prefix
        self.rng = rng
        self.template: Optional[str] = None
        self.elements: Optional[List[Element]] = None
        self.data: Dict[str, str] = get_predefined_data(prefix)

        self._has_alternatives = True
        self._update_elements = True
        self._update_data = True
        self._next_resolver: Optional[Element] = None

        if data:
            self.update_data(data)
            if template is None and self.prefix in self.data:
                template = self.data[self.prefix]

        if template is not None:
            self.set_template(template)

    get_predefined_data = staticmethod(get_predefined_data)

    def set_template(self, template: str) -> None:
        """Replace the template string; a new template starts a new enumeration."""
        logger.info(f"Got template string: {template}")
        self.template = template
        self._update_elements = True
        self._has_alternatives = True
        self._next_resolver = None

    def get_template(self) -> str:
        if self.template is None:
            logger.error("Template string has not been initialized")
            raise TemplateNotSetError()
        return self.template

    def update_data(self, new_data: Mapping[str, str]) -> None:
        """Merge ``new_data`` into the stored data; new values win."""
        self.data.update(new_data)
        self._update_data = True

    def get_data(self) -> Dict[str, str]:
        return dict(self.data)

    def has_alternatives(self) -> bool:
        """Whether another call to :meth:`build_string` can return a new candidate."""
        return self._has_alternatives

    def build_string(self) -> str:
        """
        Assemble the next candidate.

        :return: A candidate id matching the template, or an empty string
                 once all alternatives are exhausted
        :raises TemplateNotSetError: No template string was ever set
        :raises IncompleteElementError: An element lacks the data it needs
        """
        logger.debug("Attempting to generate a new id")

        if not self._has_alternatives:
            logger.warning("No alternatives left")
            return ""

        if self._update_elements:
            self.elements = Parser.get_elements(self.get_template(), rng=self.rng)
            self._update_elements = False
            self._next_resolver = None
            # Fresh elements carry no data yet
            self._update_data = True

        result, self._has_alternatives = self._walk()

        # The data was either just distributed or already up to date
        self._update_data = False

        while not self._has_alternatives and self._next_resolver is not None:
            # Activate the pending resolver as an ordinary element; the next
            # walk picks up the following one
            logger.debug(f"Activating resolver element {self._next_resolver!r}")
            self._next_resolver.set_resolver(False)
            self._has_alternatives = True
            self._next_resolver = None

            if result:
                break
            # An empty string would read as exhaustion, so walk again with
            # the activated element
            result, self._has_alternatives = self._walk()

        return result

    def _walk(self) -> tuple[str, bool]:
        """Render one pass; return the output and whether alternatives remain."""
        assert self.elements is not None
        parts: List[str] = []

        # assume the worst
        has_alternatives = False

        for element in self.elements:
            if self._update_data and element.needs_external_data():
                element.set_data(self.data.get(self.prefix + element.key))

            if element.is_resolver:
                if self._next_resolver is None:
                    self._next_resolver = element
                continue

            if not element.is_complete():
                logger.error(
                    f"Incomplete element {type(element).__name__} "
                    f'(element="{element.element}")'
                )
                raise IncompleteElementError(element)

            parts.append(element.render().lower())

            if element.has_alternatives():
                has_alternatives = True
            else:
                logger.debug(
                    f"No alternatives left for {type(element).__name__} "
                    f"(element={element.element})"
                )

        return "".join(parts), has_alternatives

    def __iter__(self) -> Iterator[str]:
        """Yield non-empty candidates until the alternatives are exhausted."""
        while self._has_alternatives:
            candidate = self.build_string()
            if candidate:
                yield candidate
