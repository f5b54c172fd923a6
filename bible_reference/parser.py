"""Reference parsing for Bible citations in free text."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterator

from .grammar import Grammar, default_grammar
from .locations import parse_locations
from .models import BibleReference, VerseLocation

logger = logging.getLogger(__name__)


class ReferenceParser:
    """Finds citations in text using a single compiled ``Grammar``."""

    def __init__(self, grammar: Grammar | None = None) -> None:
        self.grammar = grammar or default_grammar()

    def parse_locations(self, text: str) -> list[VerseLocation]:
        return parse_locations(text, self.grammar)

    def iter_references(self, text: str) -> Iterator[BibleReference]:
        for match in self.grammar.reference_re.finditer(text):
            book = match.group("Book")
            locations = match.group("Locations")
            if book is None or locations is None:
                continue
            parsed = self.parse_locations(locations)
            if not parsed:
                logger.debug("Dropping %r: no usable locations", match.group(0))
                continue
            yield BibleReference(book=book, locations=tuple(parsed))

    def parse(self, text: str) -> list[BibleReference]:
        """Return every citation in ``text``, in the order they appear."""
        return list(self.iter_references(text))


@lru_cache(maxsize=None)
def _default_parser() -> ReferenceParser:
    return ReferenceParser(default_grammar())


def iter_references(text: str) -> Iterator[BibleReference]:
    return _default_parser().iter_references(text)


def parse(text: str) -> list[BibleReference]:
    return _default_parser().parse(text)
