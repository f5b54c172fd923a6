"""Chapter/verse location parsing for the text that follows a book label."""

from __future__ import annotations

import logging
from typing import Iterator

import regex

from .constants import MAX_NUMBER
from .grammar import Grammar, default_grammar
from .models import VerseLocation
from .ranges import expand_range

logger = logging.getLogger(__name__)


class _SkipLocation(Exception):
    pass


def _number(match: regex.Match, name: str) -> int | None:
    text = match.group(name)
    if text is None:
        return None
    if not text.isascii():
        raise _SkipLocation(f"{name}={text!r} is not an ASCII number")
    try:
        value = int(text)
    except ValueError:
        raise _SkipLocation(f"{name}={text!r} is not a number") from None
    if not 0 <= value <= MAX_NUMBER:
        raise _SkipLocation(f"{name}={value} is out of range")
    return value


def _location_from_match(match: regex.Match) -> VerseLocation | None:
    try:
        chapter = _number(match, "Chapter")
        if chapter is None:
            return None
        chapters = expand_range(
            chapter,
            _number(match, "ChapterNext"),
            _number(match, "ChapterEnd"),
        )
        verse = _number(match, "Verse")
        verses = None
        if verse is not None:
            verses = expand_range(
                verse,
                _number(match, "VerseNext"),
                _number(match, "VerseEnd"),
            )
    except _SkipLocation as exc:
        logger.debug("Skipping location %r: %s", match.group(0), exc)
        return None
    return VerseLocation(chapters=tuple(chapters), verses=verses)


def iter_locations(text: str, grammar: Grammar | None = None) -> Iterator[VerseLocation]:
    """Yield one location per match of the location grammar in ``text``."""
    grammar = grammar or default_grammar()
    for match in grammar.location_re.finditer(text):
        location = _location_from_match(match)
        if location is not None:
            yield location


def parse_locations(text: str, grammar: Grammar | None = None) -> list[VerseLocation]:
    return list(iter_locations(text, grammar))
