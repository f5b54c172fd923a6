"""Grammar fragments and numeric limits for scripture citations."""

from __future__ import annotations


MAX_NUMBER = 255

REFERENCE_GROUPS: tuple[str, ...] = ("Book", "Locations")
LOCATION_GROUPS: tuple[str, ...] = (
    "Chapter",
    "ChapterEnd",
    "ChapterNext",
    "Verse",
    "VerseEnd",
    "VerseNext",
)

# Single chapter: 1
# Range: 1-2
# Sequence: 1,4
# Mixed chapters: 1-2,4
# Single verse: 1:1
# Range: 1:1-3
# Sequence: 1:1,3
# Mixed verses: 1:1-2,4
LOCATION_PATTERN = (
    r"(?P<Chapter>1?[0-9]?[0-9])"
    r"(?:-(?P<ChapterEnd>\d+)|,\s*(?P<ChapterNext>\d+))*"
    r"(?::\s*(?P<Verse>\d+))?"
    r"(?:-(?P<VerseEnd>\d+)|,\s*(?P<VerseNext>\d+))*"
)

# Gen 1:1, 2
# 3 King 1:3-4
# II Ki. 3:12-14, 25
BOOK_PATTERN = r"(?:(?:[1234]|I{1,4})\s*)?\p{L}+\.?"

REFERENCE_PATTERN = (
    rf"(?P<Book>{BOOK_PATTERN})\s*"
    rf"(?P<Locations>(?:{LOCATION_PATTERN}\s?)+)"
)
