"""Structured citation records produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class VerseLocation:
    chapters: tuple[int, ...]
    verses: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "chapters", tuple(self.chapters))
        if not self.chapters:
            raise ValueError("a location needs at least one chapter")
        if self.verses is not None:
            object.__setattr__(self, "verses", tuple(self.verses))
            if not self.verses:
                raise ValueError("verses must be None or non-empty")

    @property
    def has_verses(self) -> bool:
        return self.verses is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "chapters": list(self.chapters),
            "verses": list(self.verses) if self.verses is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VerseLocation":
        verses = data.get("verses")
        return cls(
            chapters=tuple(int(value) for value in data.get("chapters", ())),
            verses=tuple(int(value) for value in verses) if verses is not None else None,
        )


@dataclass(frozen=True)
class BibleReference:
    """A book label as written in the text plus its chapter/verse locations."""

    book: str
    locations: tuple[VerseLocation, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "locations", tuple(self.locations))
        if not self.locations:
            raise ValueError(f"reference {self.book!r} has no locations")

    def to_dict(self) -> dict[str, Any]:
        return {
            "book": self.book,
            "locations": [location.to_dict() for location in self.locations],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BibleReference":
        return cls(
            book=str(data["book"]),
            locations=tuple(
                VerseLocation.from_dict(item) for item in data.get("locations", ())
            ),
        )
