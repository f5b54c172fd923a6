"""Render parsed references back into citation text."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import BibleReference, VerseLocation


def _is_run(values: Sequence[int]) -> bool:
    return len(values) >= 2 and all(b == a + 1 for a, b in zip(values, values[1:]))


def format_numbers(values: Sequence[int]) -> str:
    """Write numbers as ``a``, ``a,b``, ``a-b`` or ``a-b,n``."""
    if len(values) == 1:
        return str(values[0])
    if _is_run(values):
        return f"{values[0]}-{values[-1]}"
    if _is_run(values[:-1]):
        return f"{values[0]}-{values[-2]},{values[-1]}"
    if len(values) == 2:
        return f"{values[0]},{values[1]}"
    raise ValueError(f"cannot express {list(values)} as a range or sequence")


def format_location(location: VerseLocation) -> str:
    text = format_numbers(location.chapters)
    if location.verses is not None:
        text = f"{text}:{format_numbers(location.verses)}"
    return text


def format_reference(reference: BibleReference) -> str:
    locations = " ".join(format_location(location) for location in reference.locations)
    return f"{reference.book} {locations}"


def format_references(references: Iterable[BibleReference], separator: str = "; ") -> str:
    return separator.join(format_reference(reference) for reference in references)
