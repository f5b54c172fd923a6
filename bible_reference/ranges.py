"""Expansion of range and sequence notation into explicit numbers."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def expand_range(
    start: int,
    next_value: int | None = None,
    end: int | None = None,
) -> list[int]:
    """Expand ``start[-end][,next]`` into an ordered list.

    The inclusive run ``start..end`` comes first and ``next_value`` is
    appended after it unchanged, even when it repeats a run member.
    A reversed run (``end < start``) collapses to ``[start]``.
    """
    if end is None:
        values = [start]
    elif end < start:
        logger.debug("Ignoring reversed range %s-%s", start, end)
        values = [start]
    else:
        values = list(range(start, end + 1))
    if next_value is not None:
        values.append(next_value)
    return values
