"""Overlap resolution for candidate math spans."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mathspan.parsing.delimiters import CandidateMatch

logger = logging.getLogger(__name__)


def _sort_key(candidate: CandidateMatch) -> tuple[int, int]:
    # Longest first at equal start, so ``$$a$$`` beats ``$$`` as two ``$``.
    return (candidate.start, -candidate.length)


def resolve_overlaps(candidates: Iterable[CandidateMatch]) -> list[CandidateMatch]:
    """Select a non-overlapping, left-to-right subset of *candidates*.

    Candidates are ordered by start offset, then by length descending, and
    swept once. A candidate is accepted only if it starts at or after the end
    of the last accepted one, which discards both spans nested inside an
    accepted span and spans overlapping its tail. Nested delimiters are
    therefore never extracted on their own; they stay in the outer span's
    content.

    Returns:
        Accepted candidates, sorted and mutually non-overlapping.
    """
    accepted: list[CandidateMatch] = []
    cursor = 0
    for candidate in sorted(candidates, key=_sort_key):
        if candidate.start >= cursor:
            accepted.append(candidate)
            cursor = candidate.end
    logger.debug("Accepted %d non-overlapping math spans", len(accepted))
    return accepted
