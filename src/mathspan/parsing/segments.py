"""Segment building: interleave accepted math spans with the text between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from mathspan.parsing.delimiters import DELIMITERS, DelimiterSpec, find_candidates
from mathspan.parsing.overlap import resolve_overlaps
from mathspan.parsing.sentinels import ESCAPE_TABLE, EscapeTable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mathspan.parsing.delimiters import CandidateMatch


class SegmentKind(StrEnum):
    TEXT = "text"
    MATH = "math"


@dataclass(frozen=True)
class Segment:
    """One contiguous slice of the input, classified as text or math.

    ``display`` is always False for text segments.
    """

    kind: SegmentKind
    content: str
    display: bool = False

    @classmethod
    def text(cls, content: str) -> Segment:
        return cls(kind=SegmentKind.TEXT, content=content)

    @classmethod
    def math(cls, content: str, *, display: bool) -> Segment:
        return cls(kind=SegmentKind.MATH, content=content, display=display)

    @property
    def is_math(self) -> bool:
        return self.kind is SegmentKind.MATH


@dataclass(frozen=True)
class ParseContext:
    """Read-only parsing configuration shared across calls.

    Attributes:
        delimiters: Delimiter table to scan with.
        escapes: Escape sequences and their sentinel reversions.
    """

    delimiters: tuple[DelimiterSpec, ...] = field(default=DELIMITERS)
    escapes: EscapeTable = field(default=ESCAPE_TABLE)


DEFAULT_CONTEXT = ParseContext()


def build_segments(text: str, matches: Iterable[CandidateMatch]) -> list[Segment]:
    """Build the ordered segment list from sorted, non-overlapping *matches*.

    Gaps between matches become text segments. An empty *text* yields an
    empty list, never a single empty text segment.
    """
    segments: list[Segment] = []
    previous_end = 0
    for match in matches:
        if previous_end < match.start:
            segments.append(Segment.text(text[previous_end : match.start]))
        segments.append(Segment.math(match.content, display=match.display))
        previous_end = match.end
    if previous_end < len(text):
        segments.append(Segment.text(text[previous_end:]))
    return segments


def parse_delimiters(
    text: str,
    context: ParseContext = DEFAULT_CONTEXT,
) -> list[Segment]:
    """Split already-escaped *text* into text and math segments.

    Args:
        text: Input after ``strip_sentinels`` and ``escape_sequences``.
        context: Delimiter table to scan with.

    Returns:
        Segments in left-to-right order.
    """
    candidates = find_candidates(text, context.delimiters)
    return build_segments(text, resolve_overlaps(candidates))
