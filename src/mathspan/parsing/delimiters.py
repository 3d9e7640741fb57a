"""Math delimiter table and candidate matching.

Each delimiter is scanned independently with ``re.finditer``, so matches of
one delimiter never overlap each other, but matches of different delimiters
can. ``overlap.resolve_overlaps`` picks the winners.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger(__name__)


class MathMode(StrEnum):
    """How the engine should lay out a math span."""

    INLINE = "inline"
    DISPLAY = "display"


@dataclass(frozen=True)
class DelimiterSpec:
    """A pair of math markers and the compiled pattern that finds them.

    Attributes:
        start: Opening marker, e.g. ``$$`` or ``\\begin{align}``.
        end: Closing marker.
        mode: Inline or display rendering.
        pattern: Compiled regex; group 1 is the content between markers.
        includes_markers: If True the whole match (markers included) is the
            content. Named environments need this so the engine knows which
            environment it is typesetting.
    """

    start: str
    end: str
    mode: MathMode
    pattern: re.Pattern[str]
    includes_markers: bool = False

    @property
    def display(self) -> bool:
        return self.mode is MathMode.DISPLAY


@dataclass(frozen=True)
class CandidateMatch:
    """A possible math span; ``end`` is exclusive."""

    display: bool
    content: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


def escape_regex(text: str) -> str:
    """Escape regex metacharacters so *text* matches literally."""
    return re.escape(text)


def bracket_delimiter(start: str, end: str, mode: MathMode) -> DelimiterSpec:
    """Build a delimiter matching the shortest span between *start* and *end*."""
    pattern = re.compile(
        f"(?:{escape_regex(start)})(.*?)(?:{escape_regex(end)})",
        re.DOTALL,
    )
    return DelimiterSpec(start=start, end=end, mode=mode, pattern=pattern)


def environment_delimiter(name: str) -> DelimiterSpec:
    r"""Build a display delimiter for ``\begin{name}...\end{name}``."""
    start = f"\\begin{{{name}}}"
    end = f"\\end{{{name}}}"
    pattern = re.compile(
        f"(?:{escape_regex(start)})(.*?)(?:{escape_regex(end)})",
        re.DOTALL,
    )
    return DelimiterSpec(
        start=start,
        end=end,
        mode=MathMode.DISPLAY,
        pattern=pattern,
        includes_markers=True,
    )


# Order is irrelevant: resolution is positional.
DELIMITERS: tuple[DelimiterSpec, ...] = (
    bracket_delimiter("$$", "$$", MathMode.DISPLAY),
    bracket_delimiter("$", "$", MathMode.INLINE),
    bracket_delimiter("\\(", "\\)", MathMode.INLINE),
    bracket_delimiter("\\[", "\\]", MathMode.DISPLAY),
    environment_delimiter("align"),
    environment_delimiter("align*"),
)


def find_candidates(
    text: str,
    delimiters: tuple[DelimiterSpec, ...] = DELIMITERS,
) -> list[CandidateMatch]:
    """Collect every match of every delimiter in *text*.

    Unterminated markers produce no match. The result is unordered across
    delimiters and may contain overlapping candidates.
    """
    candidates: list[CandidateMatch] = []
    for delimiter in delimiters:
        for match in delimiter.pattern.finditer(text):
            content = match.group(0) if delimiter.includes_markers else match.group(1)
            candidates.append(
                CandidateMatch(
                    display=delimiter.display,
                    content=content,
                    start=match.start(),
                    end=match.end(),
                )
            )
    logger.debug("Found %d candidate math spans", len(candidates))
    return candidates
