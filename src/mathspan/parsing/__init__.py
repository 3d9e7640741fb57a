"""Delimiter scanning, overlap resolution and segment building."""

from mathspan.parsing.delimiters import (
    DELIMITERS,
    CandidateMatch,
    DelimiterSpec,
    MathMode,
    escape_regex,
    find_candidates,
)
from mathspan.parsing.overlap import resolve_overlaps
from mathspan.parsing.segments import (
    DEFAULT_CONTEXT,
    ParseContext,
    Segment,
    SegmentKind,
    build_segments,
    parse_delimiters,
)
from mathspan.parsing.sentinels import (
    BACKSLASH_SENTINEL,
    DOLLAR_SENTINEL,
    ESCAPE_TABLE,
    EscapeTable,
    escape_sequences,
    replace_escape_sequence,
    revert_for_engine,
    strip_sentinels,
    unescape_text,
)

__all__ = [
    "BACKSLASH_SENTINEL",
    "DEFAULT_CONTEXT",
    "DELIMITERS",
    "DOLLAR_SENTINEL",
    "ESCAPE_TABLE",
    "CandidateMatch",
    "DelimiterSpec",
    "EscapeTable",
    "MathMode",
    "ParseContext",
    "Segment",
    "SegmentKind",
    "build_segments",
    "escape_regex",
    "escape_sequences",
    "find_candidates",
    "parse_delimiters",
    "replace_escape_sequence",
    "resolve_overlaps",
    "revert_for_engine",
    "strip_sentinels",
    "unescape_text",
]
