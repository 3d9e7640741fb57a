"""Sentinel placeholders protecting escaped characters during parsing.

User escapes (``\\\\`` and ``\\$``) are swapped for private code points
before delimiter scanning so they can never be read as delimiters. After
segmentation they are reverted, differently for text and for math:

- text: sentinel-backslash -> ``\\``, sentinel-dollar -> ``$``
- math: sentinel-backslash -> ``\\\\``, sentinel-dollar -> ``$``

Sentinels only exist between ``escape_sequences`` and the reversion of a
single call.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from mathspan.exceptions import EscapeSequenceError

if TYPE_CHECKING:
    from collections.abc import Mapping

# Code points from the Symbols for Legacy Computing Supplement block,
# which no keyboard produces.
BACKSLASH_SENTINEL = "\U0001cc00"
DOLLAR_SENTINEL = "\U0001cc03"


@dataclass(frozen=True)
class EscapeTable:
    """Escape sequences and the two reversion alphabets.

    Attributes:
        escapes: Escape sequence -> sentinel, in substitution order.
        text_unescapes: Sentinel -> literal character for text segments.
        math_unescapes: Sentinel -> engine-compatible sequence for math.
    """

    escapes: Mapping[str, str]
    text_unescapes: Mapping[str, str]
    math_unescapes: Mapping[str, str]

    @functools.cached_property
    def sentinel_pattern(self) -> re.Pattern[str]:
        """Pattern matching any sentinel this table defines."""
        sentinels = {
            *self.escapes.values(),
            *self.text_unescapes,
            *self.math_unescapes,
        }
        if not sentinels:
            return re.compile(r"(?!)")
        # Longest first so multi-character sentinels win over their prefixes
        ordered = sorted(sentinels, key=len, reverse=True)
        return re.compile("|".join(re.escape(s) for s in ordered))


ESCAPE_TABLE = EscapeTable(
    escapes=MappingProxyType(
        {
            "\\\\": BACKSLASH_SENTINEL,
            "\\$": DOLLAR_SENTINEL,
        }
    ),
    text_unescapes=MappingProxyType(
        {
            BACKSLASH_SENTINEL: "\\",
            DOLLAR_SENTINEL: "$",
        }
    ),
    # A literal backslash in LaTeX is written ``\\``
    math_unescapes=MappingProxyType(
        {
            BACKSLASH_SENTINEL: "\\\\",
            DOLLAR_SENTINEL: "$",
        }
    ),
)


def strip_sentinels(text: str, table: EscapeTable = ESCAPE_TABLE) -> str:
    """Remove every sentinel character from caller-supplied *text*.

    Must run before ``escape_sequences``: downstream stages treat any
    sentinel as proof of an escape, so one smuggled in by the caller would
    otherwise be reverted as if the user had typed ``\\$`` or ``\\\\``.
    """
    return table.sentinel_pattern.sub("", text)


def replace_escape_sequence(
    text: str,
    sequence: str,
    table: EscapeTable = ESCAPE_TABLE,
) -> str:
    """Replace every occurrence of *sequence* with its sentinel.

    Raises:
        EscapeSequenceError: If *sequence* is not in ``table.escapes``.
    """
    replacement = table.escapes.get(sequence)
    if replacement is None:
        raise EscapeSequenceError(sequence)
    return text.replace(sequence, replacement)


def escape_sequences(text: str, table: EscapeTable = ESCAPE_TABLE) -> str:
    """Apply every escape in *table*, one sequence at a time, in table order."""
    for sequence in table.escapes:
        text = replace_escape_sequence(text, sequence, table)
    return text


def unescape_text(text: str, table: EscapeTable = ESCAPE_TABLE) -> str:
    """Revert sentinels in a text segment to the characters the user meant.

    A sentinel with no text reversion is left in place.
    """
    mapping = table.text_unescapes
    return table.sentinel_pattern.sub(
        lambda m: mapping.get(m.group(), m.group()), text
    )


def revert_for_engine(text: str, table: EscapeTable = ESCAPE_TABLE) -> str:
    """Revert sentinels in a math segment to LaTeX the engine understands.

    ``BACKSLASH_SENTINEL`` becomes ``\\\\`` so the engine sees one escaped
    backslash rather than the start of a command. A sentinel with no math
    reversion is left in place for ``contains_sentinel`` to catch.
    """
    mapping = table.math_unescapes
    return table.sentinel_pattern.sub(
        lambda m: mapping.get(m.group(), m.group()), text
    )


def contains_sentinel(text: str, table: EscapeTable = ESCAPE_TABLE) -> bool:
    return table.sentinel_pattern.search(text) is not None
