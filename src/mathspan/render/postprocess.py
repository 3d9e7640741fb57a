"""Per-segment output: text unescaping and math engine invocation."""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

from mathspan.exceptions import SentinelLeakError
from mathspan.parsing.sentinels import (
    ESCAPE_TABLE,
    contains_sentinel,
    revert_for_engine,
    unescape_text,
)

if TYPE_CHECKING:
    from mathspan.parsing.segments import Segment
    from mathspan.parsing.sentinels import EscapeTable
    from mathspan.render.engine import MathEngine

ERROR_LABEL = "LaTeX Error:"

# Space, four backslashes, space: a forced LaTeX line break in plain text.
LATEX_LINE_BREAK = " \\\\\\\\ "


def convert_newlines_to_latex_breaks(text: str) -> str:
    """Replace every newline in *text* with ``LATEX_LINE_BREAK``."""
    return text.replace("\n", LATEX_LINE_BREAK)


@functools.cache
def _error_title_pattern(error_class: str, error_prefix: str) -> re.Pattern[str]:
    return re.compile(
        rf'(<span\b[^>]*?\sclass="{re.escape(error_class)}"[^>]*?\stitle=")'
        rf'{re.escape(error_prefix)}(?=[^"]*"[^>]*>)'
    )


def improve_error_message(markup: str, error_class: str, error_prefix: str) -> str:
    """Swap the engine's error prefix for ``ERROR_LABEL``.

    Only the prefix inside the ``title`` attribute of a ``<span>`` carrying
    *error_class* is rewritten; the rest of the message and any other markup,
    including other prefixes, is left alone.
    """
    pattern = _error_title_pattern(error_class, error_prefix)
    return pattern.sub(lambda m: m.group(1) + ERROR_LABEL, markup)


def render_text(content: str, table: EscapeTable = ESCAPE_TABLE) -> str:
    # Newlines first, so a reverted backslash is never part of a break token.
    return unescape_text(convert_newlines_to_latex_breaks(content), table)


def render_math_segment(
    content: str,
    engine: MathEngine,
    *,
    display: bool,
    table: EscapeTable = ESCAPE_TABLE,
) -> str:
    """Typeset one math segment with *engine*.

    Raises:
        SentinelLeakError: If reverting escapes left a sentinel behind.
    """
    latex = revert_for_engine(content, table)
    if contains_sentinel(latex, table):
        raise SentinelLeakError(latex)
    markup = engine.render(latex, display=display)
    return improve_error_message(markup, engine.error_class, engine.error_prefix)


def render_segment(
    segment: Segment,
    engine: MathEngine,
    table: EscapeTable = ESCAPE_TABLE,
) -> str:
    """Render one segment to its output string, reverting escapes with *table*."""
    if segment.is_math:
        return render_math_segment(
            segment.content, engine, display=segment.display, table=table
        )
    return render_text(segment.content, table)
