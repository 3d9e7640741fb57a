"""End-to-end rendering of mixed text and LaTeX."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from mathspan.parsing.segments import (
    DEFAULT_CONTEXT,
    ParseContext,
    Segment,
    parse_delimiters,
)
from mathspan.parsing.sentinels import escape_sequences, strip_sentinels
from mathspan.render.engine import Latex2MathMLEngine, MathEngine
from mathspan.render.postprocess import render_segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MathRenderer:
    """Render mixed text/LaTeX strings with a given engine.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    engine: MathEngine = field(default_factory=Latex2MathMLEngine)
    context: ParseContext = DEFAULT_CONTEXT

    def segments(self, text: str) -> list[Segment]:
        """Sanitise, escape and split *text* into segments.

        Segment contents still carry sentinel characters for escapes.
        """
        escapes = self.context.escapes
        escaped = escape_sequences(strip_sentinels(text, escapes), escapes)
        return parse_delimiters(escaped, self.context)

    def render(self, text: str) -> str:
        """Render *text*, typesetting each math segment in place."""
        segments = self.segments(text)
        logger.debug(
            "Rendering %d segments (%d math)",
            len(segments),
            sum(1 for s in segments if s.is_math),
        )
        escapes = self.context.escapes
        return "".join(
            render_segment(segment, self.engine, escapes) for segment in segments
        )


_DEFAULT_RENDERER = MathRenderer()


def render_math(text: str) -> str:
    """Parse and render LaTeX in *text* with the default MathML engine.

    Args:
        text: Text with ``$...$``, ``$$...$$``, ``\\(...\\)``, ``\\[...\\]``
            or ``align``/``align*`` math. ``\\$`` and ``\\\\`` are literal.

    Returns:
        The text with every math span replaced by its rendered markup.
    """
    return _DEFAULT_RENDERER.render(text)
