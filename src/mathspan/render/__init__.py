"""Segment post-processing and math engine integration."""

from mathspan.render.engine import (
    ENGINES,
    EchoEngine,
    Latex2MathMLEngine,
    MathEngine,
    get_engine,
)
from mathspan.render.pipeline import MathRenderer, render_math
from mathspan.render.postprocess import (
    ERROR_LABEL,
    convert_newlines_to_latex_breaks,
    improve_error_message,
    render_segment,
)

__all__ = [
    "ENGINES",
    "ERROR_LABEL",
    "EchoEngine",
    "Latex2MathMLEngine",
    "MathEngine",
    "MathRenderer",
    "convert_newlines_to_latex_breaks",
    "get_engine",
    "improve_error_message",
    "render_math",
    "render_segment",
]
