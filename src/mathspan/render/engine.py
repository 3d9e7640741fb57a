"""Math typesetting engines.

An engine turns the content of one math segment into markup. Engines must
not raise on bad notation: they return inline error markup instead, an
element carrying ``error_class`` whose ``title`` attribute starts with
``error_prefix``. ``postprocess.improve_error_message`` relies on both.
"""

from __future__ import annotations

import html
import logging
from typing import Protocol

from latex2mathml.converter import convert as latex2mathml_convert

logger = logging.getLogger(__name__)

ERROR_CLASS = "mathspan-error"


class MathEngine(Protocol):
    """Interface shared by every typesetting backend."""

    error_class: str
    error_prefix: str

    def render(self, content: str, *, display: bool) -> str:
        """Typeset *content*, in display mode if *display* is True.

        Returns:
            Markup for the formula, or error markup if it cannot be parsed.
        """
        ...


def error_markup(error_class: str, message: str, content: str) -> str:
    """Build the inline error element engines return on failure."""
    return (
        f'<span class="{error_class}" title="{html.escape(message, quote=True)}">'
        f"{html.escape(content, quote=False)}</span>"
    )


class Latex2MathMLEngine:
    """Render LaTeX to MathML with ``latex2mathml``."""

    error_class = ERROR_CLASS
    error_prefix = "ParseError: latex2mathml parse error:"

    def render(self, content: str, *, display: bool) -> str:
        try:
            return latex2mathml_convert(
                content, display="block" if display else "inline"
            )
        except Exception as exc:
            # latex2mathml raises a zoo of exception types for bad input
            logger.warning("latex2mathml failed on %r: %s", content, exc)
            message = f"{self.error_prefix} {str(exc) or type(exc).__name__}"
            return error_markup(self.error_class, message, content)


class EchoEngine:
    """Wrap content in a ``<typeset>`` tag without typesetting it."""

    error_class = ERROR_CLASS
    error_prefix = "ParseError: echo parse error:"

    def render(self, content: str, *, display: bool) -> str:
        mode = "display" if display else "inline"
        return f"<typeset {mode}>{content}</typeset>"


ENGINES: dict[str, type[MathEngine]] = {
    "latex2mathml": Latex2MathMLEngine,
    "echo": EchoEngine,
}


def get_engine(backend: str) -> MathEngine:
    """Instantiate the engine registered under *backend*.

    Raises:
        ValueError: If no engine is registered under that name.
    """
    try:
        engine_cls = ENGINES[backend]
    except KeyError:
        msg = f"Unknown math engine {backend!r}; expected one of {sorted(ENGINES)}"
        raise ValueError(msg) from None
    return engine_cls()
