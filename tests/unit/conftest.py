"""Shared fixtures for unit tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from mathspan.render import MathRenderer


@dataclass
class RecordingEngine:
    """Fake engine that wraps content in a ``<typeset>`` tag and records calls.

    Content containing ``\\invalid`` yields error markup in the shape real
    engines produce. latex2mathml itself renders unknown commands such as
    ``\\invalid`` as a plain ``<mi>`` without error, so this trigger only
    exists here; tests of the real engine use a dangling ``^`` instead.
    """

    error_class: str = "mathspan-error"
    error_prefix: str = "ParseError: fake parse error:"
    calls: list[tuple[str, bool]] = field(default_factory=list)

    def render(self, content: str, *, display: bool) -> str:
        self.calls.append((content, display))
        if "\\invalid" in content:
            return (
                f'<span class="{self.error_class}" '
                f'title="{self.error_prefix} undefined control sequence">'
                f"{content}</span>"
            )
        mode = "display" if display else "inline"
        return f"<typeset {mode}>{content}</typeset>"


@pytest.fixture
def engine() -> RecordingEngine:
    """A fresh recording engine per test."""
    return RecordingEngine()


@pytest.fixture
def renderer(engine: RecordingEngine) -> MathRenderer:
    """MathRenderer wired to the recording engine."""
    return MathRenderer(engine=engine)
