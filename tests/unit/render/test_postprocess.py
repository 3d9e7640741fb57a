"""Tests for per-segment post-processing."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

import pytest

from mathspan.exceptions import SentinelLeakError
from mathspan.parsing.segments import Segment
from mathspan.parsing.sentinels import (
    BACKSLASH_SENTINEL,
    DOLLAR_SENTINEL,
    EscapeTable,
)
from mathspan.render.postprocess import (
    ERROR_LABEL,
    LATEX_LINE_BREAK,
    convert_newlines_to_latex_breaks,
    improve_error_message,
    render_math_segment,
    render_segment,
    render_text,
)

if TYPE_CHECKING:
    from tests.unit.conftest import RecordingEngine

PREFIX = "ParseError: fake parse error:"


class TestConvertNewlines:
    def test_break_token_is_space_four_backslashes_space(self) -> None:
        assert LATEX_LINE_BREAK == " " + "\\" * 4 + " "

    def test_each_newline_replaced(self) -> None:
        assert convert_newlines_to_latex_breaks("a\n\nb") == (
            f"a{LATEX_LINE_BREAK}{LATEX_LINE_BREAK}b"
        )

    def test_no_newlines(self) -> None:
        assert convert_newlines_to_latex_breaks("one line") == "one line"


class TestImproveErrorMessage:
    """Only the engine prefix inside the error title is rewritten."""

    def test_rewrites_prefix(self) -> None:
        markup = f'<span class="mathspan-error" title="{PREFIX} something">Error</span>'
        assert improve_error_message(markup, "mathspan-error", PREFIX) == (
            f'<span class="mathspan-error" title="{ERROR_LABEL} something">Error</span>'
        )

    def test_other_attributes_between_class_and_title(self) -> None:
        markup = (
            f'<span class="mathspan-error" style="color:#cc0000" '
            f'title="{PREFIX} bad">x</span>'
        )
        result = improve_error_message(markup, "mathspan-error", PREFIX)
        assert f'title="{ERROR_LABEL} bad"' in result
        assert 'style="color:#cc0000"' in result

    def test_non_matching_prefix_untouched(self) -> None:
        markup = '<span class="mathspan-error" title="ParseError: other: x">x</span>'
        assert improve_error_message(markup, "mathspan-error", PREFIX) == markup

    def test_prefix_outside_error_element_untouched(self) -> None:
        markup = f'<span class="note" title="{PREFIX} x">{PREFIX}</span>'
        assert improve_error_message(markup, "mathspan-error", PREFIX) == markup

    def test_prefix_in_element_text_untouched(self) -> None:
        markup = f'<span class="mathspan-error" title="oops">{PREFIX} x</span>'
        assert improve_error_message(markup, "mathspan-error", PREFIX) == markup

    def test_successful_markup_untouched(self) -> None:
        assert improve_error_message("<math>x</math>", "mathspan-error", PREFIX) == (
            "<math>x</math>"
        )


class TestRenderText:
    def test_newlines_converted_then_unescaped(self) -> None:
        text = f"cost {DOLLAR_SENTINEL}5\npath C:{BACKSLASH_SENTINEL}tmp"
        assert render_text(text) == f"cost $5{LATEX_LINE_BREAK}path C:\\tmp"

    def test_reverted_backslash_not_part_of_break(self) -> None:
        assert render_text(f"{BACKSLASH_SENTINEL}\n") == f"\\{LATEX_LINE_BREAK}"


class TestRenderMathSegment:
    def test_escaped_backslash_doubled_for_engine(
        self, engine: RecordingEngine
    ) -> None:
        content = f"a {BACKSLASH_SENTINEL} b"
        render_math_segment(content, engine, display=False)
        assert engine.calls == [("a \\\\ b", False)]

    def test_escaped_dollar_single_for_engine(self, engine: RecordingEngine) -> None:
        render_math_segment(f"{DOLLAR_SENTINEL}5", engine, display=True)
        assert engine.calls == [("$5", True)]

    def test_newlines_in_math_untouched(self, engine: RecordingEngine) -> None:
        assert render_math_segment("x\ny", engine, display=False) == (
            "<typeset inline>x\ny</typeset>"
        )

    def test_error_markup_relabelled(self, engine: RecordingEngine) -> None:
        result = render_math_segment("a + \\invalid", engine, display=False)
        assert f'title="{ERROR_LABEL} undefined control sequence"' in result

    def test_leaked_sentinel_raises(self, engine: RecordingEngine) -> None:
        """A sentinel the table cannot revert never reaches the engine."""
        table = EscapeTable(
            escapes=MappingProxyType({"\\\\": BACKSLASH_SENTINEL}),
            text_unescapes=MappingProxyType({BACKSLASH_SENTINEL: "\\"}),
            math_unescapes=MappingProxyType({}),
        )
        with pytest.raises(SentinelLeakError):
            render_math_segment(BACKSLASH_SENTINEL, engine, display=False, table=table)
        assert engine.calls == []


class TestRenderSegment:
    def test_text_segment_bypasses_engine(self, engine: RecordingEngine) -> None:
        assert render_segment(Segment.text("a\nb"), engine) == f"a{LATEX_LINE_BREAK}b"
        assert engine.calls == []

    def test_math_segment_uses_display_flag(self, engine: RecordingEngine) -> None:
        result = render_segment(Segment.math("E=mc^2", display=True), engine)
        assert result == "<typeset display>E=mc^2</typeset>"
