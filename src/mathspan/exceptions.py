"""Exceptions raised by mathspan.

Malformed user input never raises; these signal programmer errors only.
"""

from __future__ import annotations


class MathspanError(Exception):
    """Base class for mathspan errors."""


class EscapeSequenceError(MathspanError):
    """An escape sequence was requested that the escape table does not define."""

    def __init__(self, sequence: str) -> None:
        self.sequence = sequence
        super().__init__(f'Escape sequence "{sequence}" not found in escapes map.')


class SentinelLeakError(MathspanError):
    """A sentinel character survived into text handed to the math engine."""

    def __init__(self, content: str) -> None:
        self.content = content
        super().__init__(f"Sentinel character left in engine input: {content!r}")
