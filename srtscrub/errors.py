from __future__ import annotations

from typing import Optional


class SubtitleError(Exception):
    """Base error for subtitle processing."""


class ParseError(SubtitleError):
    """Malformed document or timestamp.

    ``line_number`` is 1-based and refers to the document handed to the
    parser; it is ``None`` for errors raised outside of a document (e.g. a
    standalone timestamp decode).
    """

    def __init__(self, message: str, *, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(self._render())

    def _render(self) -> str:
        if self.line_number is None:
            return self.message
        if self.line is None:
            return f"line {self.line_number}: {self.message}"
        return f"line {self.line_number}: {self.message}\n  {self.line_number} | {self.line}"


class PatternCompileError(SubtitleError):
    """A filter pattern failed to compile as a regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regex /{pattern}/: {reason}")


class EmptyDocumentError(SubtitleError):
    """No cues were parsed, or none survived filtering."""
