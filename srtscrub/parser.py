"""
SRT document parser.

The grammar is line oriented::

    [blank lines]
    <sequence number>
    <timestamp> --> <timestamp>
    <text line>
    [<text line> ...]
    <blank line | end of input>

Sequence numbers are read but discarded; the returned cues are ordered by
their show time instead. Anything that cannot be read as a cue is a hard
error rather than being skipped.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .errors import ParseError
from .models import Cue
from .timestamp import TIMESTAMP_PATTERN, from_fields

BOM = "\ufeff"

_HSPACE = r"[ \t]*"
_SEQUENCE_RE = re.compile(_HSPACE + r"[0-9]+" + _HSPACE)
_TIMING_RE = re.compile(
    _HSPACE
    + TIMESTAMP_PATTERN.format(p="show_")
    + _HSPACE
    + "-->"
    + _HSPACE
    + TIMESTAMP_PATTERN.format(p="hide_")
    + _HSPACE
)


def _is_blank(line: str) -> bool:
    return not line.strip()


class _LineCursor:
    """Forward-only cursor over the document lines."""

    def __init__(self, lines: List[str]) -> None:
        self._lines = lines
        self._pos = 0

    @property
    def line_number(self) -> int:
        return self._pos + 1

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def peek(self) -> Optional[str]:
        if self.at_end():
            return None
        return self._lines[self._pos]

    def advance(self) -> str:
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def skip_blank(self) -> None:
        while not self.at_end() and _is_blank(self._lines[self._pos]):
            self._pos += 1

    def fail(self, expected: str) -> ParseError:
        line = self.peek()
        if line is None:
            return ParseError(f"expected {expected}, found end of input", line_number=self.line_number)
        return ParseError(f"expected {expected}", line_number=self.line_number, line=line)


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` and drop a trailing ``\\r`` so CRLF input reads like LF input."""
    lines = text.split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _read_cue(cursor: _LineCursor) -> Cue:
    line = cursor.peek()
    if line is None or not _SEQUENCE_RE.fullmatch(line):
        raise cursor.fail("sequence number")
    cursor.advance()

    cursor.skip_blank()
    line = cursor.peek()
    match = _TIMING_RE.fullmatch(line) if line is not None else None
    if match is None:
        raise cursor.fail("timing line '<start> --> <end>'")
    cursor.advance()

    show_at = from_fields(
        match.group("show_hours"),
        match.group("show_minutes"),
        match.group("show_seconds"),
        match.group("show_millis"),
    )
    hide_at = from_fields(
        match.group("hide_hours"),
        match.group("hide_minutes"),
        match.group("hide_seconds"),
        match.group("hide_millis"),
    )

    # Greedy: only an empty line or end of input ends the text, even if a
    # line looks like the next sequence number. A whitespace-only line is text.
    text: List[str] = []
    while not cursor.at_end() and cursor.peek() != "":
        text.append(cursor.advance())
    if not text:
        raise cursor.fail("at least one line of subtitle text")

    return Cue(show_at=show_at, hide_at=hide_at, text=text)


def parse_document(text: str) -> List[Cue]:
    """Parse a whole SRT document and return its cues sorted by show time.

    Raises ``ParseError`` pointing at the first line that does not fit the
    grammar.
    """
    if text.startswith(BOM):
        text = text[len(BOM):]

    cursor = _LineCursor(split_lines(text))
    cues: List[Cue] = []
    while True:
        cursor.skip_blank()
        if cursor.at_end():
            break
        cues.append(_read_cue(cursor))

    # list.sort is stable, so cues sharing a show time keep their input order.
    cues.sort(key=lambda cue: cue.show_at)
    return cues
