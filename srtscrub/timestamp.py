"""
Timestamp codec for SRT timing lines.

Decoding is tolerant about field widths: hours take any number of digits,
minutes and seconds may be written with a single digit, and the millisecond
fraction may be shortened or left empty. Encoding is strict and always emits
``HH:MM:SS,mmm``.
"""

from __future__ import annotations

import re
from datetime import timedelta

from .errors import ParseError

HMS_WIDTH = 2
MILLIS_WIDTH = 3

# Captures the raw digit strings only; width handling lives in the padding helpers.
TIMESTAMP_PATTERN = r"(?P<{p}hours>[0-9]+):(?P<{p}minutes>[0-9]{{1,2}}):(?P<{p}seconds>[0-9]{{1,2}}),(?P<{p}millis>[0-9]{{0,3}})"
_TIMESTAMP_RE = re.compile(TIMESTAMP_PATTERN.format(p=""))

_ONE_MS = timedelta(milliseconds=1)


def pad_component(digits: str) -> int:
    """Left-pad an hour/minute/second field: ``"1"`` reads as ``"01"``."""
    if not digits.isdigit() or not digits.isascii():
        raise ParseError(f"expected digits in timestamp field, found {digits!r}")
    return int(digits.rjust(HMS_WIDTH, "0"))


def pad_fraction(digits: str) -> int:
    """Right-pad a millisecond fraction: ``"2"`` reads as ``"200"``, ``""`` as ``"000"``.

    A short fraction is a truncated decimal, not a small integer.
    """
    if len(digits) > MILLIS_WIDTH:
        raise ParseError(f"millisecond field longer than {MILLIS_WIDTH} digits: {digits!r}")
    if digits and (not digits.isdigit() or not digits.isascii()):
        raise ParseError(f"expected digits in millisecond field, found {digits!r}")
    return int(digits.ljust(MILLIS_WIDTH, "0"))


def from_fields(hours: str, minutes: str, seconds: str, millis: str) -> timedelta:
    return timedelta(
        hours=pad_component(hours),
        minutes=pad_component(minutes),
        seconds=pad_component(seconds),
        milliseconds=pad_fraction(millis),
    )


def decode_timestamp(text: str) -> timedelta:
    """Parse ``H:MM:SS,mmm`` (with tolerant widths) into a duration."""
    match = _TIMESTAMP_RE.fullmatch(text)
    if not match:
        raise ParseError(f"malformed timestamp {text!r}, expected HH:MM:SS,mmm")
    return from_fields(
        match.group("hours"),
        match.group("minutes"),
        match.group("seconds"),
        match.group("millis"),
    )


def to_millis(duration: timedelta) -> int:
    return duration // _ONE_MS


def encode_timestamp(duration: timedelta) -> str:
    """Format a duration as ``HH:MM:SS,mmm``; hours widen past 99 instead of wrapping."""
    total_ms = to_millis(duration)
    if total_ms < 0:
        raise ValueError(f"cannot encode negative duration {duration!r}")
    total_secs, millis = divmod(total_ms, 1000)
    hours, rem = divmod(total_secs, 3600)
    minutes, seconds = divmod(rem, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"
