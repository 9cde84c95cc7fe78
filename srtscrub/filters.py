"""
Ad and marquee removal.

Ads are found in two passes:

1. Pattern pass: a cue is an ad when any pattern matches any of its lines.
2. Marquee pass: scrolling banners are usually rendered as a run of cues
   that each show a slightly longer prefix of the final banner text. Walking
   the cues from last to first, an unmarked cue whose first line is a prefix
   of the most recently marked cue's first line (and at most
   ``MARQUEE_LENGTH_TOLERANCE`` characters shorter) is marked too, and then
   becomes the reference for the cues before it.

Synthetic cues (the loading leader) are never matched and never take part in
the marquee pass.
"""

from __future__ import annotations

from typing import List, Optional, Pattern, Sequence

from .logging_helper import log_debug, log_info, log_trace
from .models import Cue

MARQUEE_LENGTH_TOLERANCE = 2


def matches_any(cue: Cue, patterns: Sequence[Pattern[str]]) -> bool:
    for pattern in patterns:
        for line in cue.text:
            if pattern.search(line):
                log_info(f'Matched "{line}" against /{pattern.pattern}/')
                return True
    return False


def find_pattern_hits(cues: Sequence[Cue], patterns: Sequence[Pattern[str]]) -> List[bool]:
    """Return one flag per cue: True where a pattern matched."""
    return [not cue.synthetic and matches_any(cue, patterns) for cue in cues]


def is_marquee_fragment(fragment: Cue, banner: Cue) -> bool:
    """True if ``fragment`` looks like a truncated earlier frame of ``banner``.

    Only first lines are compared.
    """
    short = fragment.first_line
    full = banner.first_line
    return full.startswith(short) and len(full) - len(short) <= MARQUEE_LENGTH_TOLERANCE


def propagate_marquee(cues: Sequence[Cue], marks: Sequence[bool]) -> List[bool]:
    """Extend ``marks`` backwards over marquee fragments of marked cues."""
    result = list(marks)
    cursor: Optional[int] = None
    for idx in range(len(cues) - 1, -1, -1):
        cue = cues[idx]
        if cue.synthetic:
            continue
        if result[idx]:
            cursor = idx
            continue
        if cursor is not None and is_marquee_fragment(cue, cues[cursor]):
            log_trace(f'Marquee fragment "{cue.first_line}" of "{cues[cursor].first_line}"')
            result[idx] = True
            cursor = idx
    return result


def strip_ads(cues: Sequence[Cue], patterns: Sequence[Pattern[str]]) -> List[Cue]:
    """Drop ad cues and their marquee fragments, keeping the order of the rest."""
    hits = find_pattern_hits(cues, patterns)
    marks = propagate_marquee(cues, hits)
    kept = [cue for cue, is_ad in zip(cues, marks) if not is_ad]
    log_debug(
        f"Ad filter: {sum(hits)} pattern hit(s), "
        f"{sum(marks) - sum(hits)} marquee fragment(s), {len(kept)} cue(s) kept"
    )
    return kept
