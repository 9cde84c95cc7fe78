from __future__ import annotations

from datetime import timedelta
from typing import List, Sequence

from .logging_helper import log_debug
from .models import Cue

DEFAULT_LEADER_TEXT = "Subtitles loaded."
DEFAULT_LEADER_MAX = timedelta(seconds=5)


def insert_leader(
    cues: Sequence[Cue],
    text: str = DEFAULT_LEADER_TEXT,
    max_duration: timedelta = DEFAULT_LEADER_MAX,
) -> List[Cue]:
    """Prepend a short acknowledgement cue in the gap before the first cue.

    Nothing is added when there are no cues or the first one starts at zero.
    """
    out = list(cues)
    if not out or out[0].show_at <= timedelta(0):
        return out
    hide_at = min(out[0].show_at, max_duration)
    # A blank line would end the cue early when the output is read back.
    lines = [line for line in text.splitlines() if line.strip()] or [DEFAULT_LEADER_TEXT]
    log_debug(f"Inserting leader cue until {hide_at}")
    out.insert(0, Cue(show_at=timedelta(0), hide_at=hide_at, text=lines, synthetic=True))
    return out
