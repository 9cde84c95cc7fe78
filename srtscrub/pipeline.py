from __future__ import annotations

from datetime import timedelta
from typing import List, Pattern, Sequence

from .errors import EmptyDocumentError
from .filters import strip_ads
from .leader import DEFAULT_LEADER_MAX, DEFAULT_LEADER_TEXT, insert_leader
from .logging_helper import log_debug
from .models import Cue
from .parser import parse_document
from .serializer import renumber, serialize


def clean_cues(
    cues: Sequence[Cue],
    patterns: Sequence[Pattern[str]],
    *,
    leader: bool = True,
    leader_text: str = DEFAULT_LEADER_TEXT,
    leader_max: timedelta = DEFAULT_LEADER_MAX,
) -> List[Cue]:
    """Run leader -> ad filter -> renumber over already parsed cues."""
    if not cues:
        raise EmptyDocumentError("You appear to have supplied an empty file.")
    staged = insert_leader(cues, leader_text, leader_max) if leader else list(cues)
    kept = strip_ads(staged, patterns)
    # The leader alone is not a document.
    if not any(not cue.synthetic for cue in kept):
        raise EmptyDocumentError("Every cue was removed by the ad filter; refusing to write an empty file.")
    return renumber(kept)


def clean_document(
    text: str,
    patterns: Sequence[Pattern[str]],
    *,
    leader: bool = True,
    leader_text: str = DEFAULT_LEADER_TEXT,
    leader_max: timedelta = DEFAULT_LEADER_MAX,
) -> str:
    """Parse, clean and re-serialize a whole SRT document."""
    cues = parse_document(text)
    log_debug(f"Parsed {len(cues)} cue(s)")
    cleaned = clean_cues(cues, patterns, leader=leader, leader_text=leader_text, leader_max=leader_max)
    return serialize(cleaned)
