"""Typed containers for subtitle cues."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional


@dataclass(slots=True)
class Cue:
    """One timed block of subtitle text.

    ``sequence_number`` is only meaningful on output; the parser leaves it
    unset because input numbering is not trusted.
    """

    show_at: timedelta
    hide_at: timedelta
    text: List[str] = field(default_factory=list)
    sequence_number: Optional[int] = None
    synthetic: bool = False

    @property
    def first_line(self) -> str:
        return self.text[0] if self.text else ""
