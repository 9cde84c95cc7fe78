"""Loading of the ad-filter pattern list (one regular expression per line)."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Pattern, Union

from .errors import PatternCompileError
from .logging_helper import log_debug, log_trace_block, log_warn


def read_pattern_lines(text: str) -> List[str]:
    """Return the usable pattern lines of a pattern file.

    Leading whitespace is trimmed; blank lines and ``#`` comments are skipped.
    Trailing whitespace is kept since it can be part of a pattern.
    """
    out: List[str] = []
    for raw in text.split("\n"):
        line = raw.rstrip("\r").lstrip()
        if not line or line.startswith("#"):
            continue
        out.append(line)
    return out


def compile_patterns(lines: Iterable[str]) -> List[Pattern[str]]:
    """Compile every pattern, failing on the first invalid one."""
    compiled: List[Pattern[str]] = []
    for line in lines:
        try:
            compiled.append(re.compile(line))
        except re.error as e:
            raise PatternCompileError(line, str(e)) from e
    return compiled


def load_patterns(path: Union[str, Path]) -> List[Pattern[str]]:
    text = Path(path).read_text(encoding="utf-8")
    lines = read_pattern_lines(text)
    log_debug(f"Loaded {len(lines)} pattern(s) from {path}")
    if not lines:
        log_warn(f"No patterns in {path}; no cue will be filtered")
    log_trace_block("Patterns", "\n".join(lines))
    return compile_patterns(lines)
