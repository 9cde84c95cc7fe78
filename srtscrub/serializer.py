"""SRT serialization: renumbering, formatting and writing of cues."""

from __future__ import annotations

import os
import shutil
import stat
import sys
import tempfile
from dataclasses import replace
from pathlib import Path
from typing import List, Sequence, Union

from .logging_helper import log_debug, log_info
from .models import Cue
from .timestamp import encode_timestamp

STDOUT = "-"


def renumber(cues: Sequence[Cue]) -> List[Cue]:
    """Return copies of ``cues`` numbered 1..N in their current order."""
    return [replace(cue, sequence_number=idx) for idx, cue in enumerate(cues, 1)]


def format_cue(cue: Cue) -> str:
    if cue.sequence_number is None:
        raise ValueError("cue has no sequence number; renumber before formatting")
    lines = [
        str(cue.sequence_number),
        f"{encode_timestamp(cue.show_at)} --> {encode_timestamp(cue.hide_at)}",
        *cue.text,
        "",
    ]
    return "\n".join(lines) + "\n"


def serialize(cues: Sequence[Cue]) -> str:
    return "".join(format_cue(cue) for cue in renumber(cues))


def _target_mode(path: Path) -> int:
    """Mode the written file should end up with: the existing file's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _atomic_write_text(path: Path, text: str) -> None:
    # Write next to the destination so os.replace stays on one filesystem.
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        # mkstemp creates the file 0600.
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def write_document(cues: Sequence[Cue], destination: Union[str, Path], backup: bool = False) -> None:
    """Serialize ``cues`` to ``destination`` (``"-"`` for stdout).

    Files are replaced atomically; with ``backup`` an existing file is first
    copied to ``<destination>.bak``.
    """
    text = serialize(cues)
    if str(destination) == STDOUT:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    path = Path(destination)
    if backup and path.exists():
        backup_path = path.with_name(path.name + ".bak")
        shutil.copy2(path, backup_path)
        log_info(f"Backed up {path} to {backup_path}")
    _atomic_write_text(path, text)
    log_debug(f"Wrote {len(cues)} cue(s) to {path}")
