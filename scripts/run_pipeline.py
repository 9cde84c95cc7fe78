#!/usr/bin/env python3
import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

import yaml

from srtscrub.errors import EmptyDocumentError, ParseError, PatternCompileError
from srtscrub.logging_helper import (
    log_debug,
    log_error,
    log_info,
    route_all_to_stderr,
    set_log_level,
)
from srtscrub.parser import parse_document
from srtscrub.patterns import load_patterns
from srtscrub.pipeline import clean_cues
from srtscrub.serializer import STDOUT, write_document

from scripts.config_loader import load_effective_config, resolve_settings


def load_text(path: str) -> str:
    """Read the whole input document; ``-`` reads stdin."""
    if path == "-":
        raw = getattr(sys.stdin, "buffer", None)
        if raw is not None:
            return raw.read().decode("utf-8")
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description=(
            "Strip advertising cues (and the scrolling fragments leading up to them) from an SRT "
            "subtitle file, renumber what is left and write it back out. "
            "Defaults come from config.default.yaml, overridden by config.yaml and then by flags."
        )
    )
    ap.add_argument("input", help="Path to the .srt file, or - for stdin")
    ap.add_argument("output", help="Path to write the cleaned .srt, or - for stdout")
    ap.add_argument("--patterns", default=None, help="Pattern file (one regex per line); overrides patterns_file")
    ap.add_argument("--no-leader", dest="leader", action="store_false", default=None, help="Do not insert the 'Subtitles loaded.' cue")
    ap.add_argument("--leader-text", default=None, help="Text of the leader cue")
    ap.add_argument("--backup", action="store_true", default=None, help="Copy an existing output file to <output>.bak first")
    ap.add_argument("--config-dir", default=None, help="Directory holding config.default.yaml / config.yaml")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging")
    ap.add_argument("--trace", action="store_true", help="Enable trace logging: pattern list and every marquee decision")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Keep stdout clean for the document itself.
    if args.output == STDOUT:
        route_all_to_stderr()

    base = Path(args.config_dir) if args.config_dir else Path(__file__).parent.parent
    try:
        cfg, has_local = load_effective_config(base)
        settings = resolve_settings(cfg, base)
    except (OSError, ValueError, yaml.YAMLError) as e:
        log_error(f"Failed to load config from {base}: {e}")
        return 1

    level = settings.log_level
    if args.debug:
        level = "debug"
    if args.trace:
        level = "trace"
    set_log_level(level)
    debug = level in ("debug", "trace")

    if args.patterns:
        settings.patterns_file = Path(args.patterns)
    if args.leader is not None:
        settings.leader_enabled = args.leader
    if args.leader_text:
        settings.leader_text = args.leader_text
    if args.backup is not None:
        settings.backup = args.backup
    log_debug(
        f"Settings -> config_dir={base} (local={has_local}), patterns={settings.patterns_file}, "
        f"leader={settings.leader_enabled}, backup={settings.backup}"
    )

    # Patterns first: a bad pattern aborts before any cue is touched.
    try:
        patterns = load_patterns(settings.patterns_file)
    except PatternCompileError as e:
        log_error(f"Invalid pattern in {settings.patterns_file}: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        log_error(f"Failed to read pattern file {settings.patterns_file}: {e}")
        return 1

    source = "<stdin>" if args.input == "-" else args.input
    try:
        text = load_text(args.input)
    except (OSError, UnicodeDecodeError) as e:
        log_error(f"Failed to read input {source}: {e}")
        return 1

    try:
        cues = parse_document(text)
        log_debug(f"Parsed {len(cues)} cue(s) from {source}")
        cleaned = clean_cues(
            cues,
            patterns,
            leader=settings.leader_enabled,
            leader_text=settings.leader_text,
            leader_max=settings.leader_max,
        )
    except ParseError as e:
        log_error(f"Failed to parse file {source}:\n{e}")
        if debug:
            traceback.print_exc()
        return 1
    except EmptyDocumentError as e:
        log_error(str(e))
        return 1

    try:
        write_document(cleaned, args.output, backup=settings.backup)
    except OSError as e:
        log_error(f"Failed to write output {args.output}: {e}")
        if debug:
            traceback.print_exc()
        return 1

    log_info(f"Finished: wrote {len(cleaned)} cue(s), {len(cues)} parsed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
