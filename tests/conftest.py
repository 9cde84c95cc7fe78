"""
Pytest configuration and shared fixtures for the test suite.

This module provides:
- A cue factory working in milliseconds
- Sample SRT documents
- A log capture fixture for the non-propagating ``srtscrub`` logger
- A throwaway config directory for CLI tests
"""

import logging
from datetime import timedelta

import pytest

from srtscrub.logging_helper import LOGGER_NAME, TRACE_LEVEL
from srtscrub.models import Cue


@pytest.fixture
def make_cue():
    """Build a Cue from millisecond offsets and one or more text lines."""

    def _make(show_ms, hide_ms, *lines, synthetic=False):
        return Cue(
            show_at=timedelta(milliseconds=show_ms),
            hide_at=timedelta(milliseconds=hide_ms),
            text=list(lines),
            synthetic=synthetic,
        )

    return _make


@pytest.fixture
def sample_srt():
    """Three cues, out of order, with sloppy numbering and CRLF endings."""
    return (
        "\ufeff7\r\n"
        "00:00:05,000 --> 00:00:06,500\r\n"
        "Second line of dialogue\r\n"
        "\r\n"
        "3\r\n"
        "00:00:01,000 --> 00:00:02,000\r\n"
        "First line of dialogue\r\n"
        "with a second row\r\n"
        "\r\n"
        "\r\n"
        "1\r\n"
        "00:00:09,000 --> 00:00:10,000\r\n"
        "Third line of dialogue\r\n"
    )


@pytest.fixture
def marquee_srt():
    """A dialogue cue followed by a banner scrolling in over three cues."""
    return (
        "1\n"
        "00:00:02,000 --> 00:00:03,000\n"
        "Hello there.\n"
        "\n"
        "2\n"
        "00:00:10,000 --> 00:00:10,500\n"
        "Watch free at shopz\n"
        "\n"
        "3\n"
        "00:00:10,500 --> 00:00:11,000\n"
        "Watch free at shopz.c\n"
        "\n"
        "4\n"
        "00:00:11,000 --> 00:00:13,000\n"
        "Watch free at shopz.com\n"
        "\n"
        "5\n"
        "00:00:20,000 --> 00:00:22,000\n"
        "Goodbye.\n"
    )


@pytest.fixture
def srt_log(caplog):
    """Capture records from the ``srtscrub`` logger, which does not propagate to root."""
    logger = logging.getLogger(LOGGER_NAME)
    previous = logger.level
    logger.addHandler(caplog.handler)
    caplog.set_level(TRACE_LEVEL, logger=LOGGER_NAME)
    yield caplog
    logger.removeHandler(caplog.handler)
    logger.setLevel(previous)


@pytest.fixture
def config_dir(tmp_path):
    """Config directory with a default config and a pattern file."""
    (tmp_path / "config.default.yaml").write_text(
        "logging:\n"
        "  level: info\n"
        "patterns_file: drop-subs.txt\n"
        "leader:\n"
        "  enabled: true\n"
        "  text: \"Subtitles loaded.\"\n"
        "  max_seconds: 5\n"
        "output:\n"
        "  backup: false\n",
        encoding="utf-8",
    )
    (tmp_path / "drop-subs.txt").write_text(
        "# ad banners\n"
        "\n"
        "shopz\\.com\n",
        encoding="utf-8",
    )
    return tmp_path
