"""SRT ad stripping: tolerant parsing, ad/marquee filtering and re-serialization.

Exposes the pipeline stages and error types for external imports.
"""

from .errors import (
    EmptyDocumentError,
    ParseError,
    PatternCompileError,
    SubtitleError,
)
from .filters import strip_ads
from .leader import insert_leader
from .models import Cue
from .parser import parse_document
from .patterns import compile_patterns, load_patterns
from .pipeline import clean_cues, clean_document
from .serializer import serialize, write_document
from .timestamp import decode_timestamp, encode_timestamp

__all__ = [
    "Cue",
    "SubtitleError",
    "ParseError",
    "PatternCompileError",
    "EmptyDocumentError",
    "decode_timestamp",
    "encode_timestamp",
    "parse_document",
    "compile_patterns",
    "load_patterns",
    "strip_ads",
    "insert_leader",
    "serialize",
    "write_document",
    "clean_cues",
    "clean_document",
]
