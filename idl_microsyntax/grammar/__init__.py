"""Segment grammar and chain parser for the IDL micro-syntax.

This package hosts the token patterns (support), the segment kinds (types)
and the validated Segment/Chain models (model).
"""

from __future__ import annotations

from .model import Chain, Segment, compose_idl, parse_idl
from .support import MicroSyntaxError, parse_segments, split_tokens
from .types import SegmentKind

# Friendly alias
parse = parse_idl

__all__ = [
    "Chain",
    "MicroSyntaxError",
    "Segment",
    "SegmentKind",
    "compose_idl",
    "parse",
    "parse_idl",
    "parse_segments",
    "split_tokens",
]
