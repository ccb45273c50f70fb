"""Closed vocabulary of segment kinds produced by the IDL micro-syntax parser."""

from __future__ import annotations

from enum import StrEnum


class SegmentKind(StrEnum):
    BASE = "base"
    ATTRIBUTE = "attribute"
    METHOD = "method"
    INTERNAL_SLOT = "internal-slot"
    ENUM_VALUE = "enum-value"


__all__ = ["SegmentKind"]
