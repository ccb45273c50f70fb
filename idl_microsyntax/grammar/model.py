"""Segment and Chain models and friendly parse/compose wrappers.

This module holds the hand-written Pydantic models that give the plain
dictionaries of :mod:`idl_microsyntax.grammar.support` their invariants.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from idl_microsyntax.grammar.support import (
    WORD_PATTERN,
    compose_idl as _compose_from_parts,
    parse_segments as _parse_to_dicts,
)
from idl_microsyntax.grammar.types import SegmentKind

Identifier = Annotated[
    str,
    Field(
        description="ASCII word-character name extracted from a token.",
        examples=["Foo", "bar", "baz", "state"],
    ),
]


class Segment(BaseModel):
    """One classified dot-delimited token of a micro-syntax string."""

    model_config = ConfigDict(extra="forbid")

    kind: SegmentKind
    identifier: Identifier
    args: list[str] = Field(default_factory=list)
    enum_value: str | None = None
    resolved_type: str | None = None
    parent: int | None = Field(
        default=None,
        ge=0,
        description="Index of the segment to the left in the owning chain.",
    )

    @field_validator("identifier")
    @classmethod
    def _validate_identifier(cls, value: str) -> str:
        if not WORD_PATTERN.fullmatch(value):
            msg = f"identifier must consist of ASCII word characters, got {value!r}"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _check_kind_payload(self) -> Segment:
        if self.args and self.kind is not SegmentKind.METHOD:
            msg = f"Only method segments carry arguments (kind={self.kind})"
            raise ValueError(msg)
        if (self.kind is SegmentKind.ENUM_VALUE) != (self.enum_value is not None):
            msg = "enum_value is required for, and only for, enum-value segments"
            raise ValueError(msg)
        return self

    def assign_type(self, value: str | None) -> None:
        """Record the type found by a resolver.

        The type may be set once. Repeating the same value is allowed so a
        chain can be rendered twice against the same document.
        """
        if self.resolved_type is not None and self.resolved_type != value:
            msg = (
                f"Segment '{self.identifier}' already resolved to "
                f"'{self.resolved_type}', refusing '{value}'"
            )
            raise ValueError(msg)
        self.resolved_type = value


class Chain(BaseModel):
    """Ordered, parent-linked segments parsed from one micro-syntax string."""

    model_config = ConfigDict(extra="forbid")

    source: str = ""
    segments: list[Segment] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_leftmost(self) -> Chain:
        first = self.segments[0]
        if first.kind not in (SegmentKind.BASE, SegmentKind.ENUM_VALUE):
            msg = f"Chain must start with a base or enum-value segment, not {first.kind}"
            raise ValueError(msg)
        bases = [i for i, s in enumerate(self.segments) if s.kind is SegmentKind.BASE]
        if bases and bases != [0]:
            msg = "A base segment may only appear once, as the leftmost segment"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def _check_links(self) -> Chain:
        for index, segment in enumerate(self.segments):
            expected = index - 1 if index else None
            if segment.parent != expected:
                msg = (
                    f"Segment {index} ('{segment.identifier}') must link to "
                    f"{expected}, found {segment.parent}"
                )
                raise ValueError(msg)
        return self

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:  # type: ignore[override]
        """Iterate over segments left to right.

        This replaces pydantic's `(field, value)` iteration, so `dict(chain)`
        does not work; use `model_dump()` for field data.
        """
        return iter(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    @property
    def base(self) -> Segment | None:
        first = self.segments[0]
        return first if first.kind is SegmentKind.BASE else None

    def parent_of(self, segment: Segment | int) -> Segment | None:
        """Return the segment to the left of ``segment`` (by object or index)."""
        if isinstance(segment, int):
            segment = self.segments[segment]
        if segment.parent is None:
            return None
        return self.segments[segment.parent]

    def ancestors(self, index: int) -> list[Segment]:
        """Segments reached by following parent links from ``index``, nearest first."""
        found: list[Segment] = []
        parent = self.parent_of(index)
        while parent is not None:
            found.append(parent)
            parent = self.parent_of(parent)
        return found

    def compose(self) -> str:
        return _compose_from_parts([s.model_dump() for s in self.segments])


def parse_idl(text: str) -> Chain:
    """Parse a micro-syntax string into a validated :class:`Chain`."""
    return Chain.model_validate({"source": text, "segments": _parse_to_dicts(text)})


def compose_idl(chain: Chain) -> str:
    return chain.compose()


__all__ = [
    "Chain",
    "Segment",
    "compose_idl",
    "parse_idl",
]
