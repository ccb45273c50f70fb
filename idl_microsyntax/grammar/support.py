"""Static helpers for IDL micro-syntax parsing and composition.

The parser splits a reference such as ``Foo.bar.baz(arg1, arg2)`` on ``.``
and classifies every token with a small ordered table of matchers. Tokens
are consumed from the right so that the attribute/base ambiguity of a bare
word is settled by whether any tokens remain to its left.

These functions return plain dictionaries; the Pydantic models in
:mod:`idl_microsyntax.grammar.model` wrap them with invariant checks.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from idl_microsyntax.grammar.types import SegmentKind

logger = logging.getLogger(__name__)

# Identifiers are ASCII word characters only.
METHOD_PATTERN = re.compile(r"(\w+)\((.*)\)\Z", re.ASCII)
INTERNAL_SLOT_PATTERN = re.compile(r"\[\[(\w+)\]\]", re.ASCII)
ENUM_VALUE_PATTERN = re.compile(r'(\w+)\["([\w ]+)"\]', re.ASCII)
WORD_PATTERN = re.compile(r"\w+", re.ASCII)
ARG_SEPARATOR = re.compile(r",\s*")

TOKEN_SEPARATOR = "."


class MicroSyntaxError(ValueError):
    """Raised when a token of a micro-syntax string matches no segment pattern.

    Attributes:
        token: Literal text of the offending token (may be empty).
        position: 1-based index of the token counted from the left.
        source: The complete string being parsed.
    """

    def __init__(self, token: str, position: int, source: str = ""):
        self.token = token
        self.position = position
        self.source = source
        super().__init__(
            f'IDL micro-syntax parsing error: "{token}" at token {position}.'
        )


Matcher = Callable[[str, int], dict[str, Any] | None]


def split_tokens(text: str) -> list[str]:
    """Split ``text`` on every literal dot.

    Dots inside argument lists or enum quotes are not protected, so
    ``Foo.bar(a.b)`` yields three tokens.
    """
    return text.split(TOKEN_SEPARATOR)


def split_args(arglist: str) -> list[str]:
    """Split a method argument list on commas, dropping empty entries."""
    return [arg for arg in ARG_SEPARATOR.split(arglist) if arg]


# Matchers ------------------------------------------------------------------
# Each matcher receives the token and the number of tokens still to its left.


def _match_method(token: str, remaining: int) -> dict[str, Any] | None:
    # A call needs an object on its left.
    if not remaining:
        return None
    match = METHOD_PATTERN.search(token)
    if match is None:
        return None
    identifier, arglist = match.groups()
    return {
        "kind": SegmentKind.METHOD,
        "identifier": identifier,
        "args": split_args(arglist),
    }


def _match_internal_slot(token: str, remaining: int) -> dict[str, Any] | None:
    if not remaining:
        return None
    match = INTERNAL_SLOT_PATTERN.fullmatch(token)
    if match is None:
        return None
    return {"kind": SegmentKind.INTERNAL_SLOT, "identifier": match.group(1)}


def _match_enum_value(token: str, remaining: int) -> dict[str, Any] | None:
    match = ENUM_VALUE_PATTERN.fullmatch(token)
    if match is None:
        return None
    identifier, enum_value = match.groups()
    return {
        "kind": SegmentKind.ENUM_VALUE,
        "identifier": identifier,
        "enum_value": enum_value,
    }


def _match_attribute(token: str, remaining: int) -> dict[str, Any] | None:
    if not remaining or not WORD_PATTERN.fullmatch(token):
        return None
    return {"kind": SegmentKind.ATTRIBUTE, "identifier": token}


def _match_base(token: str, remaining: int) -> dict[str, Any] | None:
    if remaining or not WORD_PATTERN.fullmatch(token):
        return None
    return {"kind": SegmentKind.BASE, "identifier": token}


# Priority order; first match wins.
MATCHERS: tuple[tuple[SegmentKind, Matcher], ...] = (
    (SegmentKind.METHOD, _match_method),
    (SegmentKind.INTERNAL_SLOT, _match_internal_slot),
    (SegmentKind.ENUM_VALUE, _match_enum_value),
    (SegmentKind.ATTRIBUTE, _match_attribute),
    (SegmentKind.BASE, _match_base),
)


def classify_token(token: str, remaining: int) -> dict[str, Any] | None:
    """Return the segment parts for ``token`` or ``None`` if nothing matches."""
    for kind, matcher in MATCHERS:
        parts = matcher(token, remaining)
        if parts is not None:
            logger.debug(
                "Token %r (%d to its left) matched %s", token, remaining, kind
            )
            parts.setdefault("args", [])
            parts.setdefault("enum_value", None)
            return parts
    return None


def parse_segments(text: str) -> list[dict[str, Any]]:
    """Parse a micro-syntax string into a list of segment dictionaries.

    The result is in left-to-right order. Each entry carries ``kind``,
    ``identifier``, ``args``, ``enum_value`` and ``parent``, the index of
    the segment immediately to its left (``None`` for the leftmost).

    Raises:
        MicroSyntaxError: If any token matches none of the patterns.
    """
    tokens = split_tokens(text)
    remaining = len(tokens)
    found: list[dict[str, Any]] = []

    while tokens:
        token = tokens.pop()
        remaining -= 1
        parts = classify_token(token, remaining)
        if parts is None:
            raise MicroSyntaxError(token, remaining + 1, text)
        found.append(parts)

    # Each segment's parent is the one processed after it.
    found.reverse()
    for index, parts in enumerate(found):
        parts["parent"] = index - 1 if index else None

    logger.debug("Parsed %r into %d segments", text, len(found))
    return found


def compose_segment(parts: Mapping[str, Any]) -> str:
    """Return the micro-syntax text for a single segment."""
    kind = SegmentKind(parts["kind"])
    identifier = parts["identifier"]
    if kind is SegmentKind.METHOD:
        return f"{identifier}({', '.join(parts.get('args') or ())})"
    if kind is SegmentKind.INTERNAL_SLOT:
        return f"[[{identifier}]]"
    if kind is SegmentKind.ENUM_VALUE:
        return f'{identifier}["{parts["enum_value"]}"]'
    return identifier


def compose_idl(segments: Sequence[Mapping[str, Any]]) -> str:
    """Compose micro-syntax text from segment parts in left-to-right order."""
    return TOKEN_SEPARATOR.join(compose_segment(parts) for parts in segments)


__all__ = [
    "ARG_SEPARATOR",
    "ENUM_VALUE_PATTERN",
    "INTERNAL_SLOT_PATTERN",
    "MATCHERS",
    "METHOD_PATTERN",
    "MicroSyntaxError",
    "WORD_PATTERN",
    "classify_token",
    "compose_idl",
    "compose_segment",
    "parse_segments",
    "split_args",
    "split_tokens",
]
