"""HTML rendering for parsed IDL micro-syntax chains.

Each segment becomes a cross-reference fragment. The base segment's type
(found via the resolver, or assumed to be its own identifier) becomes the
``data-link-for`` scope of the attribute or method to its right.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict

from ..grammar import Chain, Segment, SegmentKind, parse_idl
from ..resolver import Resolver

logger = logging.getLogger(__name__)

__all__ = [
    "RenderConfig",
    "UnknownSegmentError",
    "idl_string_to_html",
    "render_html",
]


class UnknownSegmentError(RuntimeError):
    """Raised when a segment kind has no renderer (parser/renderer mismatch)."""


class RenderConfig(BaseModel):
    """Markup constants used for cross-reference links."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    link_class: str = "respec-idl-xref"
    base_xref_type: str = "_IDL_"


def _attrs(*pairs: tuple[str, str | None]) -> Markup:
    """Render ``name="value"`` pairs, omitting absent values."""
    return Markup("").join(
        Markup(' {}="{}"').format(Markup(name), value)
        for name, value in pairs
        if value is not None
    )


def _xref(
    segment: Segment, config: RenderConfig, *extra: tuple[str, str | None]
) -> Markup:
    return _attrs(
        ("class", config.link_class),
        ("data-xref-type", str(segment.kind)),
        *extra,
    )


def _render_base(segment, chain, resolver, context, config) -> Markup:
    # A base may be a variable local to the enclosing section.
    var_type = resolver.lookup_variable_type(segment.identifier, context)
    if var_type:
        segment.assign_type(var_type)
        return Markup("<var{}>{}</var>").format(
            _attrs(("data-type", var_type)), segment.identifier
        )
    segment.assign_type(segment.identifier)
    return Markup("<a{}>{}</a>").format(
        _attrs(("data-xref-type", config.base_xref_type)), segment.identifier
    )


def _render_internal_slot(segment, chain, resolver, context, config) -> Markup:
    lt = f"[[{segment.identifier}]]"
    slot_type = resolver.lookup_declared_type(lt)
    if slot_type:
        segment.assign_type(slot_type)
    return Markup(".[[<code><a{}>{}</a></code>]]").format(
        _xref(segment, config, ("data-type", slot_type), ("data-lt", lt)),
        segment.identifier,
    )


def _render_attribute(segment, chain, resolver, context, config) -> Markup:
    link_for = chain.parent_of(segment).resolved_type
    return Markup(".<a{}>{}</a>").format(
        _xref(segment, config, ("data-link-for", link_for)), segment.identifier
    )


def _render_method(segment, chain, resolver, context, config) -> Markup:
    link_for = chain.parent_of(segment).resolved_type
    args = Markup(", ").join(
        Markup("<var{}>{}</var>").format(
            _attrs(("data-type", resolver.lookup_variable_type(arg, context))), arg
        )
        for arg in segment.args
    )
    return Markup(".<a{}>{}</a>({})").format(
        _xref(segment, config, ("data-link-for", link_for)), segment.identifier, args
    )


def _render_enum_value(segment, chain, resolver, context, config) -> Markup:
    return Markup('"<a{}>{}</a>"').format(
        _xref(segment, config, ("data-link-for", segment.identifier)),
        segment.enum_value,
    )


SegmentRenderer = Callable[
    [Segment, Chain, Resolver, str | None, RenderConfig], Markup
]

_RENDERERS: dict[SegmentKind, SegmentRenderer] = {
    SegmentKind.BASE: _render_base,
    SegmentKind.ATTRIBUTE: _render_attribute,
    SegmentKind.INTERNAL_SLOT: _render_internal_slot,
    SegmentKind.METHOD: _render_method,
    SegmentKind.ENUM_VALUE: _render_enum_value,
}


def render_html(
    chain: Chain,
    resolver: Resolver,
    context: str | None = None,
    config: RenderConfig | None = None,
) -> Markup:
    """Return an HTML fragment for ``chain`` in left-to-right order.

    Parameters
    ----------
    chain : Chain
        Parsed micro-syntax; segment ``resolved_type`` fields are filled in.
    resolver : Resolver
        Source of declared and variable types.
    context : str | None
        Anchor used to scope variable lookups (a section id for
        :class:`~idl_microsyntax.resolver.DocumentIndex`).
    config : RenderConfig | None
        Markup constants (default :class:`RenderConfig`).
    """
    config = config or RenderConfig()
    output: list[Markup] = []
    for index, segment in enumerate(chain):
        renderer = _RENDERERS.get(segment.kind)
        if renderer is None:
            raise UnknownSegmentError(
                f"Unknown segment kind {segment.kind!r} at index {index} "
                f"of {chain.source!r}"
            )
        logger.debug("Rendering %s '%s'", segment.kind, segment.identifier)
        output.append(renderer(segment, chain, resolver, context, config))
    return Markup("").join(output)


def idl_string_to_html(
    text: str,
    resolver: Resolver,
    context: str | None = None,
    config: RenderConfig | None = None,
) -> Markup:
    """Parse ``text`` and render it; raises MicroSyntaxError on bad input."""
    return render_html(parse_idl(text), resolver, context, config)
