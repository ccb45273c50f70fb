"""Parse IDL micro-syntax references and render them as cross-linked HTML.

Example::

    from idl_microsyntax import DocumentIndex, idl_string_to_html

    idl_string_to_html("Foo.bar.baz(arg1, arg2)", DocumentIndex())
"""

import importlib.metadata

from .grammar import (
    Chain,
    MicroSyntaxError,
    Segment,
    SegmentKind,
    compose_idl,
    parse_idl,
)
from .rendering import (
    RenderConfig,
    UnknownSegmentError,
    idl_string_to_html,
    render_html,
)
from .resolver import DocumentIndex, Resolver

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# During in-tree test collection the distribution metadata may not be built;
# fall back to a neutral placeholder.
try:  # pragma: no cover - trivial guard
    __version__ = importlib.metadata.version("idl-microsyntax")
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"

__all__ = [
    "Chain",
    "DocumentIndex",
    "MicroSyntaxError",
    "RenderConfig",
    "Resolver",
    "Segment",
    "SegmentKind",
    "UnknownSegmentError",
    "__version__",
    "compose_idl",
    "idl_string_to_html",
    "parse_idl",
    "render_html",
]
