"""Micro-syntax rendering example.

Demonstrates:
  * Parsing references into chains and inspecting their segments
  * Rendering against an in-memory DocumentIndex with nested sections
  * Fallback links when an identifier is not a known variable
  * Handling a malformed reference (MicroSyntaxError)

Run:
    python examples/render_references.py

"""

from __future__ import annotations

from idl_microsyntax import (
    DocumentIndex,
    MicroSyntaxError,
    idl_string_to_html,
    parse_idl,
)


def make_index() -> DocumentIndex:
    return DocumentIndex.model_validate(
        {
            "definitions": [{"text": "[[state]]", "type": "PaymentState"}],
            "sections": [
                {
                    "id": "sec-show",
                    "variables": [
                        {"text": "request", "type": "PaymentRequest"},
                        {"text": "details", "type": "PaymentDetails"},
                    ],
                }
            ],
        }
    )


def demo():
    index = make_index()

    # Parsing -------------------------------------------------------------
    chain = parse_idl("request.[[state]].show(details)")
    for position, segment in enumerate(chain, start=1):
        print(position, segment.kind, segment.identifier, segment.args)

    # Rendering -----------------------------------------------------------
    print("\n-- Rendered --")
    for text in (
        "request.[[state]]",
        "request.show(details, options)",
        "PaymentRequest.id",
        'PaymentMode["credit card"]',
    ):
        print(text, "->", idl_string_to_html(text, index, "sec-show"))

    # Errors --------------------------------------------------------------
    print("\n-- Errors --")
    try:
        parse_idl("request..show()")
    except MicroSyntaxError as e:
        print("Syntax error caught:", e, f"(token={e.token!r}, position={e.position})")


if __name__ == "__main__":  # pragma: no cover
    demo()
