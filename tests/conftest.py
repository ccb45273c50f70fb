"""Shared pytest fixtures for IDL micro-syntax tests."""

import pytest

from idl_microsyntax.resolver import DocumentIndex

INDEX_DATA = {
    "definitions": [
        {"text": " [[state]] ", "type": "PaymentState"},
        {"text": "[[state]]", "type": "ShadowedState"},
        {"text": "[[items]]", "type": "sequence<Item>"},
    ],
    "variables": [
        {"text": "global", "type": "GlobalScope"},
    ],
    "sections": [
        {
            "id": "sec-request",
            "variables": [
                {"text": "request", "type": "PaymentRequest"},
                {"text": "details", "type": "PaymentDetails"},
            ],
            "sections": [
                {
                    "id": "sec-nested",
                    "variables": [
                        {"text": "options", "type": "PaymentOptions"},
                        {"text": "request", "type": "NestedRequest"},
                    ],
                }
            ],
        },
        {
            "id": "sec-other",
            "variables": [{"text": "request", "type": "OtherRequest"}],
        },
    ],
}


@pytest.fixture
def index_data():
    return INDEX_DATA


@pytest.fixture
def document_index():
    """A DocumentIndex with nested sections and a few definitions."""
    return DocumentIndex.model_validate(INDEX_DATA)


@pytest.fixture
def empty_index():
    return DocumentIndex()
