import pytest

from idl_microsyntax.resolver import DocumentIndex, Resolver


def test_document_index_satisfies_protocol(document_index):
    assert isinstance(document_index, Resolver)


def test_declared_type_first_match_with_trimmed_text(document_index):
    assert document_index.lookup_declared_type("[[state]]") == "PaymentState"
    assert document_index.lookup_declared_type("[[missing]]") is None


@pytest.mark.parametrize(
    "identifier, context, expected",
    [
        ("request", "sec-request", "PaymentRequest"),
        ("options", "sec-request", "PaymentOptions"),
        ("request", "sec-nested", "NestedRequest"),
        ("details", "sec-nested", None),
        ("request", "sec-other", "OtherRequest"),
        ("global", "sec-request", None),
        ("global", "no-such-section", "GlobalScope"),
        ("request", "no-such-section", "PaymentRequest"),
        ("Request", "sec-request", None),
        ("request", None, None),
    ],
)
def test_variable_lookup_scopes(document_index, identifier, context, expected):
    assert document_index.lookup_variable_type(identifier, context) == expected


def test_find_section_walks_nested_sections(document_index):
    assert document_index.find_section("sec-nested").id == "sec-nested"
    assert document_index.find_section("absent") is None


def test_empty_index_resolves_nothing():
    index = DocumentIndex()
    assert index.lookup_declared_type("Foo") is None
    assert index.lookup_variable_type("Foo", "body") is None
