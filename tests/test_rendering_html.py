import pytest
from markupsafe import Markup

from idl_microsyntax.grammar import Chain, MicroSyntaxError, Segment, parse_idl
from idl_microsyntax.rendering import (
    RenderConfig,
    UnknownSegmentError,
    idl_string_to_html,
    render_html,
)

XREF = 'class="respec-idl-xref"'


def test_untyped_base_falls_back_to_idl_link(empty_index):
    chain = parse_idl("Foo")
    html = render_html(chain, empty_index)
    assert isinstance(html, Markup)
    assert html == '<a data-xref-type="_IDL_">Foo</a>'
    assert chain[0].resolved_type == "Foo"


def test_base_variable_in_section(document_index):
    chain = parse_idl("request")
    html = render_html(chain, document_index, "sec-request")
    assert html == '<var data-type="PaymentRequest">request</var>'
    assert chain[0].resolved_type == "PaymentRequest"


def test_base_without_context_is_not_a_variable(document_index):
    html = idl_string_to_html("request", document_index)
    assert html == '<a data-xref-type="_IDL_">request</a>'


def test_attribute_links_for_base_type(empty_index):
    html = idl_string_to_html("Foo.bar", empty_index)
    assert html == (
        '<a data-xref-type="_IDL_">Foo</a>'
        f'.<a {XREF} data-xref-type="attribute" data-link-for="Foo">bar</a>'
    )


def test_method_with_typed_and_untyped_arguments(document_index):
    html = idl_string_to_html(
        "request.show(details, unknown)", document_index, "sec-request"
    )
    assert html == (
        '<var data-type="PaymentRequest">request</var>'
        f'.<a {XREF} data-xref-type="method" data-link-for="PaymentRequest">show</a>'
        '(<var data-type="PaymentDetails">details</var>, <var>unknown</var>)'
    )


def test_zero_argument_method_after_attribute(empty_index):
    # Attributes are never typed, so the method has no link-for scope.
    html = idl_string_to_html("Foo.bar.baz()", empty_index)
    assert html.endswith(f'.<a {XREF} data-xref-type="method">baz</a>()')


def test_internal_slot_uses_declared_type(document_index):
    chain = parse_idl("request.[[state]]")
    html = render_html(chain, document_index, "sec-request")
    assert html == (
        '<var data-type="PaymentRequest">request</var>'
        f'.[[<code><a {XREF} data-xref-type="internal-slot" '
        'data-type="PaymentState" data-lt="[[state]]">state</a></code>]]'
    )
    assert chain[1].resolved_type == "PaymentState"


def test_internal_slot_without_declaration(empty_index):
    chain = parse_idl("Foo.[[hidden]]")
    html = render_html(chain, empty_index)
    assert 'data-lt="[[hidden]]"' in html
    assert "data-type" not in html
    assert chain[1].resolved_type is None


def test_attribute_after_slot_links_for_slot_type(document_index):
    html = idl_string_to_html("Foo.[[state]].status", document_index)
    assert html.endswith(
        f'.<a {XREF} data-xref-type="attribute" data-link-for="PaymentState">status</a>'
    )


def test_enum_value_links_for_its_own_identifier(empty_index):
    html = idl_string_to_html('PaymentMode["credit card"]', empty_index)
    assert html == (
        f'"<a {XREF} data-xref-type="enum-value" data-link-for="PaymentMode">'
        'credit card</a>"'
    )


def test_enum_value_after_base(empty_index):
    html = idl_string_to_html('Foo.mode["card"]', empty_index)
    assert html == (
        '<a data-xref-type="_IDL_">Foo</a>'
        f'"<a {XREF} data-xref-type="enum-value" data-link-for="mode">card</a>"'
    )


def test_types_are_escaped(document_index):
    html = idl_string_to_html("Foo.[[items]]", document_index)
    assert 'data-type="sequence&lt;Item&gt;"' in html


def test_render_config_overrides_constants(empty_index):
    config = RenderConfig(link_class="xref", base_xref_type="interface")
    html = idl_string_to_html("Foo.bar", empty_index, config=config)
    assert html == (
        '<a data-xref-type="interface">Foo</a>'
        '.<a class="xref" data-xref-type="attribute" data-link-for="Foo">bar</a>'
    )


def test_rendering_is_deterministic(document_index):
    text = "request.[[state]].show(details, options)"
    first = idl_string_to_html(text, document_index, "sec-nested")
    second = idl_string_to_html(text, document_index, "sec-nested")
    assert first == second

    chain = parse_idl(text)
    assert render_html(chain, document_index, "sec-nested") == render_html(
        chain, document_index, "sec-nested"
    )


def test_unknown_segment_kind_fails_loudly(empty_index):
    base = Segment.model_construct(
        kind="base", identifier="Foo", args=[], enum_value=None,
        resolved_type=None, parent=None,
    )
    bogus = Segment.model_construct(
        kind="bogus", identifier="bar", args=[], enum_value=None,
        resolved_type=None, parent=0,
    )
    chain = Chain.model_construct(source="Foo.bar", segments=[base, bogus])
    with pytest.raises(UnknownSegmentError, match="bogus"):
        render_html(chain, empty_index)


def test_unknown_segment_error_is_not_a_syntax_error():
    assert not issubclass(UnknownSegmentError, ValueError)


def test_attribute_after_leftmost_enum_value_has_no_link_scope(empty_index):
    chain = parse_idl('Mode["card"].label')
    html = render_html(chain, empty_index)
    assert html == (
        f'"<a {XREF} data-xref-type="enum-value" data-link-for="Mode">card</a>"'
        f'.<a {XREF} data-xref-type="attribute">label</a>'
    )
    assert chain[0].resolved_type is None


def test_rerendering_a_chain_in_another_scope_is_a_programming_error(
    document_index,
):
    chain = parse_idl("request.status")
    render_html(chain, document_index, "sec-request")
    with pytest.raises(ValueError, match="already resolved") as excinfo:
        render_html(chain, document_index, "sec-other")
    assert not isinstance(excinfo.value, MicroSyntaxError)
