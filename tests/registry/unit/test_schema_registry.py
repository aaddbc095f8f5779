"""Schema registry tests."""

from __future__ import annotations

import dataclasses

import pytest
from src.registry.schema_types import FieldKind, SchemaKind, get_schema, list_schemas


def test_lists_the_six_schema_types_in_order() -> None:
    assert [s.id for s in list_schemas()] == [
        "faq", "article", "localbusiness", "event", "product", "organization",
    ]
    assert [s.json_ld_type for s in list_schemas()] == [
        "FAQPage", "Article", "LocalBusiness", "Event", "Product", "Organization",
    ]


def test_every_kind_has_a_definition() -> None:
    for kind in SchemaKind:
        assert get_schema(kind.value).kind is kind


def test_unknown_schema_id_is_not_found() -> None:
    assert get_schema("recipe") is None


@pytest.mark.parametrize(
    ("schema_id", "required"),
    [
        ("faq", ["mainEntity"]),
        ("article", ["headline", "description", "author", "datePublished"]),
        ("localbusiness", ["name", "description", "address"]),
        ("event", ["name", "description", "startDate", "location"]),
        ("product", ["name", "description", "price", "currency", "availability"]),
        ("organization", ["name", "description", "url"]),
    ],
)
def test_required_fields(schema_id: str, required: list[str]) -> None:
    assert [f.name for f in get_schema(schema_id).required_fields] == required


def test_select_fields_carry_their_options() -> None:
    product = get_schema("product")
    fields = {f.name: f for f in product.fields}

    assert fields["currency"].kind is FieldKind.SELECT
    assert [o.value for o in fields["currency"].options] == ["USD", "EUR", "GBP", "CAD"]
    assert [(o.value, o.label) for o in fields["availability"].options] == [
        ("InStock", "In Stock"),
        ("OutOfStock", "Out of Stock"),
        ("PreOrder", "Pre-Order"),
    ]
    assert all(not f.options for f in product.fields if f.kind is not FieldKind.SELECT)


def test_definitions_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        get_schema("faq").json_ld_type = "Thing"  # type: ignore[misc]


def test_price_is_plain_text_and_numeric_kind_is_unused() -> None:
    fields = {f.name: f for f in get_schema("product").fields}

    assert fields["price"].kind is FieldKind.TEXT
    assert [k.value for k in FieldKind] == ["text", "textarea", "select", "date", "number"]
    assert all(f.kind is not FieldKind.NUMBER for s in list_schemas() for f in s.fields)
