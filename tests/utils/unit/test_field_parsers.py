"""Free-text field parser tests."""

from __future__ import annotations

import json

from src.utils.helpers import (
    build_download_filename,
    format_json,
    parse_address_lines,
    parse_contact_lines,
    parse_faq_items,
    parse_hours_lines,
    wrap_in_script_tag,
)


def test_faq_parser_drops_block_without_answer() -> None:
    items = parse_faq_items("Q: What is X?\nA: X is Y.\n\nQ: Bad block\n")

    assert items == [{"question": "What is X?", "answer": "X is Y."}]


def test_faq_parser_keeps_block_order_and_last_marker_wins() -> None:
    text = "Q: first?\nA: one\n\nQ: old\nQ: second?\nA: two\n\n\n\nA: orphan answer"

    items = parse_faq_items(text)

    assert items == [
        {"question": "first?", "answer": "one"},
        {"question": "second?", "answer": "two"},
    ]


def test_faq_parser_markers_are_case_sensitive_and_anchored() -> None:
    assert parse_faq_items("q: lower?\na: lower") == []
    assert parse_faq_items(" Q: indented?\n A: indented") == []


def test_faq_parser_handles_windows_line_endings() -> None:
    items = parse_faq_items("Q: a?\r\nA: b.\r\n\r\nQ: c?\r\nA: d.")

    assert items == [{"question": "a?", "answer": "b."}, {"question": "c?", "answer": "d."}]


def test_faq_parser_empty_input() -> None:
    assert parse_faq_items("") == []
    assert parse_faq_items("   \n\n  ") == []


def test_address_parser_maps_four_lines() -> None:
    address = parse_address_lines("123 Main St\nSpringfield\nIL\n62704")

    assert address == {
        "streetAddress": "123 Main St",
        "addressLocality": "Springfield",
        "addressRegion": "IL",
        "postalCode": "62704",
    }


def test_address_parser_skips_blank_lines_and_ignores_extras() -> None:
    assert parse_address_lines("\n1 Elm Rd\n\nGotham\n") == {
        "streetAddress": "1 Elm Rd",
        "addressLocality": "Gotham",
    }
    assert parse_address_lines("a\nb\nc\nd\ne")["postalCode"] == "d"
    assert len(parse_address_lines("a\nb\nc\nd\ne")) == 4


def test_hours_parser_returns_non_blank_lines_verbatim() -> None:
    hours = parse_hours_lines("Monday-Friday: 9AM-5PM\n\n  \nSunday: Closed")

    assert hours == ["Monday-Friday: 9AM-5PM", "Sunday: Closed"]


def test_contact_parser_splits_on_first_colon() -> None:
    contacts = parse_contact_lines(
        "Customer Service: +1-555-123-4567\nSupport: https://help.example.com\nno colon here\nSales:   \n: orphan"
    )

    assert contacts == [
        {"contactType": "Customer Service", "value": "+1-555-123-4567"},
        {"contactType": "Support", "value": "https://help.example.com"},
    ]


def test_format_json_round_trips_and_keeps_unicode() -> None:
    data = {"@context": "https://schema.org", "name": "Café Zoë", "items": ["a", "b"]}

    text = format_json(data)

    assert json.loads(text) == data
    assert "Café Zoë" in text
    assert text.startswith('{\n  "@context"')
    assert not text.endswith("\n")


def test_wrap_in_script_tag() -> None:
    assert wrap_in_script_tag("{}") == '<script type="application/ld+json">\n{}\n</script>'


def test_build_download_filename() -> None:
    assert build_download_filename("faq", 1718000000000) == "schema-faq-1718000000000.json"
    name = build_download_filename("product")
    assert name.startswith("schema-product-")
    assert name.endswith(".json")
    assert name[len("schema-product-"):-len(".json")].isdigit()
