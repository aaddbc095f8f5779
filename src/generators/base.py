"""
Shared builder functions used by all schema generators.
"""
from src.registry.schema_types import SchemaKind, get_schema
from src.utils.helpers import (
    parse_address_lines, parse_contact_lines, parse_faq_items,
)


def make_context() -> str:
    return "https://schema.org"


def make_header(kind: SchemaKind) -> dict:
    """The "@context"/"@type" pair every generated document starts with."""
    return {"@context": make_context(), "@type": get_schema(kind.value).json_ld_type}


def make_person(name: str) -> dict:
    return {"@type": "Person", "name": name}


def make_place(name: str) -> dict:
    return {"@type": "Place", "name": name}


def make_postal_address(text: str) -> dict:
    return {"@type": "PostalAddress", **parse_address_lines(text)}


def make_questions(text: str) -> list[dict]:
    return [
        {
            "@type": "Question",
            "name": item["question"],
            "acceptedAnswer": {"@type": "Answer", "text": item["answer"]},
        }
        for item in parse_faq_items(text)
    ]


def make_contact_points(text: str) -> list[dict]:
    return [{"@type": "ContactPoint", **cp} for cp in parse_contact_lines(text)]


def make_offer(data: dict) -> dict:
    """Price stays a string, exactly as typed."""
    return {
        "@type": "Offer",
        "price": data.get("price", ""),
        "priceCurrency": data.get("currency", ""),
        "availability": f"https://schema.org/{data.get('availability', '')}",
    }
