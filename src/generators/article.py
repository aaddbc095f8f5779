"""
Article schema generator.
"""
from src.generators.base import make_header, make_person
from src.registry.schema_types import SchemaKind


def generate_article(data: dict) -> dict:
    """
    Article schema with:
    - author (Person by name)
    - datePublished as entered (YYYY-MM-DD from the date picker)
    - image URL, only when provided
    """
    schema = {
        **make_header(SchemaKind.ARTICLE),
        "headline": data.get("headline", ""),
        "description": data.get("description", ""),
        "author": make_person(data.get("author", "")),
        "datePublished": data.get("datePublished", ""),
    }

    if data.get("image"):
        schema["image"] = data["image"]

    return schema
