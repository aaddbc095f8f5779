"""
Event schema generator.
"""
from src.generators.base import make_header, make_place
from src.registry.schema_types import SchemaKind


def generate_event(data: dict) -> dict:
    """Event with a named Place; endDate and url only when filled in."""
    schema = {
        **make_header(SchemaKind.EVENT),
        "name": data.get("name", ""),
        "description": data.get("description", ""),
        "startDate": data.get("startDate", ""),
    }

    if data.get("endDate"):
        schema["endDate"] = data["endDate"]

    schema["location"] = make_place(data.get("location", ""))

    if data.get("url"):
        schema["url"] = data["url"]

    return schema
