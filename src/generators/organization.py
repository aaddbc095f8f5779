"""
Organization and LocalBusiness schema generators.
"""
from src.generators.base import make_contact_points, make_header, make_postal_address
from src.registry.schema_types import SchemaKind
from src.utils.helpers import parse_hours_lines


def generate_organization(data: dict) -> dict:
    """
    Organization with optional logo and ContactPoint list.
    Contact lines look like "Customer Service: +1-555-123-4567".
    """
    schema = {
        **make_header(SchemaKind.ORGANIZATION),
        "name": data.get("name", ""),
        "description": data.get("description", ""),
        "url": data.get("url", ""),
    }

    if data.get("logo"):
        schema["logo"] = data["logo"]

    if data.get("contactPoint"):
        schema["contactPoint"] = make_contact_points(data["contactPoint"])

    return schema


def generate_local_business(data: dict) -> dict:
    """
    LocalBusiness with a PostalAddress built from the address lines
    (street, city, region, postal code) and free-form opening hours.
    """
    schema = {
        **make_header(SchemaKind.LOCAL_BUSINESS),
        "name": data.get("name", ""),
        "description": data.get("description", ""),
        "address": make_postal_address(data.get("address", "")),
    }

    if data.get("phone"):
        schema["telephone"] = data["phone"]

    if data.get("website"):
        schema["url"] = data["website"]

    if data.get("hours"):
        schema["openingHours"] = parse_hours_lines(data["hours"])

    return schema
