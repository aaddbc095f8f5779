"""
Product schema generator for e-commerce.
Includes a single Offer with price, currency and availability.
"""
from src.generators.base import make_header, make_offer
from src.registry.schema_types import SchemaKind


def generate_product(data: dict) -> dict:
    schema = {
        **make_header(SchemaKind.PRODUCT),
        "name": data.get("name", ""),
        "description": data.get("description", ""),
        "offers": make_offer(data),
    }

    if data.get("image"):
        schema["image"] = data["image"]

    return schema
