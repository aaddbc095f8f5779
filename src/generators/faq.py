"""
FAQPage schema generator.
Questions and answers come from the "Q:"/"A:" textarea blocks.
"""
from src.generators.base import make_header, make_questions
from src.registry.schema_types import SchemaKind


def generate_faq(data: dict) -> dict:
    schema = make_header(SchemaKind.FAQ)
    schema["mainEntity"] = make_questions(data.get("mainEntity", ""))
    return schema
