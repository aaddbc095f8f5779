"""
Entry point for schema generation: picks the generator for a schema id
and renders the result as JSON-LD text.
"""
import logging

from src.generators.article import generate_article
from src.generators.event import generate_event
from src.generators.faq import generate_faq
from src.generators.organization import generate_local_business, generate_organization
from src.generators.product import generate_product
from src.registry.schema_types import SchemaKind
from src.utils.helpers import format_json

logger = logging.getLogger(__name__)


def generate_schema(schema_id: str, values: dict) -> dict:
    """
    Build the JSON-LD document for already-validated form values.
    Raises ValueError for an unknown schema id.
    """
    try:
        kind = SchemaKind(schema_id)
    except ValueError:
        raise ValueError(f"Unknown schema type: {schema_id}") from None

    match kind:
        case SchemaKind.FAQ:
            document = generate_faq(values)
        case SchemaKind.ARTICLE:
            document = generate_article(values)
        case SchemaKind.LOCAL_BUSINESS:
            document = generate_local_business(values)
        case SchemaKind.EVENT:
            document = generate_event(values)
        case SchemaKind.PRODUCT:
            document = generate_product(values)
        case SchemaKind.ORGANIZATION:
            document = generate_organization(values)

    logger.debug("Generated %s document with %d top-level keys", document["@type"], len(document))
    return document


def render_schema(document: dict) -> str:
    return format_json(document)
