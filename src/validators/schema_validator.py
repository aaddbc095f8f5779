"""
Schema validator — checks required fields and value formats.
Any issue blocks generation.
"""
import logging
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from src.registry.schema_types import SchemaDefinition, SchemaKind, get_schema
from src.utils.helpers import parse_faq_items

logger = logging.getLogger(__name__)

_PRICE_RE = re.compile(r"[0-9]+(\.[0-9]{1,2})?")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


@dataclass
class ValidationIssue:
    field: str
    message: str


def is_valid_url(value: str) -> bool:
    """
    True for absolute URLs, following how browsers parse them.
    Web schemes need a host and a numeric port if one is given; the slashes
    after the scheme are optional ("http:example.com" is accepted).
    """
    value = value.strip()
    scheme, sep, rest = value.partition(":")
    if not sep or not _SCHEME_RE.fullmatch(scheme):
        return False
    if scheme.lower() not in _HOST_SCHEMES:
        return True
    try:
        parts = urlsplit(f"{scheme}://{rest.lstrip('/')}")
        host = parts.hostname
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError:
        return False
    return bool(host) and not any(ch.isspace() for ch in host)


def is_valid_price(value: str) -> bool:
    return _PRICE_RE.fullmatch(value) is not None


def validate_required(schema: SchemaDefinition, data: dict) -> list[ValidationIssue]:
    """One issue per required field that is missing or blank, in field order."""
    return [
        ValidationIssue(f.name, f"{f.label} is required")
        for f in schema.fields
        if f.required and not data.get(f.name, "").strip()
    ]


def _check_url(data: dict, field: str, message: str) -> ValidationIssue | None:
    # Optional URLs are only format-checked when something was typed
    value = data.get(field, "")
    if value and not is_valid_url(value):
        return ValidationIssue(field, message)
    return None


def _schema_specific_issue(kind: SchemaKind, data: dict) -> ValidationIssue | None:
    match kind:
        case SchemaKind.FAQ:
            text = data.get("mainEntity", "")
            if text and not parse_faq_items(text):
                return ValidationIssue("mainEntity", "At least one valid FAQ item (Q: and A:) is required")
            return None
        case SchemaKind.PRODUCT:
            price = data.get("price", "")
            if price and not is_valid_price(price):
                return ValidationIssue("price", "Price must be a valid number (e.g., 29.99)")
            return None
        case SchemaKind.ARTICLE:
            return _check_url(data, "image", "Image URL must be a valid URL")
        case SchemaKind.LOCAL_BUSINESS:
            return _check_url(data, "website", "Website URL must be a valid URL")
        case SchemaKind.EVENT:
            return _check_url(data, "url", "Event URL must be a valid URL")
        case SchemaKind.ORGANIZATION:
            return _check_url(data, "url", "Website URL must be a valid URL")


def collect_issues(schema_id: str, data: dict) -> list[ValidationIssue]:
    """Required-field issues first, then at most one format issue for the schema type."""
    schema = get_schema(schema_id)
    if schema is None:
        return [ValidationIssue("schema", f"Unknown schema type: {schema_id}")]

    issues = validate_required(schema, data)
    extra = _schema_specific_issue(schema.kind, data)
    if extra:
        issues.append(extra)

    if issues:
        logger.debug("%s form has %d validation issue(s)", schema.json_ld_type, len(issues))
    return issues


def validate_schema(schema_id: str, data: dict) -> list[str]:
    """Error messages for the form values; an empty list means valid."""
    return [issue.message for issue in collect_issues(schema_id, data)]
