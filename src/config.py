"""
App settings read from Streamlit secrets (.streamlit/secrets.toml).
Every key is optional.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from src.registry.schema_types import SchemaKind, get_schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppSettings:
    page_title: str = "Structured Data Assistant"
    default_schema: str = SchemaKind.FAQ.value
    log_level: str = "INFO"


def load_settings(secrets: Mapping) -> AppSettings:
    defaults = AppSettings()
    default_schema = str(secrets.get("DEFAULT_SCHEMA", defaults.default_schema))
    if get_schema(default_schema) is None:
        logger.warning("Unknown DEFAULT_SCHEMA %r, using %r", default_schema, defaults.default_schema)
        default_schema = defaults.default_schema
    log_level = str(secrets.get("LOG_LEVEL", defaults.log_level)).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Unknown LOG_LEVEL %r, using %r", log_level, defaults.log_level)
        log_level = defaults.log_level

    return AppSettings(
        page_title=str(secrets.get("PAGE_TITLE", defaults.page_title)),
        default_schema=default_schema,
        log_level=log_level,
    )
