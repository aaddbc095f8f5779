"""
In-memory store of saved form templates.
A template is a named snapshot of one schema type's field values.
"""
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone

from src.registry.schema_types import get_schema
from src.templates.form_session import FormSession

logger = logging.getLogger(__name__)


class TemplateSaveError(ValueError):
    def __init__(self, messages: list[str]):
        super().__init__("; ".join(messages))
        self.messages = messages


class TemplateNotFoundError(KeyError):
    pass


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    description: str
    schema_id: str
    values: dict[str, str] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class TemplateStore:
    """
    Saved templates for the current session, in insertion order.

    save() raises TemplateSaveError (its .messages are user-facing) instead of
    returning an error list; load() raises TemplateNotFoundError for unknown ids.
    """

    def __init__(self):
        self._templates: dict[str, Template] = {}
        self._last_id = 0

    def _next_id(self) -> str:
        # Millisecond timestamps, bumped when two saves land in the same millisecond
        stamp = max(time.time_ns() // 1_000_000, self._last_id + 1)
        self._last_id = stamp
        return str(stamp)

    def save(self, name: str, description: str, schema_id: str, values: dict) -> Template:
        """
        Snapshot the form values under a name.
        Raises TemplateSaveError when the name is blank or no required field is filled in.
        """
        name = (name or "").strip()
        if not name:
            raise TemplateSaveError(["Please enter a name for your template."])

        schema = get_schema(schema_id)
        if schema is None:
            raise TemplateSaveError([f"Unknown schema type: {schema_id}"])

        if not any(values.get(f.name, "").strip() for f in schema.required_fields):
            raise TemplateSaveError(
                ["Please fill in at least some required fields before saving as template."]
            )

        template = Template(
            id=self._next_id(),
            name=name,
            description=(description or "").strip(),
            schema_id=schema_id,
            values=dict(values),
        )
        self._templates[template.id] = template
        logger.info("Saved template %r (%s) for %s", template.name, template.id, schema_id)
        return template

    def list(self) -> list[Template]:
        return list(self._templates.values())

    def get(self, template_id: str) -> Template | None:
        return self._templates.get(template_id)

    def load(self, template_id: str, session: FormSession) -> dict[str, str]:
        """Copy a template back into the active form and clear any previous output."""
        template = self._templates.get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        session.select_schema(template.schema_id)
        session.values = dict(template.values)
        session.reset_output()
        return session.values

    def delete(self, template_id: str) -> None:
        removed = self._templates.pop(template_id, None)
        if removed is not None:
            logger.info("Deleted template %r (%s)", removed.name, template_id)

    def __len__(self) -> int:
        return len(self._templates)
