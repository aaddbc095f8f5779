"""
The active form: selected schema type, field values and the last
generated output. One instance lives in the Streamlit session state.
"""
from dataclasses import dataclass, field

from src.generators.dispatch import generate_schema, render_schema
from src.registry.schema_types import SchemaKind, get_schema
from src.validators.schema_validator import validate_schema


@dataclass
class FormSession:
    schema_id: str = SchemaKind.FAQ.value
    values: dict[str, str] = field(default_factory=dict)
    document: dict | None = None
    output: str = ""
    errors: list[str] = field(default_factory=list)

    def select_schema(self, schema_id: str) -> None:
        """Switch schema type; values for fields the new type shares (name, description...) carry over."""
        schema = get_schema(schema_id)
        if schema is None:
            raise ValueError(f"Unknown schema type: {schema_id}")
        names = {f.name for f in schema.fields}
        self.schema_id = schema_id
        self.values = {k: v for k, v in self.values.items() if k in names}

    def set_field(self, name: str, value: str) -> None:
        self.values[name] = value

    def reset_output(self) -> None:
        self.document = None
        self.output = ""
        self.errors = []

    def clear(self) -> None:
        self.values = {}
        self.reset_output()

    def generate(self) -> bool:
        """Validate, then build and render the document. Returns False when blocked by errors."""
        self.errors = validate_schema(self.schema_id, self.values)
        if self.errors:
            self.document = None
            self.output = ""
            return False
        self.document = generate_schema(self.schema_id, self.values)
        self.output = render_schema(self.document)
        return True
