"""
Catalog of the schema.org types the form can produce.
Each definition lists its form fields in display order.
"""
from dataclasses import dataclass, field
from enum import Enum


class SchemaKind(str, Enum):
    FAQ = "faq"
    ARTICLE = "article"
    LOCAL_BUSINESS = "localbusiness"
    EVENT = "event"
    PRODUCT = "product"
    ORGANIZATION = "organization"


class FieldKind(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    DATE = "date"
    # Numeric text; no catalog field uses it today (price is plain text so "29.99" stays a string)
    NUMBER = "number"


@dataclass(frozen=True)
class FieldOption:
    value: str
    label: str


@dataclass(frozen=True)
class SchemaField:
    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    options: tuple[FieldOption, ...] = ()
    placeholder: str = ""


@dataclass(frozen=True)
class SchemaDefinition:
    kind: SchemaKind
    display_name: str
    description: str
    json_ld_type: str
    fields: tuple[SchemaField, ...] = field(default_factory=tuple)

    @property
    def id(self) -> str:
        return self.kind.value

    @property
    def required_fields(self) -> tuple[SchemaField, ...]:
        return tuple(f for f in self.fields if f.required)


_FAQ_PLACEHOLDER = (
    "Enter questions and answers in format:\n"
    "Q: What is your return policy?\n"
    "A: We offer 30-day returns on all items.\n\n"
    "Q: How long does shipping take?\n"
    "A: Standard shipping takes 3-5 business days."
)

SCHEMA_TYPES: tuple[SchemaDefinition, ...] = (
    SchemaDefinition(
        kind=SchemaKind.FAQ,
        display_name="FAQ Page",
        description="Frequently Asked Questions schema for better search visibility",
        json_ld_type="FAQPage",
        fields=(
            SchemaField("mainEntity", "FAQ Questions & Answers", FieldKind.TEXTAREA,
                        required=True, placeholder=_FAQ_PLACEHOLDER),
        ),
    ),
    SchemaDefinition(
        kind=SchemaKind.ARTICLE,
        display_name="Article",
        description="News article, blog post, or other written content",
        json_ld_type="Article",
        fields=(
            SchemaField("headline", "Headline", required=True, placeholder="Article title"),
            SchemaField("description", "Description", FieldKind.TEXTAREA, required=True,
                        placeholder="Brief description of the article"),
            SchemaField("author", "Author", required=True, placeholder="Author name"),
            SchemaField("datePublished", "Publication Date", FieldKind.DATE, required=True),
            SchemaField("image", "Image URL", placeholder="https://example.com/image.jpg"),
        ),
    ),
    SchemaDefinition(
        kind=SchemaKind.LOCAL_BUSINESS,
        display_name="Local Business",
        description="Local business information for Google Maps and search",
        json_ld_type="LocalBusiness",
        fields=(
            SchemaField("name", "Business Name", required=True, placeholder="Your business name"),
            SchemaField("description", "Description", FieldKind.TEXTAREA, required=True,
                        placeholder="Brief description of your business"),
            SchemaField("address", "Address", FieldKind.TEXTAREA, required=True,
                        placeholder="Street address, city, state, zip code"),
            SchemaField("phone", "Phone", placeholder="(555) 123-4567"),
            SchemaField("website", "Website", placeholder="https://yourwebsite.com"),
            SchemaField("hours", "Hours", FieldKind.TEXTAREA,
                        placeholder="Monday-Friday: 9AM-5PM\nSaturday: 10AM-4PM\nSunday: Closed"),
        ),
    ),
    SchemaDefinition(
        kind=SchemaKind.EVENT,
        display_name="Event",
        description="Event information for better visibility in search results",
        json_ld_type="Event",
        fields=(
            SchemaField("name", "Event Name", required=True, placeholder="Event title"),
            SchemaField("description", "Description", FieldKind.TEXTAREA, required=True,
                        placeholder="Event description"),
            SchemaField("startDate", "Start Date", FieldKind.DATE, required=True),
            SchemaField("endDate", "End Date", FieldKind.DATE, placeholder="Optional"),
            SchemaField("location", "Location", required=True, placeholder="Event venue or address"),
            SchemaField("url", "Event URL", placeholder="https://example.com/event"),
        ),
    ),
    SchemaDefinition(
        kind=SchemaKind.PRODUCT,
        display_name="Product",
        description="Product information for e-commerce pages",
        json_ld_type="Product",
        fields=(
            SchemaField("name", "Product Name", required=True, placeholder="Product name"),
            SchemaField("description", "Description", FieldKind.TEXTAREA, required=True,
                        placeholder="Product description"),
            SchemaField("price", "Price", required=True, placeholder="29.99"),
            SchemaField("currency", "Currency", FieldKind.SELECT, required=True, options=(
                FieldOption("USD", "USD"),
                FieldOption("EUR", "EUR"),
                FieldOption("GBP", "GBP"),
                FieldOption("CAD", "CAD"),
            )),
            SchemaField("availability", "Availability", FieldKind.SELECT, required=True, options=(
                FieldOption("InStock", "In Stock"),
                FieldOption("OutOfStock", "Out of Stock"),
                FieldOption("PreOrder", "Pre-Order"),
            )),
            SchemaField("image", "Image URL", placeholder="https://example.com/product.jpg"),
        ),
    ),
    SchemaDefinition(
        kind=SchemaKind.ORGANIZATION,
        display_name="Organization",
        description="Organization information for company pages",
        json_ld_type="Organization",
        fields=(
            SchemaField("name", "Organization Name", required=True, placeholder="Company name"),
            SchemaField("description", "Description", FieldKind.TEXTAREA, required=True,
                        placeholder="Organization description"),
            SchemaField("url", "Website", required=True, placeholder="https://company.com"),
            SchemaField("logo", "Logo URL", placeholder="https://company.com/logo.jpg"),
            SchemaField("contactPoint", "Contact Information", FieldKind.TEXTAREA,
                        placeholder=("Contact type and details:\n"
                                     "Customer Service: +1-555-123-4567\n"
                                     "Sales: sales@company.com")),
        ),
    ),
)

_BY_ID = {definition.id: definition for definition in SCHEMA_TYPES}


def list_schemas() -> list[SchemaDefinition]:
    return list(SCHEMA_TYPES)


def get_schema(schema_id: str) -> SchemaDefinition | None:
    """Look up a definition by its id (e.g. "faq"). Returns None when unknown."""
    return _BY_ID.get(schema_id)
