import json
import time


JSON_MIME_TYPE = "application/json"

_ADDRESS_KEYS = ("streetAddress", "addressLocality", "addressRegion", "postalCode")


def _lines(text: str) -> list[str]:
    """Split textarea input into its non-blank lines, keeping each line verbatim."""
    if not text:
        return []
    return [line for line in text.splitlines() if line.strip()]


def parse_faq_items(text: str) -> list[dict]:
    """
    Parse FAQ textarea input into {question, answer} pairs.
    Blocks are separated by a blank line; within a block "Q:" starts the
    question and "A:" the answer. Blocks missing either part are dropped.
    """
    if not text:
        return []
    items = []
    for block in text.replace("\r\n", "\n").split("\n\n"):
        if not block.strip():
            continue
        question = ""
        answer = ""
        for line in block.split("\n"):
            if line.startswith("Q:"):
                question = line[2:].strip()
            elif line.startswith("A:"):
                answer = line[2:].strip()
        if question and answer:
            items.append({"question": question, "answer": answer})
    return items


def parse_address_lines(text: str) -> dict:
    """Map up to four address lines onto street, locality, region and postal code."""
    return dict(zip(_ADDRESS_KEYS, _lines(text)))


def parse_hours_lines(text: str) -> list[str]:
    """Opening hours, one entry per non-blank line (e.g. "Mo-Fr 09:00-17:00")."""
    return _lines(text)


def parse_contact_lines(text: str) -> list[dict]:
    """Parse "Type: value" lines into {contactType, value} pairs."""
    contacts = []
    for line in _lines(text):
        contact_type, sep, value = line.partition(":")
        contact_type, value = contact_type.strip(), value.strip()
        if not sep or not contact_type or not value:
            continue
        contacts.append({"contactType": contact_type, "value": value})
    return contacts


def format_json(data: dict) -> str:
    """Serialize schema dict to pretty-printed JSON string."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def wrap_in_script_tag(json_str: str) -> str:
    """Wrap JSON-LD in HTML script tag."""
    return f'<script type="application/ld+json">\n{json_str}\n</script>'


def build_download_filename(schema_id: str, timestamp_ms: int | None = None) -> str:
    """File name for a downloaded schema, e.g. schema-faq-1718000000000.json."""
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    return f"schema-{schema_id}-{timestamp_ms}.json"
