import logging
from datetime import date

import streamlit as st
from streamlit.errors import StreamlitAPIException

from src.config import AppSettings, load_settings
from src.registry.schema_types import FieldKind, SchemaField, get_schema, list_schemas
from src.templates.form_session import FormSession
from src.templates.template_store import TemplateSaveError, TemplateStore
from src.utils.helpers import JSON_MIME_TYPE, build_download_filename, wrap_in_script_tag


def _settings() -> AppSettings:
    try:
        return load_settings(st.secrets)
    except (FileNotFoundError, StreamlitAPIException):
        # No secrets.toml: run with defaults
        return AppSettings()


settings = _settings()
logging.basicConfig(level=settings.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

# ─── Page Config ────────────────────────────────────────────────────────────
st.set_page_config(
    page_title=settings.page_title,
    page_icon="🔍",
    layout="wide",
)

# ─── Session State Init ──────────────────────────────────────────────────────
defaults = {
    "form": lambda: FormSession(schema_id=settings.default_schema),
    "templates": TemplateStore,
    "form_version": lambda: 0,
}
for k, factory in defaults.items():
    if k not in st.session_state:
        st.session_state[k] = factory()

form: FormSession = st.session_state["form"]
store: TemplateStore = st.session_state["templates"]


def _reset_widgets() -> None:
    """Widgets are keyed by a version counter; bumping it re-renders them from form.values."""
    st.session_state["form_version"] += 1


def _parse_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value) if value else None
    except ValueError:
        return None


def render_field(f: SchemaField, value: str) -> str:
    key = f"field_{form.schema_id}_{f.name}_{st.session_state['form_version']}"
    label = f"{f.label} *" if f.required else f.label

    if f.kind == FieldKind.TEXTAREA:
        return st.text_area(label, value=value, placeholder=f.placeholder, height=120, key=key)

    if f.kind == FieldKind.SELECT:
        options = [o.value for o in f.options]
        labels = {o.value: o.label for o in f.options}
        picked = st.selectbox(
            label,
            options,
            index=options.index(value) if value in options else None,
            format_func=lambda v: labels.get(v, v),
            placeholder=f"Select {f.label.lower()}",
            key=key,
        )
        return picked or ""

    if f.kind == FieldKind.DATE:
        picked = st.date_input(label, value=_parse_date(value), key=key)
        return picked.isoformat() if picked else ""

    return st.text_input(label, value=value, placeholder=f.placeholder, key=key)


# ─── Header ─────────────────────────────────────────────────────────────────
st.title(settings.page_title)
st.caption(
    "Create valid JSON-LD schema markup for FAQ pages, articles, local businesses, "
    "events, products, and organizations."
)

col_form, col_output = st.columns(2)

# ─── Schema Configuration ────────────────────────────────────────────────────
with col_form:
    st.subheader("Schema Configuration")
    schemas = list_schemas()
    schema_ids = [s.id for s in schemas]
    selected = st.selectbox(
        "Schema Type",
        schema_ids,
        index=schema_ids.index(form.schema_id),
        format_func=lambda sid: get_schema(sid).display_name,
    )
    if selected != form.schema_id:
        form.select_schema(selected)
        form.reset_output()

    schema = get_schema(form.schema_id)
    st.caption(schema.description)

    for f in schema.fields:
        form.set_field(f.name, render_field(f, form.values.get(f.name, "")))

    if form.errors:
        st.error("Please fix the following errors:\n\n" + "\n".join(f"- {e}" for e in form.errors))

    col_save, col_clear, col_gen = st.columns([1, 1, 2])
    with col_clear:
        if st.button("🗑️ Clear", use_container_width=True):
            form.clear()
            _reset_widgets()
            st.rerun()
    with col_gen:
        if st.button("Generate Schema", type="primary", use_container_width=True):
            form.generate()
            st.rerun()

    with st.expander("💾 Save as Template"):
        with st.form("save_template", clear_on_submit=True):
            template_name = st.text_input("Template Name", placeholder="My Business Template")
            template_desc = st.text_area("Description (Optional)", placeholder="Brief description of this template...", height=80)
            if st.form_submit_button("Save Template"):
                try:
                    saved = store.save(template_name, template_desc, form.schema_id, form.values)
                    st.success(f'"{saved.name}" has been saved to your templates.')
                except TemplateSaveError as e:
                    for msg in e.messages:
                        st.error(msg)

# ─── Generated Schema ────────────────────────────────────────────────────────
with col_output:
    st.subheader("Generated Schema")
    if form.output:
        st.markdown("✅ **Valid**")
        st.code(form.output, language="json")
        st.download_button(
            label="⬇️ Download",
            data=form.output.encode("utf-8"),
            file_name=build_download_filename(form.schema_id),
            mime=JSON_MIME_TYPE,
        )
        with st.expander("HTML (with `<script>` tag)"):
            st.code(wrap_in_script_tag(form.output), language="html")
        st.info(
            "How to use this schema:\n"
            "1. Copy the JSON-LD code above\n"
            "2. Paste it into your page or post\n"
            '3. Wrap it in a script tag: `<script type="application/ld+json">`\n'
            "4. Test your schema using Google's Rich Results Test"
        )
    else:
        st.caption('Configure your schema and click "Generate Schema" to see the output.')

# ─── Saved Templates ─────────────────────────────────────────────────────────
if len(store):
    st.markdown("---")
    st.subheader("📂 Saved Templates")
    cols = st.columns(3)
    for idx, template in enumerate(store.list()):
        with cols[idx % 3]:
            with st.container(border=True):
                st.markdown(f"**{template.name}**")
                st.caption(f"{get_schema(template.schema_id).display_name} • {template.created_at:%Y-%m-%d}")
                if template.description:
                    st.write(template.description)
                col_load, col_del = st.columns(2)
                with col_load:
                    if st.button("Load Template", key=f"load_{template.id}", use_container_width=True):
                        store.load(template.id, form)
                        _reset_widgets()
                        st.rerun()
                with col_del:
                    if st.button("Delete", key=f"del_{template.id}", use_container_width=True):
                        store.delete(template.id)
                        st.rerun()
