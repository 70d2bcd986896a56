"""Reusable UI components shared by the list pages."""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence

import pandas as pd
import streamlit as st
from streamlit_free_text_select import st_free_text_select

from core.constants import CURRENCY_SYMBOL, DISPLAY_DATE_FORMAT
from core.entities import EntityConfig
from core.entity_store import EntityStore
from core.errors import RecordNotFound, ValidationFailed
from core.form_adapter import CHOICE, DATE, FLOAT, INT, TEXT, TEXTAREA, FieldSpec, FormAdapter
from core.query_view import SortState
from core.services import apply_intent, back_to_listing, get_editing_id, get_sort, toggle_sort

logger = logging.getLogger(__name__)

SEVERITY_ICONS = {
    "success": "✅",
    "info": "ℹ️",
    "warning": "⚠️",
    "error": "❌",
}


def format_currency(value) -> str:
    try:
        return f"{CURRENCY_SYMBOL} {float(value):,.2f}"
    except (TypeError, ValueError):
        return f"{CURRENCY_SYMBOL} 0.00"


def format_date(value) -> str:
    """ISO date to the display format; anything unparsable is shown as-is."""
    dt = pd.to_datetime(value, errors="coerce")
    if pd.isna(dt):
        return "" if value is None else str(value)
    return dt.strftime(DISPLAY_DATE_FORMAT)


def status_badge(status: str) -> str:
    return f'<span class="status-badge status-{status}">{status.title()}</span>'


# ---------- notifications ----------

def notify(title: str, description: str = "", severity: str = "success") -> None:
    """Queue a toast for the next run (fire-and-forget)."""
    st.session_state.setdefault("notifications", []).append((title, description, severity))


def flush_notifications() -> None:
    """Show and clear queued toasts. Call once near the top of a run."""
    pending = st.session_state.pop("notifications", [])
    for title, description, severity in pending:
        body = f"**{title}**" + (f"  \n{description}" if description else "")
        st.toast(body, icon=SEVERITY_ICONS.get(severity, "ℹ️"))


# ---------- listing ----------

def render_search(config: EntityConfig, placeholder: str) -> str:
    return st.text_input(
        "Search",
        key=f"{config.key}_search",
        placeholder=placeholder,
        label_visibility="collapsed",
    )


def render_sort_controls(config: EntityConfig, labels: Dict[str, str]) -> SortState:
    """One button per sortable column; the active one shows its direction."""
    sort = get_sort(config)
    cols = st.columns(len(config.sortable) + 1)
    cols[0].caption("Sort by")
    for col, field in zip(cols[1:], config.sortable):
        label = labels.get(field, field.title())
        if field == sort.key:
            label = f"{label} {sort.arrow}"
        if col.button(label, key=f"{config.key}_sort_{field}", width="stretch"):
            toggle_sort(config, field)
            st.rerun()
    return sort


def render_empty_state(searching: bool, entity_plural: str) -> None:
    if searching:
        st.info(f"No {entity_plural} match your search.")
    else:
        st.info(f"No {entity_plural} registered.")


def delete_with_notice(config: EntityConfig, store: EntityStore, record_id: int, describe: Callable) -> None:
    """Delete by id and queue a toast; a missing record is reported, not raised."""
    try:
        record = store.delete(record_id)
    except RecordNotFound as e:
        logger.warning("Delete skipped: %s", e)
        notify(f"{config.label} not found", str(e), "error")
    else:
        notify(f"{config.label} removed", f"{describe(record)} was removed.", "warning")
    st.rerun()


# ---------- editing ----------

def load_editing_record(config: EntityConfig, store: EntityStore):
    """Record targeted by Editing(record), or None for Editing(none).

    A target that is no longer in the store sends the page back to Listing.
    """
    editing_id = get_editing_id(config)
    if editing_id is None:
        return None
    try:
        return store.get(editing_id)
    except RecordNotFound as e:
        logger.warning("Edit skipped: %s", e)
        notify(f"{config.label} not found", str(e), "error")
        back_to_listing(config)
        st.rerun()


def _widget_key(config: EntityConfig, spec: FieldSpec) -> str:
    return f"{config.key}_form_{spec.name}"


def _is_free_text(spec: FieldSpec, suggestions: Sequence[str]) -> bool:
    return spec.kind == TEXT and bool(spec.options or suggestions)


def _load_form_state(config: EntityConfig, adapter: FormAdapter, suggestions: Dict[str, Sequence[str]]) -> None:
    """Copy the adapter's values into widget state once per Editing entry."""
    loaded_key = f"{config.key}_form_loaded"
    if st.session_state.get(loaded_key):
        return
    for spec in config.form_fields:
        if _is_free_text(spec, suggestions.get(spec.name, ())):
            # free-text selects are preselected through their options index
            continue
        value = adapter.values[spec.name]
        if spec.kind == DATE:
            value = date.fromisoformat(value) if value else date.today()
        st.session_state[_widget_key(config, spec)] = value
    st.session_state[loaded_key] = True


def _free_text_input(spec: FieldSpec, key: str, current: str, options: Sequence[str]):
    choices: List[str] = sorted({o for o in options if o} | ({current} if current else set()), key=str.casefold)
    index = choices.index(current) if current in choices else None
    value = st_free_text_select(
        spec.label + (" *" if spec.required else ""),
        choices,
        index=index,
        key=key,
        placeholder=spec.placeholder or "Type to search or add",
    )
    return (value or "").strip()


def _render_field(config: EntityConfig, spec: FieldSpec, adapter: FormAdapter, suggestions: Sequence[str]):
    key = _widget_key(config, spec)
    label = spec.label + (" *" if spec.required else "")
    if spec.kind == FLOAT:
        return st.number_input(label, min_value=0.0, step=0.01, format="%.2f", key=key)
    if spec.kind == INT:
        return st.number_input(label, min_value=0, step=1, key=key)
    if spec.kind == DATE:
        return st.date_input(label, key=key)
    if spec.kind == CHOICE:
        return st.selectbox(label, list(spec.options), format_func=str.title, key=key)
    if spec.kind == TEXTAREA:
        return st.text_area(label, key=key, placeholder=spec.placeholder)
    if _is_free_text(spec, suggestions):
        return _free_text_input(spec, key, adapter.values[spec.name], list(spec.options) + list(suggestions))
    return st.text_input(label, key=key, placeholder=spec.placeholder)


def render_editor(
    config: EntityConfig,
    store: EntityStore,
    record=None,
    describe: Callable = str,
    suggestions: Optional[Dict[str, Sequence[str]]] = None,
) -> None:
    """Editing(record | none) state of a list page.

    Submitting applies the form's intent to `store`; both submit and cancel
    return to Listing.
    """
    suggestions = suggestions or {}
    adapter = FormAdapter(config.form_fields, record)
    _load_form_state(config, adapter, suggestions)

    verb = "Edit" if adapter.is_edit else "New"
    st.subheader(f"{verb} {config.label.lower()}")

    raw_values = {}
    for spec in config.form_fields:
        raw_values[spec.name] = _render_field(config, spec, adapter, suggestions.get(spec.name, ()))

    col1, col2 = st.columns([3, 1])
    with col1:
        submit = st.button(
            f"{'Update' if adapter.is_edit else 'Create'} {config.label.lower()}",
            type="primary",
            width="stretch",
            key=f"{config.key}_form_submit",
        )
    with col2:
        cancel = st.button("Cancel", width="stretch", key=f"{config.key}_form_cancel")

    if cancel:
        adapter.cancel()
        back_to_listing(config)
        st.rerun()

    if not submit:
        return

    adapter.update(raw_values)
    try:
        intent = adapter.submit()
    except ValidationFailed as e:
        labels = ", ".join(adapter.spec(name).label for name in e.fields)
        st.error(f"Please fill in: {labels}")
        return

    try:
        saved = apply_intent(store, intent)
    except RecordNotFound as e:
        logger.warning("Update skipped: %s", e)
        notify(f"{config.label} not found", str(e), "error")
    else:
        if intent.is_update:
            notify(f"{config.label} updated", f"{describe(saved)} was updated.")
        else:
            notify(f"{config.label} created", f"{describe(saved)} was added.")
    back_to_listing(config)
    st.rerun()
