"""Session-scoped data access used by the Streamlit pages.

Stores are created from their seed data the first time a session asks for
them and live in `st.session_state` until the browser session ends.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import streamlit as st

from core.entities import ENTITY_CONFIGS, EntityConfig
from core.entity_store import EntityStore
from core.form_adapter import FormIntent
from core.models import StoreSettings
from core.query_view import SortState

logger = logging.getLogger(__name__)

LISTING = "listing"
EDITING = "editing"


def init_stores() -> Dict[str, EntityStore]:
    """Seed every entity store for this session (safe to call on every run)."""
    stores = st.session_state.setdefault("stores", {})
    for key, config in ENTITY_CONFIGS.items():
        if key not in stores:
            stores[key] = config.new_store()
            logger.info("Seeded %s store with %d records", key, len(stores[key]))
    return stores


def get_store(config: EntityConfig) -> EntityStore:
    return init_stores()[config.key]


def apply_intent(store: EntityStore, intent: FormIntent) -> Any:
    """Apply a submitted form to its store. Raises RecordNotFound on a stale update."""
    if intent.is_update:
        return store.update(intent.record_id, intent.draft)
    return store.create(intent.draft)


def get_settings() -> StoreSettings:
    if "store_settings" not in st.session_state:
        st.session_state["store_settings"] = StoreSettings()
    return st.session_state["store_settings"]


def save_settings(settings: StoreSettings) -> None:
    st.session_state["store_settings"] = settings
    logger.info("Store settings saved for %s", settings.company_name)


# ---------- per-page view state ----------

def get_sort(config: EntityConfig) -> SortState:
    key = f"{config.key}_sort"
    if key not in st.session_state:
        st.session_state[key] = config.default_sort
    return st.session_state[key]


def toggle_sort(config: EntityConfig, field: str) -> SortState:
    sort = get_sort(config).toggle(field)
    st.session_state[f"{config.key}_sort"] = sort
    return sort


def get_mode(config: EntityConfig) -> str:
    return st.session_state.get(f"{config.key}_mode", LISTING)


def get_editing_id(config: EntityConfig) -> Optional[int]:
    return st.session_state.get(f"{config.key}_editing_id")


def start_editing(config: EntityConfig, record_id: Optional[int] = None) -> None:
    """Enter Editing(record) or, with no id, Editing(none) for creation."""
    st.session_state[f"{config.key}_mode"] = EDITING
    st.session_state[f"{config.key}_editing_id"] = record_id
    st.session_state[f"{config.key}_form_loaded"] = False


def back_to_listing(config: EntityConfig) -> None:
    st.session_state[f"{config.key}_mode"] = LISTING
    st.session_state.pop(f"{config.key}_editing_id", None)
    st.session_state.pop(f"{config.key}_form_loaded", None)
    for spec in config.form_fields:
        st.session_state.pop(f"{config.key}_form_{spec.name}", None)
