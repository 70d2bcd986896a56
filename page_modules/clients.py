"""Clients page."""
import streamlit as st

from core.entities import CLIENTS
from core.query_view import query
from core.services import EDITING, get_mode, get_store, start_editing
from ui.components import (
    delete_with_notice,
    load_editing_record,
    render_editor,
    render_empty_state,
    render_search,
    render_sort_controls,
)

SORT_LABELS = {"name": "Name", "email": "Email"}


def _describe(client):
    return client.name


def render():
    """Render the clients page."""
    store = get_store(CLIENTS)

    if get_mode(CLIENTS) == EDITING:
        record = load_editing_record(CLIENTS, store)
        render_editor(CLIENTS, store, record, describe=_describe)
        return

    col1, col2 = st.columns([4, 1])
    with col1:
        st.header("\U0001F465 Clients")
        st.caption("Manage your store's clients")
    with col2:
        if st.button("➕ New client", width="stretch"):
            start_editing(CLIENTS)
            st.rerun()

    col1, col2 = st.columns([3, 1])
    with col1:
        search = render_search(CLIENTS, "Search clients...")
    with col2:
        st.metric("Total clients", len(store))

    sort = render_sort_controls(CLIENTS, SORT_LABELS)
    rows = query(store.records, search, CLIENTS.searchable, sort)
    if not rows:
        render_empty_state(bool(search), "clients")
        return

    header = st.columns([3, 3, 2, 3, 1, 1])
    for col, title in zip(header, ["Name", "Email", "Phone", "Address", "", ""]):
        col.markdown(f"**{title}**")
    for client in rows:
        cols = st.columns([3, 3, 2, 3, 1, 1])
        cols[0].write(f"\U0001F464 {client.name}")
        cols[1].write(client.email)
        cols[2].write(client.phone)
        cols[3].write(client.address)
        if cols[4].button("✏️", key=f"client_edit_{client.id}", help="Edit"):
            start_editing(CLIENTS, client.id)
            st.rerun()
        if cols[5].button("\U0001F5D1️", key=f"client_del_{client.id}", help="Delete"):
            delete_with_notice(CLIENTS, store, client.id, _describe)
