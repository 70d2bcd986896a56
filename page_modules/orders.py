"""Orders page."""
import streamlit as st

from core.entities import CLIENTS, ORDERS
from core.query_view import query
from core.services import EDITING, get_mode, get_store, start_editing
from ui.components import (
    delete_with_notice,
    format_currency,
    format_date,
    load_editing_record,
    render_editor,
    render_empty_state,
    render_search,
    render_sort_controls,
    status_badge,
)

SORT_LABELS = {"id": "# Order", "client_name": "Client", "date": "Date", "total": "Total"}


def _describe(order):
    return f"Order #{order.id}"


def render():
    """Render the orders page."""
    store = get_store(ORDERS)

    if get_mode(ORDERS) == EDITING:
        record = load_editing_record(ORDERS, store)
        # client_name stays free text; known clients are only suggestions
        client_names = [c.name for c in get_store(CLIENTS).records]
        render_editor(
            ORDERS,
            store,
            record,
            describe=_describe,
            suggestions={"client_name": client_names},
        )
        return

    col1, col2 = st.columns([4, 1])
    with col1:
        st.header("\U0001F6D2 Orders")
        st.caption("Manage your store's orders")
    with col2:
        if st.button("➕ New order", width="stretch"):
            start_editing(ORDERS)
            st.rerun()

    col1, col2 = st.columns([3, 1])
    with col1:
        search = render_search(ORDERS, "Search orders by client or number...")
    with col2:
        st.metric("Total orders", len(store))

    sort = render_sort_controls(ORDERS, SORT_LABELS)
    rows = query(store.records, search, ORDERS.searchable, sort)
    if not rows:
        render_empty_state(bool(search), "orders")
        return

    widths = [1, 3, 2, 2, 2, 1, 1]
    header = st.columns(widths)
    for col, title in zip(header, ["#", "Client", "Date", "Total", "Status", "", ""]):
        col.markdown(f"**{title}**")
    for order in rows:
        cols = st.columns(widths)
        cols[0].write(f"#{order.id}")
        cols[1].write(order.client_name)
        cols[2].write(format_date(order.date))
        cols[3].write(format_currency(order.total))
        cols[4].markdown(status_badge(order.status), unsafe_allow_html=True)
        if cols[5].button("✏️", key=f"order_edit_{order.id}", help="Edit"):
            start_editing(ORDERS, order.id)
            st.rerun()
        if cols[6].button("\U0001F5D1️", key=f"order_del_{order.id}", help="Delete"):
            delete_with_notice(ORDERS, store, order.id, _describe)
