"""Product catalog page."""
import streamlit as st

from core.constants import LOW_STOCK_THRESHOLD_DEFAULT
from core.entities import PRODUCTS
from core.query_view import query
from core.services import EDITING, get_mode, get_store, start_editing
from ui.components import (
    delete_with_notice,
    format_currency,
    load_editing_record,
    render_editor,
    render_empty_state,
    render_search,
    render_sort_controls,
)

SORT_LABELS = {"name": "Name", "price": "Price", "stock": "Stock", "category": "Category"}
CARDS_PER_ROW = 3


def _describe(product):
    return product.name


def _render_card(store, product):
    """One product card: price, category, stock with a low-stock warning."""
    low_stock = product.stock < LOW_STOCK_THRESHOLD_DEFAULT
    with st.container(border=True):
        top = st.columns([4, 1, 1])
        top[0].markdown(f"**\U0001F4E6 {product.name}**")
        if top[1].button("✏️", key=f"product_edit_{product.id}", help="Edit"):
            start_editing(PRODUCTS, product.id)
            st.rerun()
        if top[2].button("\U0001F5D1️", key=f"product_del_{product.id}", help="Delete"):
            delete_with_notice(PRODUCTS, store, product.id, _describe)

        mid = st.columns(2)
        mid[0].markdown(f"### {format_currency(product.price)}")
        mid[1].caption(product.category)
        stock_text = f"{product.stock} units"
        if low_stock:
            st.warning(f"Stock: {stock_text}", icon="⚠️")
        else:
            st.write(f"Stock: {stock_text}")
        if product.description:
            st.caption(product.description)


def render():
    """Render the products page."""
    store = get_store(PRODUCTS)

    if get_mode(PRODUCTS) == EDITING:
        record = load_editing_record(PRODUCTS, store)
        existing_categories = sorted({p.category for p in store.records if p.category}, key=str.casefold)
        render_editor(
            PRODUCTS,
            store,
            record,
            describe=_describe,
            suggestions={"category": existing_categories},
        )
        return

    col1, col2 = st.columns([4, 1])
    with col1:
        st.header("\U0001F4E6 Products")
        st.caption("Manage your store's stock")
    with col2:
        if st.button("➕ New product", width="stretch"):
            start_editing(PRODUCTS)
            st.rerun()

    col1, col2 = st.columns([3, 1])
    with col1:
        search = render_search(PRODUCTS, "Search products...")
    with col2:
        st.metric("Total products", len(store))

    sort = render_sort_controls(PRODUCTS, SORT_LABELS)
    rows = query(store.records, search, PRODUCTS.searchable, sort)
    if not rows:
        render_empty_state(bool(search), "products")
        return

    for start in range(0, len(rows), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, product in zip(cols, rows[start:start + CARDS_PER_ROW]):
            with col:
                _render_card(store, product)
