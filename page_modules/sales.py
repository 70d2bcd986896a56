"""Sales history page (read-only)."""
import streamlit as st

from core.entities import SALES
from core.query_view import query
from core.reports import latest_sale_day, sales_summary
from core.services import get_store
from ui.components import format_currency, format_date, render_empty_state, render_search, status_badge


def render():
    """Render the sales history page."""
    st.header("\U0001F4B5 Sales")
    st.caption("Sales history of your store")
    store = get_store(SALES)

    reference = latest_sale_day(store.records)
    if reference is not None:
        reference = st.date_input("Reference day", value=reference, key="sales_reference_day")
        today = sales_summary(store.records, reference)["today"]
        col1, col2, col3 = st.columns(3)
        col1.metric("Sales on the day", today["sales"], help="Completed transactions")
        col2.metric("Revenue on the day", format_currency(today["revenue"]))
        col3.metric("Total sales", len(store))

    search = render_search(SALES, "Search sales by customer or number...")
    rows = query(store.records, search, SALES.searchable, SALES.default_sort)
    if not rows:
        render_empty_state(bool(search), "sales")
        return

    for sale in rows:
        with st.container(border=True):
            col1, col2 = st.columns([3, 2])
            with col1:
                st.markdown(f"**Sale #{sale.id}**")
                st.caption(sale.customer)
            with col2:
                st.markdown(f"### {format_currency(sale.total)}")
                st.markdown(
                    f"{format_date(sale.date)} at {sale.time} &nbsp; {status_badge(sale.status)}",
                    unsafe_allow_html=True,
                )
            st.markdown("**Items:**")
            for item in sale.items:
                item_cols = st.columns([3, 2])
                item_cols[0].write(item.name)
                item_cols[1].write(f"{item.quantity}x {format_currency(item.price)}")
