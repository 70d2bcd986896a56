"""Reports page: sales, products and categories, with exports."""
import logging
from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from core.constants import APP_TITLE
from core.entities import ORDERS, PRODUCTS, SALES
from core.exports import EXCEL_MIME, PDF_MIME, sheets_to_excel, sheets_to_pdf
from core.reports import (
    category_performance,
    latest_sale_day,
    order_status_summary,
    sales_summary,
    stock_by_category,
    top_products,
)
from core.services import get_store
from ui.components import format_currency

logger = logging.getLogger(__name__)


def render():
    """Render the reports page."""
    st.header("\U0001F4CA Reports")
    st.caption("Detailed analysis of your store's performance")

    products = get_store(PRODUCTS).records
    sales = get_store(SALES).records
    orders = get_store(ORDERS).records

    reference = latest_sale_day(sales) or datetime.now().date()
    reference = st.date_input("Up to", value=reference, key="reports_reference_day")
    summary = sales_summary(sales, reference)

    col1, col2, col3 = st.columns(3)
    for col, (title, key) in zip(
        (col1, col2, col3),
        (("Sales on the day", "today"), ("Sales in 7 days", "week"), ("Sales in 30 days", "month")),
    ):
        col.metric(title, summary[key]["sales"])
        col.caption(f"{format_currency(summary[key]['revenue'])} in revenue")

    st.markdown("---")
    col1, col2 = st.columns(2)

    best = top_products(sales)
    with col1:
        st.subheader("\U0001F3C6 Best selling products")
        if best.empty:
            st.info("No completed sales")
        else:
            fig = px.bar(
                best,
                x="name",
                y="revenue",
                labels={"name": "Product", "revenue": "Revenue"},
                color="sold",
                color_continuous_scale="Viridis",
            )
            st.plotly_chart(fig, width="stretch")

    categories = category_performance(sales, products)
    with col2:
        st.subheader("\U0001F4C2 Category performance")
        if categories.empty:
            st.info("No completed sales")
        else:
            for _, row in categories.iterrows():
                st.write(f"**{row['category']}** - {int(row['sales'])} units")
                st.progress(min(float(row["percentage"]) / 100, 1.0), text=f"{row['percentage']}%")

    st.subheader("\U0001F6D2 Orders by status")
    statuses = order_status_summary(orders)
    st.dataframe(
        statuses.rename(columns={"status": "Status", "count": "Orders", "total": "Total"}),
        width="stretch",
        hide_index=True,
    )

    # Export
    st.divider()
    st.subheader("Export")
    sheets = {
        "Sales summary": _summary_table(summary),
        "Top products": best,
        "Categories": categories,
        "Stock": stock_by_category(products),
        "Orders": statuses,
    }
    stamp = reference.isoformat()
    col1, col2 = st.columns(2)
    try:
        excel_bytes = sheets_to_excel(sheets)
        pdf_bytes = sheets_to_pdf(f"{APP_TITLE} report up to {stamp}", sheets)
    except Exception as e:
        logger.exception("Failed to build report exports")
        st.error(f"Could not build the export files: {e}")
        return
    col1.download_button(
        "Export to Excel",
        data=excel_bytes,
        file_name=f"report_{stamp}.xlsx",
        mime=EXCEL_MIME,
        width="stretch",
    )
    col2.download_button(
        "Export to PDF",
        data=pdf_bytes,
        file_name=f"report_{stamp}.pdf",
        mime=PDF_MIME,
        width="stretch",
    )


def _summary_table(summary):
    return pd.DataFrame(
        [
            {"period": period, "sales": values["sales"], "revenue": values["revenue"]}
            for period, values in summary.items()
        ]
    )
