"""Dashboard page with a store overview."""
import plotly.express as px
import streamlit as st

from core.entities import CLIENTS, ORDERS, PRODUCTS, SALES
from core.reports import (
    completed_sales,
    inventory_summary,
    latest_sale_day,
    low_stock_products,
    sales_summary,
    stock_by_category,
)
from core.services import get_store
from ui.components import format_currency

CHART_COLORS = [
    "#F54F52",
    "#93F03B",
    "#378AFF",
    "#FFEC21",
    "#9552EA",
    "#FFA32F",
    "#00CED1",
    "#FF1493",
]


def render():
    """Render the dashboard page."""
    st.header("\U0001F4C8 Dashboard")
    st.caption("Overview of your store")

    products = get_store(PRODUCTS).records
    sales = get_store(SALES).records
    inventory = inventory_summary(products)
    completed = completed_sales(sales)
    last_day = latest_sale_day(sales)
    day_stats = sales_summary(sales, last_day)["today"] if last_day else {"sales": 0, "revenue": 0.0}

    # Row 1: Sales and catalog
    col1, col2, col3 = st.columns(3)
    col1.metric("Total sales", format_currency(completed["total"].sum() if not completed.empty else 0))
    col2.metric("Total products", inventory["total_products"])
    col3.metric(
        "Sales on the latest day",
        day_stats["sales"],
        help=f"Completed sales on {last_day.isoformat()}" if last_day else None,
    )

    # Row 2: Stock, clients, orders
    col1, col2, col3 = st.columns(3)
    col1.metric("Low stock", inventory["low_stock"])
    col2.metric("Clients", len(get_store(CLIENTS)))
    col3.metric("Orders", len(get_store(ORDERS)))

    st.markdown("---")
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("\U0001F6D2 Recent sales")
        if completed.empty:
            st.info("No sales yet")
        else:
            recent = completed.sort_values(["date", "time"], ascending=False).head(4)
            for _, sale in recent.iterrows():
                left, right = st.columns([3, 1])
                left.write(f"**{sale['customer']}**")
                left.caption(sale["time"])
                right.write(format_currency(sale["total"]))

    with col2:
        st.subheader("⚠️ Low stock products")
        low = low_stock_products(products)
        if low.empty:
            st.info("No products below the stock threshold")
        else:
            for _, product in low.iterrows():
                left, right = st.columns([3, 1])
                left.write(product["name"])
                right.write(f"{int(product['stock'])} units")

    st.markdown("---")
    st.subheader("\U0001F4CA Stock by category")
    category_stock = stock_by_category(products)
    category_stock = category_stock[category_stock["stock"] > 0]
    if category_stock.empty:
        st.info("No stock data to display")
    else:
        fig = px.pie(
            category_stock,
            values="stock",
            names="category",
            color_discrete_sequence=CHART_COLORS,
        )
        st.plotly_chart(fig, width="stretch")
