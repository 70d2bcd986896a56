"""Summaries shown on the dashboard and reports pages."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Optional, Sequence, Union

import pandas as pd

from core.constants import LOW_STOCK_THRESHOLD_DEFAULT, ORDER_STATUSES
from core.models import Order, Product, Sale
from core.query_view import to_frame


def _parse_day(value: Union[str, date]) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def inventory_summary(
    products: Sequence[Product], threshold: int = LOW_STOCK_THRESHOLD_DEFAULT
) -> Dict[str, float]:
    """Counts and retail value of the product catalog."""
    if not products:
        return {
            "total_products": 0,
            "total_items": 0,
            "stock_value": 0.0,
            "low_stock": 0,
            "out_of_stock": 0,
        }
    df = to_frame(products)
    return {
        "total_products": len(df),
        "total_items": int(df["stock"].sum()),
        "stock_value": round(float((df["stock"] * df["price"]).sum()), 2),
        "low_stock": int((df["stock"] < threshold).sum()),
        "out_of_stock": int((df["stock"] == 0).sum()),
    }


def low_stock_products(
    products: Sequence[Product], threshold: int = LOW_STOCK_THRESHOLD_DEFAULT
) -> pd.DataFrame:
    """Products below `threshold`, lowest stock first."""
    columns = ["name", "category", "stock", "price"]
    if not products:
        return pd.DataFrame(columns=columns)
    df = to_frame(products)
    low = df[df["stock"] < threshold]
    return low.sort_values(["stock", "name"], kind="mergesort")[columns].reset_index(drop=True)


def stock_by_category(products: Sequence[Product]) -> pd.DataFrame:
    columns = ["category", "stock", "value"]
    if not products:
        return pd.DataFrame(columns=columns)
    df = to_frame(products)
    df["value"] = df["stock"] * df["price"]
    grouped = df.groupby("category", as_index=False).agg(stock=("stock", "sum"), value=("value", "sum"))
    grouped["value"] = grouped["value"].round(2)
    return grouped.sort_values("stock", ascending=False, kind="mergesort").reset_index(drop=True)[columns]


def order_status_summary(orders: Sequence[Order]) -> pd.DataFrame:
    """Order count and total per status, in the fixed status order."""
    summary = pd.DataFrame({"status": ORDER_STATUSES})
    if not orders:
        summary["count"] = 0
        summary["total"] = 0.0
        return summary
    df = to_frame(orders)
    grouped = df.groupby("status", as_index=False).agg(count=("id", "count"), total=("total", "sum"))
    summary = summary.merge(grouped, how="left", on="status")
    summary["count"] = summary["count"].fillna(0).astype(int)
    summary["total"] = summary["total"].fillna(0.0).round(2)
    return summary


def completed_sales(sales: Sequence[Sale]) -> pd.DataFrame:
    if not sales:
        return pd.DataFrame(columns=["id", "customer", "total", "date", "time", "status"])
    df = to_frame(sales).drop(columns=["items"])
    return df[df["status"] == "completed"].reset_index(drop=True)


def latest_sale_day(sales: Sequence[Sale]) -> Optional[date]:
    if not sales:
        return None
    return max(_parse_day(s.date) for s in sales)


def sales_summary(sales: Sequence[Sale], reference: Union[str, date]) -> Dict[str, Dict[str, float]]:
    """Completed sales count and revenue for the reference day, 7 and 30 days."""
    ref = _parse_day(reference)
    df = completed_sales(sales)
    days = df["date"].map(_parse_day) if not df.empty else pd.Series([], dtype=object)
    windows = {"today": 1, "week": 7, "month": 30}
    summary = {}
    for name, span in windows.items():
        start = ref - timedelta(days=span - 1)
        if df.empty:
            summary[name] = {"sales": 0, "revenue": 0.0}
            continue
        in_window = (days >= start) & (days <= ref)
        summary[name] = {
            "sales": int(in_window.sum()),
            "revenue": round(float(df.loc[in_window, "total"].sum()), 2),
        }
    return summary


def _sale_items(sales: Sequence[Sale]) -> pd.DataFrame:
    rows = [
        {"name": item.name, "quantity": item.quantity, "revenue": item.quantity * item.price}
        for sale in sales
        if sale.status == "completed"
        for item in sale.items
    ]
    return pd.DataFrame(rows, columns=["name", "quantity", "revenue"])


def top_products(sales: Sequence[Sale], limit: int = 5) -> pd.DataFrame:
    """Best sellers by revenue across completed sales."""
    items = _sale_items(sales)
    if items.empty:
        return pd.DataFrame(columns=["name", "sold", "revenue"])
    grouped = items.groupby("name", as_index=False).agg(sold=("quantity", "sum"), revenue=("revenue", "sum"))
    grouped["revenue"] = grouped["revenue"].round(2)
    grouped = grouped.sort_values(["revenue", "name"], ascending=[False, True], kind="mergesort")
    return grouped.head(limit).reset_index(drop=True)


def category_performance(sales: Sequence[Sale], products: Sequence[Product]) -> pd.DataFrame:
    """Units sold per product category with each category's share in percent.

    Items whose product is no longer in the catalog count under "Outros".
    """
    items = _sale_items(sales)
    columns = ["category", "sales", "percentage"]
    if items.empty:
        return pd.DataFrame(columns=columns)
    category_of = {p.name: p.category for p in products}
    items["category"] = items["name"].map(category_of).fillna("Outros")
    grouped = items.groupby("category", as_index=False).agg(sales=("quantity", "sum"))
    total = grouped["sales"].sum()
    grouped["percentage"] = (grouped["sales"] / total * 100).round(1) if total else 0.0
    return grouped.sort_values(["sales", "category"], ascending=[False, True], kind="mergesort").reset_index(drop=True)[columns]
