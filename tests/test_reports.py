"""Tests for dashboard and report summaries."""

from datetime import date

import pytest

from core.entities import seed_orders, seed_products, seed_sales
from core.models import Sale, SaleItem
from core.reports import (
    category_performance,
    completed_sales,
    inventory_summary,
    latest_sale_day,
    low_stock_products,
    order_status_summary,
    sales_summary,
    stock_by_category,
    top_products,
)


class TestInventory:
    def test_summary_of_seed_catalog(self):
        summary = inventory_summary(seed_products())
        assert summary["total_products"] == 6
        assert summary["total_items"] == 225
        assert summary["stock_value"] == pytest.approx(898.5)
        assert summary["low_stock"] == 1
        assert summary["out_of_stock"] == 0

    def test_summary_of_empty_catalog(self):
        assert inventory_summary([])["total_products"] == 0

    def test_low_stock_products(self):
        low = low_stock_products(seed_products())
        assert low["name"].tolist() == ["Açúcar Crystal 1kg"]

    def test_low_stock_threshold_is_exclusive(self):
        low = low_stock_products(seed_products(), threshold=15)
        assert low["name"].tolist() == ["Açúcar Crystal 1kg"]

    def test_stock_by_category(self):
        grouped = stock_by_category(seed_products())
        assert grouped.iloc[0]["category"] == "Padaria"
        alimentos = grouped[grouped["category"] == "Alimentos"].iloc[0]
        assert alimentos["stock"] == 55


class TestOrders:
    def test_status_summary_lists_every_status(self):
        summary = order_status_summary(seed_orders())
        assert summary["status"].tolist() == ["pending", "processing", "completed", "cancelled"]
        assert summary["count"].tolist() == [1, 1, 1, 0]
        assert summary.loc[summary["status"] == "processing", "total"].iloc[0] == pytest.approx(142.3)

    def test_status_summary_without_orders(self):
        assert order_status_summary([])["count"].sum() == 0


class TestSales:
    def test_cancelled_sales_are_excluded(self):
        assert completed_sales(seed_sales())["id"].tolist() == [1, 2, 3]

    def test_latest_sale_day(self):
        assert latest_sale_day(seed_sales()) == date(2024, 6, 25)
        assert latest_sale_day([]) is None

    def test_summary_windows(self):
        summary = sales_summary(seed_sales(), "2024-06-25")
        assert summary["today"] == {"sales": 3, "revenue": pytest.approx(68.78)}
        assert summary["week"]["sales"] == 3
        assert summary["month"]["sales"] == 3

    def test_summary_before_any_sale(self):
        summary = sales_summary(seed_sales(), date(2024, 6, 1))
        assert summary["today"]["sales"] == 0
        assert summary["month"]["revenue"] == 0.0

    def test_week_window_edges(self):
        sales = [
            Sale(1, "A", [], 10.0, "2024-06-19", "10:00", "completed"),
            Sale(2, "B", [], 20.0, "2024-06-18", "10:00", "completed"),
        ]
        summary = sales_summary(sales, "2024-06-25")
        assert summary["week"] == {"sales": 1, "revenue": 10.0}
        assert summary["month"]["sales"] == 2

    def test_top_products_by_revenue(self):
        best = top_products(seed_sales())
        assert len(best) == 5
        assert best.iloc[0]["name"] == "Refrigerante Cola 2L"
        assert best.iloc[0]["sold"] == 3
        assert best.iloc[0]["revenue"] == pytest.approx(26.7)

    def test_top_products_without_sales(self):
        assert top_products([]).empty

    def test_category_performance(self):
        perf = category_performance(seed_sales(), seed_products())
        assert perf["category"].tolist() == ["Padaria", "Alimentos", "Bebidas", "Limpeza", "Higiene"]
        assert perf.iloc[0]["sales"] == 10
        assert perf.iloc[0]["percentage"] == pytest.approx(52.6)

    def test_unknown_products_count_as_other(self):
        sales = [Sale(1, "A", [SaleItem("Gone", 2, 1.0)], 2.0, "2024-06-25", "10:00", "completed")]
        perf = category_performance(sales, seed_products())
        assert perf["category"].tolist() == ["Outros"]
        assert perf.iloc[0]["percentage"] == 100.0
