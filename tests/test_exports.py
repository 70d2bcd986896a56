"""Tests for Excel and PDF report exports."""

from io import BytesIO

import pandas as pd

from core.entities import seed_orders, seed_products
from core.exports import sheets_to_excel, sheets_to_pdf
from core.reports import order_status_summary, stock_by_category


def _sheets():
    return {
        "Stock": stock_by_category(seed_products()),
        "Orders": order_status_summary(seed_orders()),
        "Empty": pd.DataFrame(columns=["name", "sold"]),
    }


class TestExcel:
    def test_one_sheet_per_table(self):
        data = sheets_to_excel(_sheets())
        assert data[:2] == b"PK"
        book = pd.ExcelFile(BytesIO(data), engine="openpyxl")
        assert book.sheet_names == ["Stock", "Orders", "Empty"]

    def test_sheet_keeps_rows(self):
        data = sheets_to_excel(_sheets())
        stock = pd.read_excel(BytesIO(data), sheet_name="Stock", engine="openpyxl")
        assert stock["category"].tolist()[0] == "Padaria"


class TestPdf:
    def test_builds_a_pdf(self):
        data = sheets_to_pdf("Report", _sheets())
        assert data.startswith(b"%PDF")
