"""Excel and PDF exports of report tables."""
from __future__ import annotations

import logging
from io import BytesIO
from typing import Dict

import pandas as pd
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table as XlTable, TableStyleInfo as XlTableStyleInfo
from reportlab.lib import colors
from reportlab.lib.pagesizes import landscape, letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

logger = logging.getLogger(__name__)

EXCEL_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MIME = "application/pdf"


def _style_sheet(ws, df: pd.DataFrame, display_name: str) -> None:
    max_col = len(df.columns)
    if not max_col:
        return
    last_col = get_column_letter(max_col)
    # Excel tables need at least one data row
    max_row = max(len(df), 1) + 1
    table = XlTable(displayName=display_name, ref=f"A1:{last_col}{max_row}")
    table.tableStyleInfo = XlTableStyleInfo(
        name="TableStyleMedium9",
        showFirstColumn=False,
        showLastColumn=False,
        showRowStripes=True,
        showColumnStripes=False,
    )
    ws.add_table(table)
    for idx, col_name in enumerate(df.columns, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = max(12, len(str(col_name)) + 2)


def sheets_to_excel(sheets: Dict[str, pd.DataFrame]) -> bytes:
    """One styled worksheet per entry of `sheets` (sheet name -> table)."""
    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for idx, (sheet_name, df) in enumerate(sheets.items(), start=1):
            df.to_excel(writer, index=False, sheet_name=sheet_name)
            if not df.empty:
                _style_sheet(writer.sheets[sheet_name], df, f"Report{idx}")
    return buf.getvalue()


def sheets_to_pdf(title: str, sheets: Dict[str, pd.DataFrame]) -> bytes:
    """A landscape PDF with a heading and a grid table per section."""
    buf = BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=landscape(letter))
    styles = getSampleStyleSheet()
    story = [Paragraph(title, styles["Title"])]
    for section, df in sheets.items():
        story.append(Paragraph(section, styles["Heading2"]))
        if df.empty:
            story.append(Paragraph("No data", styles["Normal"]))
            story.append(Spacer(1, 12))
            continue
        data = [list(map(str, df.columns))] + df.fillna("").astype(str).values.tolist()
        table = Table(data)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                    ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                    ("FONTSIZE", (0, 0), (-1, -1), 8),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )
        story.append(table)
        story.append(Spacer(1, 12))
    doc.build(story)
    logger.info("Built PDF report '%s' with %d sections", title, len(sheets))
    return buf.getvalue()
