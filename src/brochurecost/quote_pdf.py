"""One-page PDF quote for a priced brochure job."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from .models import Breakdown
from .reporting import category_rows, format_money, labels_for, total_line

logger = logging.getLogger(__name__)

MARGIN = 56
COLUMN_OFFSETS = (0, 200, 320, 420)


def write_quote_pdf(
    breakdown: Breakdown,
    path: Path,
    *,
    pages: int,
    brochure_count: int,
    is_a3: bool,
    color_pages_text: str = "",
    language: str = "de",
    issued: Optional[date] = None,
) -> Path:
    labels = labels_for(language)
    issued = issued or date.today()
    path.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(str(path), pagesize=A4)
    page_width, page_height = A4
    y = page_height - MARGIN

    c.setFont("Helvetica-Bold", 16)
    c.drawString(MARGIN, y, labels["title"])
    c.setFont("Helvetica", 9)
    c.drawRightString(page_width - MARGIN, y, issued.isoformat())
    y -= 32

    c.setFont("Helvetica", 10)
    inputs = [
        (labels["copies"], str(brochure_count)),
        (labels["pages"], str(pages)),
        (labels["color_pages"], color_pages_text.strip() or "-"),
        (labels["format"], "A3 / A4" if is_a3 else "A4"),
    ]
    for label, value in inputs:
        c.drawString(MARGIN, y, f"{label}:")
        c.drawString(MARGIN + COLUMN_OFFSETS[1], y, value)
        y -= 14
    y -= 18

    headers = (labels["category"], labels["count"], labels["unit_price"], labels["total"])
    c.setFont("Helvetica-Bold", 10)
    for offset, header in zip(COLUMN_OFFSETS, headers):
        c.drawString(MARGIN + offset, y, header)
    y -= 6
    c.line(MARGIN, y, page_width - MARGIN, y)
    y -= 14

    c.setFont("Helvetica", 10)
    for row in category_rows(breakdown, language):
        cells = (row.label, row.display_count, row.display_price, format_money(row.total))
        for offset, cell in zip(COLUMN_OFFSETS, cells):
            c.drawString(MARGIN + offset, y, cell)
        y -= 14

    y -= 10
    c.setFont("Helvetica-Bold", 11)
    c.drawString(MARGIN, y, total_line(breakdown, brochure_count, language))
    c.showPage()
    c.save()
    logger.debug("Quote PDF written to %s", path)
    return path


__all__ = ["write_quote_pdf"]
