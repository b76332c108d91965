from __future__ import annotations

from datetime import date
from pathlib import Path

from brochurecost.engine import compute_breakdown
from brochurecost.quote_pdf import write_quote_pdf


def test_write_quote_pdf(tmp_path: Path):
    breakdown = compute_breakdown(16, frozenset({1, 2, 3}), 25, False)
    target = tmp_path / "quotes" / "quote.pdf"
    result = write_quote_pdf(
        breakdown,
        target,
        pages=16,
        brochure_count=25,
        is_a3=False,
        color_pages_text="1-3",
        language="de",
        issued=date(2024, 3, 1),
    )
    assert result == target
    data = target.read_bytes()
    assert data.startswith(b"%PDF")
    assert len(data) > 500


def test_write_quote_pdf_english_a3(tmp_path: Path):
    breakdown = compute_breakdown(8, frozenset(), 1, True)
    target = write_quote_pdf(
        breakdown, tmp_path / "q.pdf", pages=8, brochure_count=1, is_a3=True, language="en"
    )
    assert target.exists()
