from __future__ import annotations

import pytest

pytest.importorskip("tkinter")

from brochurecost.gui import calculate, filter_page_text


def test_calculate_returns_rows_and_total():
    result = calculate("8", "", "1", False, language="en")
    assert result.level == "info"
    assert [row.label for row in result.rows] == ["Black & white prints", "Binding"]
    assert result.message == "Total cost: €0.93"


def test_calculate_shows_per_copy_cost():
    result = calculate("8", "1", "4", False, language="de")
    assert "je Exemplar" in result.message


def test_calculate_reports_parser_errors():
    result = calculate("8", "7-19", "1", False, language="en")
    assert result.level == "error"
    assert result.rows == []
    assert "9" in result.message


@pytest.mark.parametrize("pages, copies", [("", "1"), ("0", "1"), ("8", "abc")])
def test_calculate_requires_positive_counts(pages, copies):
    result = calculate(pages, "", copies, False)
    assert result.level == "error"
    assert result.breakdown is None


def test_filter_page_text_strips_disallowed_characters():
    assert filter_page_text("1a, 3-5;7") == "1, 3-57"
