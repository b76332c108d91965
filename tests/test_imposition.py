from __future__ import annotations

import pytest

from brochurecost.imposition import (
    count_impressions,
    iter_impressions,
    round_up_pages,
    sheet_count,
    sheet_slots,
)
from brochurecost.models import ImpressionCounts


@pytest.mark.parametrize(
    "pages, expected",
    [(1, 4), (4, 4), (5, 8), (8, 8), (9, 12), (16, 16), (17, 20)],
)
def test_round_up_pages(pages, expected):
    total = round_up_pages(pages)
    assert total == expected
    assert total % 4 == 0
    assert total >= pages


def test_sheet_count():
    assert sheet_count(1) == 1
    assert sheet_count(8) == 2
    assert sheet_count(13) == 4


def test_four_page_layout():
    assert sheet_slots(0, 4) == (4, 1, 2, 3)


def test_eight_page_layout():
    assert [sheet_slots(j, 8) for j in range(2)] == [(8, 1, 2, 7), (6, 3, 4, 5)]


def test_twelve_page_layout():
    assert [sheet_slots(j, 12) for j in range(3)] == [
        (12, 1, 2, 11),
        (10, 3, 4, 9),
        (8, 5, 6, 7),
    ]


def test_sixteen_page_layout_covers_every_page_once():
    slots = [page for pair in iter_impressions(16) for page in pair]
    assert sorted(slots) == list(range(1, 17))
    assert list(iter_impressions(16))[:2] == [(16, 1), (2, 15)]


def test_filler_only_impressions_are_not_counted():
    # 1 page rounds to 4; only the (4, 1) impression holds a real page.
    assert count_impressions(1, frozenset()) == ImpressionCounts(mono=1, color=0)
    # 5 pages round to 8; (4, 5) still holds page 5.
    assert count_impressions(5, frozenset()).total == 4
    # 9 pages round to 12; every impression still holds a page <= 9.
    assert count_impressions(9, frozenset()).total == 6


def test_single_colored_page_colors_whole_impression():
    counts = count_impressions(4, frozenset({1}))
    assert counts == ImpressionCounts(mono=1, color=1)


def test_color_on_filler_slot_is_ignored():
    # Page 8 is filler for a 6 page brochure; its impression (8, 1) stays mono.
    counts = count_impressions(6, frozenset({8}))
    assert counts.color == 0
    assert counts.mono == 4


def test_two_colored_pages_on_one_impression_count_once():
    counts = count_impressions(8, frozenset({1, 8}))
    assert counts == ImpressionCounts(mono=3, color=1)


def test_times_scales_both_categories():
    assert ImpressionCounts(mono=3, color=1).times(5) == ImpressionCounts(mono=15, color=5)
