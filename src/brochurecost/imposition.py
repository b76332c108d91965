"""Saddle-stitch imposition: which logical pages land on which impression.

Every sheet is printed on both sides and folded once, so it carries four
logical pages as two impressions. Sheets nest inside each other, which gives
the classic reader-spread numbering: the outermost sheet holds the last and
the first page on its first impression.
"""

from __future__ import annotations

from typing import AbstractSet, Iterator, Tuple

from .models import ImpressionCounts

PAGES_PER_SHEET = 4

SlotPair = Tuple[int, int]


def round_up_pages(pages: int) -> int:
    """Round ``pages`` up to the next multiple of four."""

    return -(-pages // PAGES_PER_SHEET) * PAGES_PER_SHEET


def sheet_count(pages: int) -> int:
    return round_up_pages(pages) // PAGES_PER_SHEET


def sheet_slots(sheet_index: int, total_pages: int) -> Tuple[int, int, int, int]:
    """Return the four page slots of sheet ``sheet_index``.

    The first two slots form impression 1, the last two impression 2.
    ``total_pages`` must already be a multiple of four.
    """

    j = 2 * sheet_index
    return (total_pages - j, 1 + j, 2 + j, total_pages - (j + 1))


def iter_impressions(total_pages: int) -> Iterator[SlotPair]:
    for sheet_index in range(total_pages // PAGES_PER_SHEET):
        a, b, c, d = sheet_slots(sheet_index, total_pages)
        yield (a, b)
        yield (c, d)


def count_impressions(pages_per_brochure: int, color_pages: AbstractSet[int]) -> ImpressionCounts:
    """Classify the impressions of one brochure as mono or color.

    Slots beyond ``pages_per_brochure`` are blank filler from rounding up.
    An impression holding only filler is not printed; an impression with a
    colored page on either slot is printed in color as a whole.
    """

    mono = 0
    color = 0
    for pair in iter_impressions(round_up_pages(pages_per_brochure)):
        printed = [page for page in pair if page <= pages_per_brochure]
        if not printed:
            continue
        if any(page in color_pages for page in printed):
            color += 1
        else:
            mono += 1
    return ImpressionCounts(mono=mono, color=color)


__all__ = [
    "PAGES_PER_SHEET",
    "count_impressions",
    "iter_impressions",
    "round_up_pages",
    "sheet_count",
    "sheet_slots",
]
