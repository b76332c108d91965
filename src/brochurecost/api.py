from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .engine import compute_breakdown
from .models import Breakdown
from .page_ranges import parse_color_pages
from .price_tables import DEFAULT_SCHEDULE, PriceSchedule


@dataclass
class EstimateOptions:
    pages: int
    color_pages: str = ""
    brochure_count: int = 1
    is_a3: bool = False
    schedule: Optional[PriceSchedule] = None


def estimate(options: EstimateOptions) -> Breakdown:
    """Programmatic interface: parse the colored pages, then price the job.

    Page specification errors propagate as
    :class:`~brochurecost.page_ranges.PageRangeError`.
    """

    color_pages = parse_color_pages(options.color_pages, options.pages)
    return compute_breakdown(
        options.pages,
        color_pages,
        options.brochure_count,
        options.is_a3,
        schedule=options.schedule or DEFAULT_SCHEDULE,
    )
