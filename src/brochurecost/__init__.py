"""Cost calculator for saddle-stitched brochures."""

from .api import EstimateOptions, estimate
from .engine import compute_breakdown
from .imposition import count_impressions, round_up_pages, sheet_slots
from .models import Breakdown, ImpressionCounts, Tier
from .page_ranges import (
    InvalidCharactersError,
    InvalidRangeError,
    PageOutOfBoundsError,
    PageRangeError,
    parse_color_pages,
)
from .price_tables import DEFAULT_SCHEDULE, PriceSchedule, unit_price

__all__ = [
    "Breakdown",
    "DEFAULT_SCHEDULE",
    "EstimateOptions",
    "ImpressionCounts",
    "InvalidCharactersError",
    "InvalidRangeError",
    "PageOutOfBoundsError",
    "PageRangeError",
    "PriceSchedule",
    "Tier",
    "compute_breakdown",
    "count_impressions",
    "estimate",
    "parse_color_pages",
    "round_up_pages",
    "sheet_slots",
    "unit_price",
]
