from __future__ import annotations

import logging
from typing import AbstractSet

from .imposition import count_impressions
from .models import Breakdown
from .price_tables import DEFAULT_SCHEDULE, PriceSchedule, unit_price

logger = logging.getLogger(__name__)


def compute_breakdown(
    pages_per_brochure: int,
    color_pages: AbstractSet[int],
    brochure_count: int,
    is_a3: bool,
    schedule: PriceSchedule = DEFAULT_SCHEDULE,
) -> Breakdown:
    """Price a saddle-stitched brochure job.

    Small jobs pay a flat surcharge for their first impression: the first
    color impression when the job has any color below the surcharge
    threshold, otherwise the first mono impression of a small all-mono job.
    Expects ``pages_per_brochure >= 1`` and ``brochure_count >= 1``.
    """

    counts = count_impressions(pages_per_brochure, color_pages).times(brochure_count)
    total_bw = counts.mono
    total_color = counts.color

    factor = schedule.size_factor(is_a3)
    effective_bw = total_bw * factor
    effective_color = total_color * factor

    sw_unit = unit_price(schedule.mono_tiers, effective_bw) * factor
    color_unit = unit_price(schedule.color_tiers, effective_color) * factor

    sw_surcharge = 0.0
    color_surcharge = 0.0
    sw_cost = 0.0
    color_cost = 0.0

    if counts.total > 0:
        if total_color > 0 and effective_color < schedule.surcharge_threshold:
            color_surcharge = schedule.color_surcharge * factor
            color_cost = color_surcharge + (total_color - 1) * color_unit
            sw_cost = total_bw * sw_unit
        elif total_color == 0 and effective_bw < schedule.surcharge_threshold:
            sw_surcharge = schedule.mono_surcharge * factor
            sw_cost = sw_surcharge + (total_bw - 1) * sw_unit
        else:
            sw_cost = total_bw * sw_unit
            color_cost = total_color * color_unit

    if pages_per_brochure < schedule.binding_min_pages:
        binding_count = 0
        binding_cost = 0.0
    else:
        binding_count = brochure_count
        binding_cost = brochure_count * schedule.binding_unit_price

    total_cost = sw_cost + color_cost + binding_cost
    logger.debug(
        "Priced %d x %d pages (%s): %d mono / %d color impressions => %.2f",
        brochure_count,
        pages_per_brochure,
        "A3" if is_a3 else "A4",
        total_bw,
        total_color,
        total_cost,
    )

    return Breakdown(
        sw_count=total_bw,
        effective_sw_count=effective_bw,
        sw_unit_price=sw_unit,
        sw_surcharge=sw_surcharge,
        sw_total=sw_cost,
        color_count=total_color,
        effective_color_count=effective_color,
        color_unit_price=color_unit,
        color_surcharge=color_surcharge,
        color_total=color_cost,
        binding_count=binding_count,
        binding_cost=binding_cost,
        total_cost=total_cost,
    )


__all__ = ["compute_breakdown"]
