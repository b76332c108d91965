from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

PageSet = FrozenSet[int]


@dataclass(frozen=True)
class Tier:
    """Volume price point: applies from ``min_quantity`` impressions upward."""

    min_quantity: int
    unit_price: float


@dataclass(frozen=True)
class ImpressionCounts:
    """Billable impressions of a single brochure, split by ink."""

    mono: int = 0
    color: int = 0

    @property
    def total(self) -> int:
        return self.mono + self.color

    def times(self, copies: int) -> "ImpressionCounts":
        return ImpressionCounts(mono=self.mono * copies, color=self.color * copies)


@dataclass(frozen=True)
class Breakdown:
    """Normalized cost breakdown for a complete brochure job."""

    sw_count: int
    effective_sw_count: int
    sw_unit_price: float
    sw_surcharge: float
    sw_total: float
    color_count: int
    effective_color_count: int
    color_unit_price: float
    color_surcharge: float
    color_total: float
    binding_count: int
    binding_cost: float
    total_cost: float
