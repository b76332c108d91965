"""Static price data and volume tier lookup.

Prices are euro per A4 impression. A3 jobs fold each sheet to two A4 pages,
so every price and surcharge is scaled by :attr:`PriceSchedule.a3_factor`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from .models import Tier

logger = logging.getLogger(__name__)

TierTable = Tuple[Tier, ...]

MONO_TIERS: TierTable = (
    Tier(1000, 0.04),
    Tier(500, 0.05),
    Tier(250, 0.06),
    Tier(100, 0.07),
    Tier(50, 0.09),
    Tier(1, 0.10),
)

COLOR_TIERS: TierTable = (
    Tier(5000, 0.38),
    Tier(1000, 0.18),
    Tier(500, 0.28),
    Tier(250, 0.35),
    Tier(100, 0.43),
    Tier(50, 0.69),
    Tier(1, 0.84),
)

TIER_COLUMNS = ("min_quantity", "unit_price")


class TierTableError(ValueError):
    """Raised when a tier table cannot be used for lookups."""


def unit_price(tiers: Sequence[Tier], quantity: int) -> float:
    """Return the price of the first tier whose threshold ``quantity`` reaches.

    ``tiers`` is ordered by descending ``min_quantity``; quantities below every
    threshold (including zero) fall back to the last tier.
    """

    for tier in tiers:
        if quantity >= tier.min_quantity:
            return tier.unit_price
    return tiers[-1].unit_price


def validate_tiers(tiers: Sequence[Tier]) -> TierTable:
    if not tiers:
        raise TierTableError("tier table is empty")
    minimums = np.array([tier.min_quantity for tier in tiers], dtype=np.int64)
    prices = np.array([tier.unit_price for tier in tiers], dtype=float)
    if minimums.size > 1 and not np.all(np.diff(minimums) < 0):
        raise TierTableError("tier thresholds must be strictly descending")
    if minimums[-1] != 1:
        raise TierTableError("last tier must start at quantity 1")
    if np.any(prices < 0) or np.any(np.isnan(prices)):
        raise TierTableError("tier prices must be non-negative numbers")
    return tuple(tiers)


def _read_table(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix in {".xlsx", ".xlsm"}:
        return pd.read_excel(path, engine="openpyxl")
    if suffix == ".csv":
        return pd.read_csv(path)
    raise TierTableError(f"unsupported tier table format: {path.name}")


def load_tier_table(path: Path) -> TierTable:
    """Load a ``min_quantity,unit_price`` table from CSV or XLSX."""

    if not path.exists():
        raise TierTableError(f"tier table not found: {path}")
    frame = _read_table(path)
    frame.columns = [str(col).strip().lower() for col in frame.columns]
    missing = [col for col in TIER_COLUMNS if col not in frame.columns]
    if missing:
        raise TierTableError(f"{path.name} is missing columns: {', '.join(missing)}")

    frame = frame[list(TIER_COLUMNS)].copy()
    frame["min_quantity"] = pd.to_numeric(frame["min_quantity"], errors="coerce")
    frame["unit_price"] = pd.to_numeric(frame["unit_price"], errors="coerce")
    if frame.isna().any().any():
        raise TierTableError(f"{path.name} contains non-numeric tier values")

    frame = frame.sort_values("min_quantity", ascending=False)
    tiers = [
        Tier(min_quantity=int(row.min_quantity), unit_price=float(row.unit_price))
        for row in frame.itertuples(index=False)
    ]
    logger.debug("Loaded %d tiers from %s", len(tiers), path)
    return validate_tiers(tiers)


@dataclass(frozen=True)
class PriceSchedule:
    """Everything the engine needs to price a job, at A4 base rates."""

    mono_tiers: TierTable = MONO_TIERS
    color_tiers: TierTable = COLOR_TIERS
    mono_surcharge: float = 0.45
    color_surcharge: float = 1.20
    surcharge_threshold: int = 50
    binding_unit_price: float = 0.18
    binding_min_pages: int = 5
    a3_factor: int = 2

    def size_factor(self, is_a3: bool) -> int:
        return self.a3_factor if is_a3 else 1


DEFAULT_SCHEDULE = PriceSchedule()


__all__ = [
    "COLOR_TIERS",
    "DEFAULT_SCHEDULE",
    "MONO_TIERS",
    "PriceSchedule",
    "TierTableError",
    "load_tier_table",
    "unit_price",
    "validate_tiers",
]
