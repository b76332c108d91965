"""Human-readable rendering of a :class:`~brochurecost.models.Breakdown`."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from .models import Breakdown

logger = logging.getLogger(__name__)

CURRENCY = "€"

LABELS: Dict[str, Dict[str, str]] = {
    "de": {
        "title": "Kostenzusammenfassung",
        "category": "Kategorie",
        "count": "Anzahl (A4-Drucke)",
        "unit_price": "Einzelpreis",
        "total": "Gesamtpreis",
        "mono": "Schwarz-Weiß-Drucke",
        "color": "Farbdrucke",
        "binding": "Bindung",
        "total_cost": "Gesamtkosten",
        "per_copy": "je Exemplar",
        "pages": "Seiten je Broschüre",
        "copies": "Anzahl Broschüren",
        "color_pages": "Seitenzahlen farbe",
        "format": "Format",
    },
    "en": {
        "title": "Cost summary",
        "category": "Category",
        "count": "Count (A4 prints)",
        "unit_price": "Unit price",
        "total": "Total price",
        "mono": "Black & white prints",
        "color": "Color prints",
        "binding": "Binding",
        "total_cost": "Total cost",
        "per_copy": "per copy",
        "pages": "Pages per brochure",
        "copies": "Number of brochures",
        "color_pages": "Colored pages",
        "format": "Format",
    },
}

FRAME_COLUMNS = ["CATEGORY", "COUNT", "UNIT_PRICE", "TOTAL"]


@dataclass(frozen=True)
class CategoryRow:
    label: str
    display_count: str
    display_price: str
    total: float


def labels_for(language: str) -> Dict[str, str]:
    return LABELS.get(language, LABELS["de"])


def format_money(value: float) -> str:
    return f"{CURRENCY}{value:.2f}"


def format_category(surcharge: float, effective_count: int, unit_price: float) -> tuple[str, str]:
    """Return ``(count, price)`` display strings for one category.

    With a surcharge the first unit is shown separately from the rest, e.g.
    ``("1/3", "€0.45/€0.10")``.
    """

    if surcharge > 0 and effective_count > 0:
        return (
            f"1/{effective_count - 1}",
            f"{format_money(surcharge)}/{format_money(unit_price)}",
        )
    return f"{effective_count}", format_money(unit_price)


def category_rows(breakdown: Breakdown, language: str = "de") -> List[CategoryRow]:
    """Rows for every category that contributes to the total."""

    labels = labels_for(language)
    rows: List[CategoryRow] = []
    if breakdown.sw_total > 0:
        count, price = format_category(
            breakdown.sw_surcharge, breakdown.effective_sw_count, breakdown.sw_unit_price
        )
        rows.append(CategoryRow(labels["mono"], count, price, breakdown.sw_total))
    if breakdown.color_total > 0:
        count, price = format_category(
            breakdown.color_surcharge, breakdown.effective_color_count, breakdown.color_unit_price
        )
        rows.append(CategoryRow(labels["color"], count, price, breakdown.color_total))
    if breakdown.binding_cost > 0:
        binding_unit = breakdown.binding_cost / breakdown.binding_count
        rows.append(
            CategoryRow(
                labels["binding"],
                str(breakdown.binding_count),
                format_money(binding_unit),
                breakdown.binding_cost,
            )
        )
    return rows


def per_copy_cost(breakdown: Breakdown, brochure_count: int) -> Optional[float]:
    if brochure_count <= 1:
        return None
    return breakdown.total_cost / brochure_count


def breakdown_frame(breakdown: Breakdown, language: str = "de") -> pd.DataFrame:
    rows = category_rows(breakdown, language)
    return pd.DataFrame(
        [[row.label, row.display_count, row.display_price, row.total] for row in rows],
        columns=FRAME_COLUMNS,
    )


def total_line(breakdown: Breakdown, brochure_count: int, language: str = "de") -> str:
    labels = labels_for(language)
    line = f"{labels['total_cost']}: {format_money(breakdown.total_cost)}"
    per_copy = per_copy_cost(breakdown, brochure_count)
    if per_copy is not None:
        line += f" ({labels['per_copy']} {format_money(per_copy)})"
    return line


def make_summary_text(breakdown: Breakdown, brochure_count: int, language: str = "de") -> str:
    labels = labels_for(language)
    frame = breakdown_frame(breakdown, language)
    lines = [f"{labels['title']}:"]
    if not frame.empty:
        display = frame.assign(TOTAL=frame["TOTAL"].map(format_money)).rename(
            columns={
                "CATEGORY": labels["category"],
                "COUNT": labels["count"],
                "UNIT_PRICE": labels["unit_price"],
                "TOTAL": labels["total"],
            }
        )
        lines.append(display.to_string(index=False))
    lines.append(total_line(breakdown, brochure_count, language))
    return "\n".join(lines) + "\n"


def export_breakdown(breakdown: Breakdown, path: Path, language: str = "de") -> Path:
    """Write the breakdown to ``.csv``, ``.xlsx`` or ``.json`` depending on the suffix."""

    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        breakdown_frame(breakdown, language).to_csv(path, index=False)
    elif suffix == ".xlsx":
        fields = pd.DataFrame(list(asdict(breakdown).items()), columns=["FIELD", "VALUE"])
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            breakdown_frame(breakdown, language).to_excel(writer, sheet_name="Summary", index=False)
            fields.to_excel(writer, sheet_name="Breakdown", index=False)
    elif suffix == ".json":
        path.write_text(json.dumps(asdict(breakdown), indent=2), encoding="utf-8")
    else:
        raise ValueError(f"unsupported export format: {path.suffix or path.name}")
    logger.debug("Breakdown exported to %s", path)
    return path


__all__ = [
    "CategoryRow",
    "breakdown_frame",
    "category_rows",
    "export_breakdown",
    "format_category",
    "format_money",
    "labels_for",
    "make_summary_text",
    "per_copy_cost",
    "total_line",
]
