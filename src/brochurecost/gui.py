"""Desktop calculator window for brochure pricing.

Every edit to the inputs re-runs the page parser and the cost engine, so the
summary table always reflects the current form. Parser errors replace the
table with the error message.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

import tkinter as tk
from tkinter import ttk

from .config import load_config as load_runtime_config
from .engine import compute_breakdown
from .models import Breakdown
from .page_ranges import PageRangeError, parse_color_pages
from .price_tables import DEFAULT_SCHEDULE, PriceSchedule
from .reporting import CategoryRow, category_rows, labels_for, total_line

_ALLOWED_PAGE_CHARS = set("0123456789,- \t")


@dataclass
class CalculatorResult:
    """Outcome of one recalculation, ready for display."""

    level: str
    message: str
    rows: List[CategoryRow] = field(default_factory=list)
    breakdown: Optional[Breakdown] = None


def _parse_count(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def filter_page_text(text: str) -> str:
    """Drop characters the page field does not accept."""

    return "".join(char for char in text if char in _ALLOWED_PAGE_CHARS)


def calculate(
    pages_text: str,
    color_pages_text: str,
    copies_text: str,
    is_a3: bool,
    *,
    language: str = "de",
    schedule: PriceSchedule = DEFAULT_SCHEDULE,
) -> CalculatorResult:
    pages = _parse_count(pages_text)
    copies = _parse_count(copies_text)
    labels = labels_for(language)
    if pages < 1:
        return CalculatorResult("error", f"{labels['pages']} >= 1")
    if copies < 1:
        return CalculatorResult("error", f"{labels['copies']} >= 1")
    try:
        color_pages = parse_color_pages(color_pages_text, pages)
    except PageRangeError as exc:
        return CalculatorResult("error", str(exc))
    breakdown = compute_breakdown(pages, color_pages, copies, is_a3, schedule=schedule)
    return CalculatorResult(
        "info",
        total_line(breakdown, copies, language),
        rows=category_rows(breakdown, language),
        breakdown=breakdown,
    )


class CalculatorApp:
    """Tk front end around :func:`calculate`."""

    def __init__(self) -> None:
        config = load_runtime_config(os.environ, None)
        self._language = config.language
        self._schedule = config.price_schedule()
        self._labels = labels_for(self._language)

        self.root = tk.Tk()
        self.root.title(self._labels["title"])
        self.root.resizable(False, False)

        self.copies_var = tk.StringVar(value="1")
        self.pages_var = tk.StringVar(value="8")
        self.color_pages_var = tk.StringVar(value="")
        self.a3_var = tk.BooleanVar(value=False)
        self.message_var = tk.StringVar(value="")

        self._table: Optional[ttk.Treeview] = None
        self._message_label: Optional[ttk.Label] = None
        self._build_ui()

        for var in (self.copies_var, self.pages_var, self.color_pages_var, self.a3_var):
            var.trace_add("write", self._on_inputs_changed)
        self._recalculate()

    def _build_ui(self) -> None:
        labels = self._labels
        frame = ttk.Frame(self.root, padding=16)
        frame.grid(row=0, column=0, sticky="nsew")

        ttk.Label(frame, text=f"{labels['copies']}:").grid(row=0, column=0, sticky="w")
        ttk.Spinbox(frame, from_=1, to=100000, textvariable=self.copies_var, width=8).grid(
            row=0, column=1, sticky="w", padx=(4, 16)
        )
        ttk.Checkbutton(frame, text="A3-A4", variable=self.a3_var).grid(row=0, column=2, sticky="w")

        ttk.Label(frame, text=f"{labels['pages']}:").grid(row=1, column=0, sticky="w", pady=(8, 0))
        ttk.Spinbox(frame, from_=1, to=10000, textvariable=self.pages_var, width=8).grid(
            row=1, column=1, sticky="w", padx=(4, 16), pady=(8, 0)
        )
        ttk.Label(frame, text=f"{labels['color_pages']} (1, 3-5, 7):").grid(
            row=1, column=2, sticky="w", pady=(8, 0)
        )
        ttk.Entry(frame, textvariable=self.color_pages_var, width=24).grid(
            row=1, column=3, sticky="w", pady=(8, 0)
        )

        columns = ("category", "count", "unit_price", "total")
        table = ttk.Treeview(frame, columns=columns, show="headings", height=3)
        for key in columns:
            table.heading(key, text=labels[key])
            table.column(key, width=150 if key == "category" else 110, anchor="w")
        table.grid(row=2, column=0, columnspan=4, sticky="ew", pady=(16, 8))
        self._table = table

        self._message_label = ttk.Label(frame, textvariable=self.message_var, font=("TkDefaultFont", 10, "bold"))
        self._message_label.grid(row=3, column=0, columnspan=4, sticky="w")

    def _on_inputs_changed(self, *_: object) -> None:
        filtered = filter_page_text(self.color_pages_var.get())
        if filtered != self.color_pages_var.get():
            # Setting the variable re-enters this callback with clean text.
            self.color_pages_var.set(filtered)
            return
        self._recalculate()

    def _recalculate(self) -> None:
        result = calculate(
            self.pages_var.get(),
            self.color_pages_var.get(),
            self.copies_var.get(),
            bool(self.a3_var.get()),
            language=self._language,
            schedule=self._schedule,
        )
        self._show_result(result)

    def _show_result(self, result: CalculatorResult) -> None:
        if self._table is not None:
            self._table.delete(*self._table.get_children())
            for row in result.rows:
                self._table.insert(
                    "", "end", values=(row.label, row.display_count, row.display_price, f"€{row.total:.2f}")
                )
        if self._message_label is not None:
            self._message_label.configure(foreground="#B00020" if result.level == "error" else "")
        self.message_var.set(result.message)

    def run(self) -> None:  # pragma: no cover - UI loop
        self.root.mainloop()


def main() -> None:  # pragma: no cover - entry point
    app = CalculatorApp()
    app.run()


if __name__ == "__main__":  # pragma: no cover - script mode
    main()
