import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import SUPPORTED_LANGUAGES, Config
from .config import load_config as load_runtime_config
from .engine import compute_breakdown
from .page_ranges import PageRangeError, parse_color_pages
from .price_tables import TierTableError
from .quote_pdf import write_quote_pdf
from .reporting import export_breakdown, make_summary_text

BASE_DIR = Path(__file__).resolve().parents[2]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INPUT_ERROR = 2


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _resolve_output(value: Optional[str], output_dir: Path) -> Optional[Path]:
    if not value:
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = output_dir / path
    return path.resolve()


def run(
    runtime_config: Config,
    *,
    pages: int,
    color_pages: str = "",
    brochure_count: int = 1,
    is_a3: bool = False,
    export: Optional[str] = None,
    pdf: Optional[str] = None,
    as_json: bool = False,
) -> int:
    try:
        schedule = runtime_config.price_schedule()
    except TierTableError as exc:
        logger.error("Unable to load tier table: %s", exc)
        return EXIT_INPUT_ERROR

    try:
        parsed_pages = parse_color_pages(color_pages, pages)
    except PageRangeError as exc:
        logger.error("%s", exc)
        return EXIT_INPUT_ERROR
    logger.debug("Colored pages: %s", sorted(parsed_pages) or "none")

    breakdown = compute_breakdown(pages, parsed_pages, brochure_count, is_a3, schedule=schedule)
    language = runtime_config.language

    if as_json:
        sys.stdout.write(json.dumps(asdict(breakdown), indent=2) + "\n")
    else:
        logger.info("%s", make_summary_text(breakdown, brochure_count, language))

    export_path = _resolve_output(export, runtime_config.output_dir)
    if export_path is not None:
        try:
            export_breakdown(breakdown, export_path, language)
        except ValueError as exc:
            logger.error("Unable to export breakdown: %s", exc)
            return EXIT_INPUT_ERROR
        logger.info("Breakdown written to %s", export_path)

    pdf_path = _resolve_output(pdf, runtime_config.output_dir)
    if pdf_path is not None:
        write_quote_pdf(
            breakdown,
            pdf_path,
            pages=pages,
            brochure_count=brochure_count,
            is_a3=is_a3,
            color_pages_text=color_pages,
            language=language,
        )
        logger.info("Quote written to %s", pdf_path)
    return EXIT_OK


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate the printing cost of a saddle-stitched brochure")
    parser.add_argument("--pages", type=_positive_int, default=8, help="Pages per brochure (default: 8)")
    parser.add_argument("--color-pages", default="", help='Colored pages, e.g. "1, 3-5, 7"')
    parser.add_argument("--copies", type=_positive_int, default=1, help="Number of brochures (default: 1)")
    parser.add_argument("--a3", action="store_true", help="Print on A3 sheets folded to A4")
    parser.add_argument("--mono-tiers", help="CSV/XLSX tier table overriding black & white prices")
    parser.add_argument("--color-tiers", help="CSV/XLSX tier table overriding color prices")
    parser.add_argument("--language", choices=SUPPORTED_LANGUAGES, help="Label language for reports")
    parser.add_argument("--output-dir", help="Directory for relative export paths")
    parser.add_argument("--export", help="Write the breakdown to a .csv, .xlsx or .json file")
    parser.add_argument("--pdf", help="Write a one-page PDF quote")
    parser.add_argument("--json", action="store_true", help="Print the raw breakdown as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Increase logging verbosity")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(BASE_DIR / ".env")
    args = parse_args(argv)
    runtime_cfg = load_runtime_config(os.environ, args)
    log_level = logging.DEBUG if runtime_cfg.verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(message)s")
    try:
        return run(
            runtime_cfg,
            pages=args.pages,
            color_pages=args.color_pages,
            brochure_count=args.copies,
            is_a3=args.a3,
            export=args.export,
            pdf=args.pdf,
            as_json=args.json,
        )
    except Exception:  # pragma: no cover - defensive
        logger.exception("Fatal error while calculating the brochure cost")
        return EXIT_FAILURE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
