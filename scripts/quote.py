"""Helper script to price a brochure and write its quote PDF next to the summary."""
from __future__ import annotations

import argparse

from brochurecost.cli import main


def _parse_args(argv: list[str] | None = None) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(description="Price a brochure and emit a PDF quote")
    parser.add_argument("--quote-name", default="quote.pdf", help="File name of the PDF quote")
    return parser.parse_known_args(argv)


if __name__ == "__main__":  # pragma: no cover
    args, remaining = _parse_args()
    forward_args: list[str] = list(remaining)
    if "--pdf" not in forward_args:
        forward_args.extend(["--pdf", args.quote_name])
    raise SystemExit(main(forward_args))
