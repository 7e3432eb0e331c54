from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional, Sequence

from app.perfectgrid.adapters.images import read_aspect_ratios
from app.perfectgrid.errors import GridError
from app.perfectgrid.layout.assemble import round_half_away
from app.perfectgrid.layout.justified import compute_heights, compute_rows

LOG_LEVEL_ENV = "PERFECTGRID_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """One-time host setup: route library logging to stderr.

    ``level`` falls back to $PERFECTGRID_LOG_LEVEL, then WARNING.
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or "warning").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=LOG_FORMAT,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute justified grid row heights")
    parser.add_argument("--full-width", type=float, required=True, help="Container width to fill")
    parser.add_argument("--min-height", type=float, default=200.0, help="Minimum row height")
    parser.add_argument("--max-height", type=float, default=500.0, help="Maximum row height")
    parser.add_argument("--min-item-width", type=float, default=175.0, help="Minimum rendered item width")
    parser.add_argument("--gap", type=float, default=4.0, help="Spacing between items of a row")
    parser.add_argument("--ratio", type=float, action="append", default=[], help="Item aspect ratio (repeatable)")
    parser.add_argument("--image", action="append", default=[], help="Image file to read the ratio from (repeatable)")
    parser.add_argument("--rounded", action="store_true", help="Round heights to whole pixels")
    parser.add_argument("--rows", action="store_true", help="Print [count, height] per row instead of per-item heights")
    parser.add_argument("--log-level", default=None, help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)")
    return parser


def run_cli(args: argparse.Namespace) -> str:
    """Run one layout from parsed arguments and return the JSON output."""
    ratios: List[float] = list(args.ratio) + read_aspect_ratios(args.image)
    geometry = dict(
        full_width=args.full_width,
        min_height=args.min_height,
        max_height=args.max_height,
        min_item_width=args.min_item_width,
        gap=args.gap,
    )

    if args.rows:
        rows = compute_rows(ratios, **geometry)
        fmt = round_half_away if args.rounded else float
        return json.dumps([[row.count, fmt(row.height)] for row in rows])

    return json.dumps(compute_heights(ratios, rounded=args.rounded, **geometry))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        output = run_cli(args)
    except GridError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
