#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.perfectgrid.adapters.images import read_aspect_ratio
from app.perfectgrid.layout.justified import JustifiedItem, layout_justified
from app.perfectgrid.main import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Demo: lay out a folder of images as a justified grid")
    parser.add_argument("folder", help="Folder containing images")
    parser.add_argument("--width", type=float, default=1526.0, help="Container width")
    parser.add_argument("--min-height", type=float, default=200.0)
    parser.add_argument("--max-height", type=float, default=444.0)
    parser.add_argument("--min-item-width", type=float, default=175.0)
    parser.add_argument("--gap", type=float, default=4.0)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()

    configure_logging(args.log_level)

    exts = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp"}
    files = sorted(p for p in Path(args.folder).iterdir() if p.suffix.lower() in exts)
    items = [JustifiedItem(p.name, aspect_ratio=read_aspect_ratio(p)) for p in files]

    placements, total = layout_justified(
        container_width_px=args.width,
        items=items,
        min_height=args.min_height,
        max_height=args.max_height,
        min_item_width=args.min_item_width,
        gap=args.gap,
    )

    print(f"Items: {len(placements)}  total height: {total:.1f}px")
    for p in placements:
        print(f"- row {p.row}: {p.key} at ({p.x:.1f}, {p.y:.1f}) {p.width:.1f}x{p.height:.1f}")


if __name__ == "__main__":
    main()
