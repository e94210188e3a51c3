from __future__ import annotations

import argparse
import logging
import math
from typing import List, Optional, Sequence

from app.adaptivegrid.grid import AdaptiveGrid, SizedItem
from app.adaptivegrid.layout.geometry import ALIGNMENT_NAMES, Alignment, ItemSize, Rect


def parse_item_size(text: str) -> ItemSize:
    """Parse ``WIDTHxHEIGHT`` (e.g. ``120x20``) into an ItemSize."""
    try:
        width, height = text.lower().split("x", 1)
        return ItemSize(float(width), float(height))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid item size {text!r}: expected WIDTHxHEIGHT") from exc


def parse_width(text: str) -> float:
    """Parse a finite proposed width."""
    try:
        width = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid width {text!r}") from exc
    if not math.isfinite(width):
        raise argparse.ArgumentTypeError(f"width must be finite, got {text!r}")
    return width


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AdaptiveGrid layout smoke runner")
    parser.add_argument("--width", type=parse_width, required=True, help="Proposed container width")
    parser.add_argument(
        "--item",
        dest="items",
        type=parse_item_size,
        action="append",
        default=[],
        help="Item natural size as WIDTHxHEIGHT (repeatable, in order)",
    )
    parser.add_argument("--equal-width", action="store_true", help="Stretch all columns to one width")
    parser.add_argument("--alignment", choices=ALIGNMENT_NAMES, default="center")
    parser.add_argument("--hspacing", type=float, default=None, help="Gap between columns (default 8)")
    parser.add_argument("--vspacing", type=float, default=None, help="Gap between rows (default 8)")
    parser.add_argument("--verbose", action="store_true", help="Log layout decisions")
    return parser


def run_layout(
    sizes: Sequence[ItemSize],
    width: float,
    *,
    equal_width: bool = False,
    alignment: str = "center",
    hspacing: Optional[float] = None,
    vspacing: Optional[float] = None,
) -> List[str]:
    if not math.isfinite(width):
        raise ValueError(f"width must be finite, got {width}")
    grid = AdaptiveGrid(
        alignment=Alignment.named(alignment),
        horizontal_spacing=hspacing,
        vertical_spacing=vspacing,
        equal_width=equal_width,
    )
    items = [SizedItem(f"item-{i}", size) for i, size in enumerate(sizes)]
    geometry = grid.geometry_for(items, width)
    # Place inside the proposed width so alignment is visible in the output.
    bounds = Rect(0.0, 0.0, max(width, geometry.total_size.width), geometry.total_size.height)
    placements = grid.place_items(items, bounds, geometry)

    widths = ", ".join(f"{w:.2f}" for w in geometry.column_widths)
    lines = [
        f"Mode: {geometry.mode.value}",
        f"Columns: {geometry.column_count} [{widths}]",
        f"Rows: {geometry.row_count} x {geometry.row_height:.2f}",
        f"Total: {geometry.total_size.width:.2f} x {geometry.total_size.height:.2f}",
    ]
    for p in placements:
        lines.append(
            f"- {items[p.index].key} @ ({p.position.x:.2f}, {p.position.y:.2f}) "
            f"cell {p.allocated_size.width:.2f} x {p.allocated_size.height:.2f}"
        )
    return lines


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        lines = run_layout(
            args.items,
            args.width,
            equal_width=args.equal_width,
            alignment=args.alignment,
            hspacing=args.hspacing,
            vspacing=args.vspacing,
        )
    except ValueError as exc:
        parser.error(str(exc))

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
