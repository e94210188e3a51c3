"""Placement pass: position every item from a resolved grid geometry.

Two offsets are combined per item. The grid as a whole is anchored inside
the bounds by the alignment, then each item is aligned inside its own cell
using its natural size. Both steps use the same alignment.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from app.adaptivegrid.layout.geometry import (
    Alignment,
    GridGeometry,
    HorizontalAlignment,
    ItemSize,
    Placement,
    Point,
    Rect,
    Size,
    Spacing,
    VerticalAlignment,
)

logger = logging.getLogger(__name__)


def _align_x(min_x: float, max_x: float, width: float, horizontal: HorizontalAlignment) -> float:
    if horizontal is HorizontalAlignment.LEADING:
        return min_x
    if horizontal is HorizontalAlignment.TRAILING:
        return max_x - width
    return min_x + ((max_x - min_x) - width) / 2


def _align_y(min_y: float, max_y: float, height: float, vertical: VerticalAlignment) -> float:
    if vertical is VerticalAlignment.TOP:
        return min_y
    if vertical is VerticalAlignment.BOTTOM:
        return max_y - height
    return min_y + ((max_y - min_y) - height) / 2


def grid_origin(bounds: Rect, total_size: Size, alignment: Alignment) -> Point:
    """Top-left corner of a grid of ``total_size`` aligned inside ``bounds``.

    The grid may be larger than the bounds, in which case the origin lands
    outside them (before ``min_x`` for trailing, etc.).
    """

    return Point(
        _align_x(bounds.min_x, bounds.max_x, total_size.width, alignment.horizontal),
        _align_y(bounds.min_y, bounds.max_y, total_size.height, alignment.vertical),
    )


def align_in_cell(cell: Rect, size: ItemSize, alignment: Alignment) -> Point:
    """Position of an item of natural ``size`` aligned inside ``cell``."""

    return Point(
        _align_x(cell.min_x, cell.max_x, size.width, alignment.horizontal),
        _align_y(cell.min_y, cell.max_y, size.height, alignment.vertical),
    )


def place(
    geometry: GridGeometry,
    bounds: Rect,
    item_sizes: Sequence[ItemSize],
    alignment: Alignment = Alignment.CENTER,
    spacing: Optional[Spacing] = None,
) -> List[Placement]:
    """Compute one placement per item, in input order.

    ``geometry`` must come from resolving these same ``item_sizes`` with the
    same spacing. An empty or inconsistent geometry places nothing, and an
    item whose column falls outside ``geometry.column_widths`` is skipped.
    """

    if not item_sizes or not geometry.column_widths or geometry.column_count <= 0:
        return []

    spacing = spacing or Spacing()
    h_spacing = spacing.horizontal
    v_spacing = spacing.vertical

    origin = grid_origin(bounds, geometry.total_size, alignment)

    # Left edge of each column relative to the grid origin.
    column_offsets: List[float] = []
    running = 0.0
    for col, width in enumerate(geometry.column_widths):
        column_offsets.append(running + h_spacing * col)
        running += width

    placements: List[Placement] = []
    for index, size in enumerate(item_sizes):
        col = index % geometry.column_count
        row = index // geometry.column_count

        if col >= len(geometry.column_widths):
            logger.debug(
                "Skipping item %d: column %d outside %d resolved widths",
                index,
                col,
                len(geometry.column_widths),
            )
            continue

        column_width = geometry.column_widths[col]
        cell = Rect(
            origin.x + column_offsets[col],
            origin.y + (geometry.row_height + v_spacing) * row,
            column_width,
            geometry.row_height,
        )

        placements.append(
            Placement(
                index=index,
                position=align_in_cell(cell, size, alignment),
                cell=cell,
                column=col,
                row=row,
            )
        )

    return placements
