"""Size pass: turn natural item sizes and a proposed width into grid geometry.

This module is intentionally UI-framework agnostic. It never raises for
degenerate input: an empty list yields the zero geometry and content wider
than the proposal simply reports a total size larger than the proposal.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from app.adaptivegrid.layout.columns import (
    best_fit_columns,
    equal_width_column_count,
    spanned_width,
    stretch_proportionally,
    stretched_column_width,
)
from app.adaptivegrid.layout.geometry import (
    GridGeometry,
    ItemSize,
    LayoutMode,
    Size,
    Spacing,
)

logger = logging.getLogger(__name__)


def _usable_proposal(proposed_width: Optional[float]) -> float:
    # An unspecified proposal measures like a zero-width one.
    if proposed_width is None:
        return 0.0
    proposed_width = float(proposed_width)
    if math.isnan(proposed_width) or proposed_width < 0:
        return 0.0
    return proposed_width


def _equal_width_columns(widths: Sequence[float], proposed_width: float, spacing: float):
    max_width = max(widths)

    if math.isinf(proposed_width):
        # Nothing finite to stretch into: one natural-width column per item.
        return len(widths), [max_width] * len(widths)

    columns = equal_width_column_count(
        proposed_width=proposed_width,
        max_item_width=max_width,
        spacing=spacing,
    )
    column_width = stretched_column_width(
        proposed_width=proposed_width,
        columns=columns,
        spacing=spacing,
    )
    return columns, [column_width] * columns


def _adaptive_columns(widths: Sequence[float], proposed_width: float, spacing: float):
    columns, natural = best_fit_columns(
        widths,
        proposed_width=proposed_width,
        spacing=spacing,
    )
    return columns, stretch_proportionally(
        natural,
        proposed_width=proposed_width,
        spacing=spacing,
    )


def resolve(
    item_sizes: Sequence[ItemSize],
    proposed_width: Optional[float],
    mode: LayoutMode = LayoutMode.ADAPTIVE,
    spacing: Optional[Spacing] = None,
) -> GridGeometry:
    """Compute column count, column widths, row height and total size.

    Adaptive mode searches upward for the largest column count whose natural
    widths fit and then spreads leftover width proportionally. Equal-width
    mode fits as many columns of the widest item as possible and stretches
    them evenly across the whole proposal.

    Returns a fresh ``GridGeometry``; the same inputs always give an equal
    result.
    """

    if not item_sizes:
        return GridGeometry.empty(mode)

    spacing = spacing or Spacing()
    proposal = _usable_proposal(proposed_width)
    h_spacing = spacing.horizontal
    v_spacing = spacing.vertical

    widths = [size.width for size in item_sizes]
    row_height = max(size.height for size in item_sizes)

    if mode is LayoutMode.EQUAL_WIDTH:
        column_count, column_widths = _equal_width_columns(widths, proposal, h_spacing)
    else:
        column_count, column_widths = _adaptive_columns(widths, proposal, h_spacing)

    item_count = len(item_sizes)
    row_count = (item_count + column_count - 1) // column_count
    total_size = Size(
        width=spanned_width(column_widths, h_spacing),
        height=row_height * row_count + v_spacing * (row_count - 1),
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Resolved %d items (%s) at width %.2f: %d columns x %d rows, total %.2fx%.2f",
            item_count,
            mode.value,
            proposal,
            column_count,
            row_count,
            total_size.width,
            total_size.height,
        )

    return GridGeometry(
        column_count=column_count,
        column_widths=tuple(column_widths),
        row_height=row_height,
        total_size=total_size,
        item_count=item_count,
        mode=mode,
    )
