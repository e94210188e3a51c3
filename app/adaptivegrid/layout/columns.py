"""Column-count and column-width helpers for the grid resolver."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple


def spanned_width(column_widths: Sequence[float], spacing: float) -> float:
    """Width of a row of columns: the columns plus the gaps between them."""

    if not column_widths:
        return 0.0
    return sum(column_widths) + spacing * (len(column_widths) - 1)


def equal_width_column_count(
    *,
    proposed_width: float,
    max_item_width: float,
    spacing: float,
) -> int:
    """Choose how many equal columns fit.

    We want the largest N such that:
    N*max + (N-1)*spacing <= proposed
    => N*(max+spacing) - spacing <= proposed
    => N <= (proposed+spacing)/(max+spacing)

    Always at least one column; a zero-width widest item also gets one.
    """

    if max_item_width <= 0:
        return 1
    n = math.floor((proposed_width + spacing) / (max_item_width + spacing))
    return int(max(1, n))


def stretched_column_width(*, proposed_width: float, columns: int, spacing: float) -> float:
    """Width of each of ``columns`` equal columns filling ``proposed_width``.

    Can exceed the widest item; columns absorb the whole proposal.
    """

    return (proposed_width - spacing * (columns - 1)) / columns


def wrap_column_widths(item_widths: Sequence[float], columns: int) -> List[float]:
    """Widest item per column when items wrap row-major into ``columns``."""

    widths = [0.0] * columns
    for index, width in enumerate(item_widths):
        col = index % columns
        widths[col] = max(widths[col], width)
    return widths


def best_fit_columns(
    item_widths: Sequence[float],
    *,
    proposed_width: float,
    spacing: float,
) -> Tuple[int, List[float]]:
    """Largest column count whose natural widths fit, searched upward from 1.

    The search stops at the first count that does not fit, so a larger count
    that would fit again after a failure is never tried. One column is the
    floor even when it overflows the proposal.

    Returns (column_count, natural_column_widths).
    """

    best_columns = 1
    best_widths = wrap_column_widths(item_widths, 1)

    for try_columns in range(1, len(item_widths) + 1):
        trial = wrap_column_widths(item_widths, try_columns)
        if spanned_width(trial, spacing) <= proposed_width:
            best_columns = try_columns
            best_widths = trial
        else:
            break

    return best_columns, best_widths


def stretch_proportionally(
    natural_widths: Sequence[float],
    *,
    proposed_width: float,
    spacing: float,
) -> List[float]:
    """Grow columns into leftover width in proportion to their natural widths.

    Columns are returned unchanged when there is no leftover, when every
    column is zero-width, or when the leftover is unbounded.
    """

    total_natural = sum(natural_widths)
    extra = proposed_width - total_natural - spacing * (len(natural_widths) - 1)

    if extra > 0 and total_natural > 0 and not math.isinf(extra):
        return [width + extra * (width / total_natural) for width in natural_widths]
    return list(natural_widths)
