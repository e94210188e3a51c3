"""Two-pass grid over measurable items.

Hosts adapt their own widget list to ``Measurable`` (anything with a
``measure()`` returning its natural size) and drive the size pass and the
placement pass through ``AdaptiveGrid``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Protocol, Sequence, Tuple

from app.adaptivegrid.layout.geometry import (
    Alignment,
    GridGeometry,
    ItemSize,
    LayoutMode,
    Placement,
    Rect,
    Size,
    Spacing,
)
from app.adaptivegrid.layout.placer import place
from app.adaptivegrid.layout.resolver import resolve


class Measurable(Protocol):
    def measure(self) -> ItemSize:
        """Natural size with no width or height constraint."""
        ...


@dataclass(frozen=True)
class SizedItem:
    """An item whose natural size is known up front."""

    key: str
    size: ItemSize

    def measure(self) -> ItemSize:
        return self.size


@dataclass(frozen=True)
class AdaptiveGrid:
    """Grid with equal row heights and a column count chosen per pass.

    By default each column is as wide as its widest item and leftover width
    is shared out in proportion. ``with_equal_width()`` switches to columns
    of one stretched width.

    Spacing left as ``None`` falls back to 8 on that axis.
    """

    alignment: Alignment = Alignment.CENTER
    horizontal_spacing: Optional[float] = None
    vertical_spacing: Optional[float] = None
    equal_width: bool = False

    def with_equal_width(self, enabled: bool = True) -> AdaptiveGrid:
        return replace(self, equal_width=enabled)

    @property
    def mode(self) -> LayoutMode:
        return LayoutMode.from_flag(self.equal_width)

    @property
    def spacing(self) -> Spacing:
        return Spacing.resolve(self.horizontal_spacing, self.vertical_spacing)

    def measure(self, items: Sequence[Measurable]) -> List[ItemSize]:
        return [item.measure() for item in items]

    def geometry_for(self, items: Sequence[Measurable], proposed_width: Optional[float]) -> GridGeometry:
        return resolve(self.measure(items), proposed_width, self.mode, self.spacing)

    def size_that_fits(self, items: Sequence[Measurable], proposed_width: Optional[float]) -> Size:
        """Size pass: total size the grid needs for ``proposed_width``."""
        return self.geometry_for(items, proposed_width).total_size

    def place_items(
        self,
        items: Sequence[Measurable],
        bounds: Rect,
        geometry: Optional[GridGeometry] = None,
    ) -> List[Placement]:
        """Placement pass.

        Pass the geometry from the size pass only if the items and the
        proposal are unchanged since; otherwise it is re-resolved against
        ``bounds.width``.
        """
        sizes = self.measure(items)
        if geometry is None:
            geometry = resolve(sizes, bounds.width, self.mode, self.spacing)
        return place(geometry, bounds, sizes, self.alignment, self.spacing)

    def layout(
        self,
        items: Sequence[Measurable],
        proposed_width: Optional[float],
        bounds: Optional[Rect] = None,
    ) -> Tuple[GridGeometry, List[Placement]]:
        """Run both passes; ``bounds`` defaults to the grid's own size at (0, 0)."""
        sizes = self.measure(items)
        geometry = resolve(sizes, proposed_width, self.mode, self.spacing)
        if bounds is None:
            bounds = Rect(0.0, 0.0, geometry.total_size.width, geometry.total_size.height)
        return geometry, place(geometry, bounds, sizes, self.alignment, self.spacing)
