from __future__ import annotations

import math
from dataclasses import dataclass, replace

from PySide6.QtCore import QRect, QSize, Qt
from PySide6.QtWidgets import QLayout, QLayoutItem, QWidget

from app.adaptivegrid.grid import AdaptiveGrid
from app.adaptivegrid.layout.geometry import Alignment, ItemSize, Rect, Spacing


@dataclass(frozen=True)
class LayoutItemMeasure:
    """Adapts a QLayoutItem to the grid's ``measure()`` protocol."""

    item: QLayoutItem

    def measure(self) -> ItemSize:
        hint = self.item.sizeHint()
        return ItemSize(max(0, hint.width()), max(0, hint.height()))


class AdaptiveGridLayout(QLayout):
    """QLayout that arranges its items with ``AdaptiveGrid``.

    Column count follows the width the layout is given, so the layout
    reports height-for-width. Each widget keeps its natural size (clipped to
    its cell) and is aligned inside the cell; hidden widgets take no cell.
    """

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        alignment: Alignment = Alignment.CENTER,
        horizontal_spacing: float | None = None,
        vertical_spacing: float | None = None,
        equal_width: bool = False,
    ) -> None:
        super().__init__(parent)
        self._items: list[QLayoutItem] = []
        self._grid = AdaptiveGrid(
            alignment=alignment,
            horizontal_spacing=horizontal_spacing,
            vertical_spacing=vertical_spacing,
            equal_width=equal_width,
        )

    def equalWidth(self) -> bool:
        return self._grid.equal_width

    def setEqualWidth(self, enabled: bool) -> None:
        self._update_grid(equal_width=bool(enabled))

    def gridAlignment(self) -> Alignment:
        return self._grid.alignment

    def setGridAlignment(self, alignment: Alignment) -> None:
        self._update_grid(alignment=alignment)

    def horizontalSpacing(self) -> float:
        return self._grid.spacing.horizontal

    def setHorizontalSpacing(self, spacing: float | None) -> None:
        self._update_grid(horizontal_spacing=spacing)

    def verticalSpacing(self) -> float:
        return self._grid.spacing.vertical

    def setVerticalSpacing(self, spacing: float | None) -> None:
        self._update_grid(vertical_spacing=spacing)

    def _update_grid(self, **changes) -> None:
        grid = replace(self._grid, **changes)
        # Raises ValueError for negative spacing before Qt ever lays out with it.
        Spacing.resolve(grid.horizontal_spacing, grid.vertical_spacing)
        self._grid = grid
        self.invalidate()

    def addItem(self, item: QLayoutItem) -> None:  # type: ignore[override]
        self._items.append(item)

    def count(self) -> int:  # type: ignore[override]
        return len(self._items)

    def itemAt(self, index: int) -> QLayoutItem | None:  # type: ignore[override]
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def takeAt(self, index: int) -> QLayoutItem | None:  # type: ignore[override]
        if 0 <= index < len(self._items):
            return self._items.pop(index)
        return None

    def expandingDirections(self) -> Qt.Orientation:  # type: ignore[override]
        return Qt.Orientation(0)

    def hasHeightForWidth(self) -> bool:  # type: ignore[override]
        return True

    def heightForWidth(self, width: int) -> int:  # type: ignore[override]
        m = self.contentsMargins()
        inner = max(0, width - m.left() - m.right())
        total = self._grid.size_that_fits(self._measured_items(), inner)
        return int(math.ceil(total.height)) + m.top() + m.bottom()

    def sizeHint(self) -> QSize:  # type: ignore[override]
        # Preferred size puts every item in a single row at natural width.
        total = self._grid.size_that_fits(self._measured_items(), math.inf)

        m = self.contentsMargins()
        return QSize(
            int(math.ceil(total.width)) + m.left() + m.right(),
            int(math.ceil(total.height)) + m.top() + m.bottom(),
        )

    def minimumSize(self) -> QSize:  # type: ignore[override]
        # Narrowest sensible width is the widest single item; the height is
        # whatever that one-column width needs.
        items = self._measured_items()
        widest = max((item.measure().width for item in items), default=0.0)
        total = self._grid.size_that_fits(items, widest)

        m = self.contentsMargins()
        return QSize(
            int(math.ceil(widest)) + m.left() + m.right(),
            int(math.ceil(total.height)) + m.top() + m.bottom(),
        )

    def setGeometry(self, rect: QRect) -> None:  # type: ignore[override]
        super().setGeometry(rect)

        m = self.contentsMargins()
        inner = rect.adjusted(m.left(), m.top(), -m.right(), -m.bottom())
        items = self._measured_items()
        bounds = Rect(inner.x(), inner.y(), max(0, inner.width()), max(0, inner.height()))

        _, placements = self._grid.layout(items, bounds.width, bounds)
        for p in placements:
            natural = items[p.index].measure()
            width = min(natural.width, p.allocated_size.width)
            height = min(natural.height, p.allocated_size.height)
            items[p.index].item.setGeometry(
                QRect(
                    int(round(p.position.x)),
                    int(round(p.position.y)),
                    int(round(width)),
                    int(round(height)),
                )
            )

    def _measured_items(self) -> list[LayoutItemMeasure]:
        return [LayoutItemMeasure(item) for item in self._items if not item.isEmpty()]
