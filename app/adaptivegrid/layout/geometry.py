"""Value types shared by the grid resolver and placer.

Everything here is immutable. A layout pass builds these once and hands them
from the size pass to the placement pass unchanged.

Coordinates use a top-left origin: y grows downward, so ``min_y`` is the top
edge of a rect.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

DEFAULT_SPACING = 8.0


def _check_extent(name: str, value: float) -> float:
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"{name} must be finite")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    return value


@dataclass(frozen=True)
class ItemSize:
    """Natural (unconstrained) size of one item."""

    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _check_extent("width", self.width))
        object.__setattr__(self, "height", _check_extent("height", self.height))


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


class LayoutMode(Enum):
    """Which branch of the size resolver runs."""

    ADAPTIVE = "adaptive"
    EQUAL_WIDTH = "equal_width"

    @classmethod
    def from_flag(cls, equal_width: bool) -> LayoutMode:
        return cls.EQUAL_WIDTH if equal_width else cls.ADAPTIVE


class HorizontalAlignment(Enum):
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class VerticalAlignment(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Alignment:
    """Where the grid sits in its bounds, and where each item sits in its cell.

    The nine presets follow the usual naming: ``Alignment.LEADING`` is leading
    horizontally and centered vertically, ``Alignment.TOP_LEADING`` pins both.
    """

    horizontal: HorizontalAlignment = HorizontalAlignment.CENTER
    vertical: VerticalAlignment = VerticalAlignment.CENTER

    @classmethod
    def named(cls, name: str) -> Alignment:
        """Look up a preset by name, e.g. ``"top_leading"`` or ``"center"``."""
        try:
            return _PRESETS[name.strip().lower().replace("-", "_")]
        except KeyError as exc:
            raise ValueError(f"Unknown alignment: {name}") from exc


_H = HorizontalAlignment
_V = VerticalAlignment

_PRESETS = {
    "top_leading": Alignment(_H.LEADING, _V.TOP),
    "top": Alignment(_H.CENTER, _V.TOP),
    "top_trailing": Alignment(_H.TRAILING, _V.TOP),
    "leading": Alignment(_H.LEADING, _V.CENTER),
    "center": Alignment(_H.CENTER, _V.CENTER),
    "trailing": Alignment(_H.TRAILING, _V.CENTER),
    "bottom_leading": Alignment(_H.LEADING, _V.BOTTOM),
    "bottom": Alignment(_H.CENTER, _V.BOTTOM),
    "bottom_trailing": Alignment(_H.TRAILING, _V.BOTTOM),
}

for _name, _value in _PRESETS.items():
    setattr(Alignment, _name.upper(), _value)

ALIGNMENT_NAMES = tuple(_PRESETS)


@dataclass(frozen=True)
class Spacing:
    """Gap between columns (horizontal) and between rows (vertical)."""

    horizontal: float = DEFAULT_SPACING
    vertical: float = DEFAULT_SPACING

    def __post_init__(self) -> None:
        object.__setattr__(self, "horizontal", _check_extent("horizontal spacing", self.horizontal))
        object.__setattr__(self, "vertical", _check_extent("vertical spacing", self.vertical))

    @classmethod
    def resolve(
        cls,
        horizontal: Optional[float] = None,
        vertical: Optional[float] = None,
    ) -> Spacing:
        """Fill in the default for any axis the caller left unset."""
        return cls(
            DEFAULT_SPACING if horizontal is None else horizontal,
            DEFAULT_SPACING if vertical is None else vertical,
        )


@dataclass(frozen=True)
class GridGeometry:
    """Result of the size pass; the only input the placer needs besides sizes.

    ``column_count`` is 0 only for an empty item list.
    """

    column_count: int
    column_widths: Tuple[float, ...]
    row_height: float
    total_size: Size
    item_count: int = 0
    mode: LayoutMode = LayoutMode.ADAPTIVE

    @classmethod
    def empty(cls, mode: LayoutMode = LayoutMode.ADAPTIVE) -> GridGeometry:
        return cls(
            column_count=0,
            column_widths=(),
            row_height=0.0,
            total_size=Size(0.0, 0.0),
            item_count=0,
            mode=mode,
        )

    @property
    def is_empty(self) -> bool:
        return self.column_count == 0 or self.item_count == 0

    @property
    def row_count(self) -> int:
        if self.column_count <= 0:
            return 0
        return (self.item_count + self.column_count - 1) // self.column_count


@dataclass(frozen=True)
class Placement:
    """Final position and proposed size for one item.

    ``position`` is where the item's natural-size frame starts after in-cell
    alignment. ``cell`` is the whole cell the item sits in, and
    ``allocated_size`` is its size, whatever the item's natural size is.
    """

    index: int
    position: Point
    cell: Rect
    column: int = 0
    row: int = 0

    @property
    def allocated_size(self) -> Size:
        return self.cell.size
