"""HouseLayout - pixel geometry of the window grid."""
from __future__ import annotations

from dataclasses import dataclass

ROWS = 4
COLS = 6

Point = tuple[float, float]


@dataclass(frozen=True)
class Mark:
    """A spot in the house, authored relative to a window centre.

    ``dx`` and ``dy`` are in window widths, ``drop`` in window heights
    (positive is down).
    """

    row: int
    col: int
    dx: float = 0.0
    dy: float = 0.0
    drop: float = 0.0


class HouseLayout:
    """Facade geometry derived from the canvas size.

    The house spans 60% of the canvas width and 70% of its height, with its
    upper-left corner at (20%, 25%). Windows are a twelfth of the house wide
    and a sixth tall, centred on odd twelfths horizontally and odd eighths
    vertically.
    """

    def __init__(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas must be positive, got {width}x{height}")
        self._width = float(width)
        self._height = float(height)
        self._house_w = self._width * 0.6
        self._house_h = self._height * 0.7
        self._offset = (self._width * 0.2, self._height * 0.25)
        self._window_w = self._house_w / 12
        self._window_h = self._house_h / 6

    @property
    def canvas(self) -> tuple[float, float]:
        return (self._width, self._height)

    @property
    def house_size(self) -> tuple[float, float]:
        return (self._house_w, self._house_h)

    @property
    def offset(self) -> Point:
        return self._offset

    @property
    def window_size(self) -> tuple[float, float]:
        return (self._window_w, self._window_h)

    def window_center(self, row: int, col: int) -> Point:
        """Canvas-space centre of window (row, col)."""
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise ValueError(f"({row}, {col}) out of bounds for {ROWS}x{COLS} windows")
        ox, oy = self._offset
        return (
            ox + self._house_w * (1 + 2 * col) / 12,
            oy + self._house_h * (1 + 2 * row) / 8,
        )

    def resolve(self, mark: Mark) -> Point:
        x, y = self.window_center(mark.row, mark.col)
        return (
            x + mark.dx * self._window_w,
            y + mark.dy * self._window_w + mark.drop * self._window_h,
        )
