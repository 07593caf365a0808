"""Focus cursor over the window grid."""
from __future__ import annotations

from stakeout.layout import COLS, ROWS, HouseLayout, Point


class Focus:
    """Which window the camera points at. Clamped, never wraps."""

    def __init__(self) -> None:
        self.col = 0
        self.row = 0
        self.zoomed = False

    def reset(self) -> None:
        self.col = 0
        self.row = 0
        self.zoomed = False

    def move(self, dcol: int, drow: int) -> bool:
        """Shift by one cell per axis. Returns False if the move was clamped away."""
        col = min(max(self.col + dcol, 0), COLS - 1)
        row = min(max(self.row + drow, 0), ROWS - 1)
        changed = (col, row) != (self.col, self.row)
        self.col, self.row = col, row
        return changed

    def origin(self, layout: HouseLayout) -> Point:
        """Canvas centre of the focused window, used to centre the zoom."""
        return layout.window_center(self.row, self.col)
