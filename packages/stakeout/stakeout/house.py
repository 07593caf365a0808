"""House - window lighting grid and bedroom door states."""
from __future__ import annotations

import enum
from typing import Any

from stakeout.layout import COLS, ROWS

Cell = tuple[int, int]


class DoorState(enum.Enum):
    CLOSED = "closed"
    OPEN = "open"
    OPENING = "opening"
    CLOSING = "closing"


# Lights on when the show opens; indexed [row][col], row 0 is the attic.
INITIAL_LIGHTS: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0, 0),
    (0, 0, 1, 1, 0, 0),
    (1, 1, 1, 1, 0, 0),
    (1, 1, 1, 1, 1, 1),
)

# Logical rooms group two adjacent windows.
ROOMS: dict[int, tuple[Cell, Cell]] = {
    1: ((2, 0), (2, 1)),  # lower-left bedroom
    2: ((2, 4), (2, 5)),  # lower-right bedroom
    3: ((1, 0), (1, 1)),  # upper-left bedroom
    4: ((1, 4), (1, 5)),  # upper-right bedroom
}

DOORS: tuple[Cell, ...] = ((1, 1), (1, 4), (2, 1), (2, 4))


class House:
    def __init__(self) -> None:
        self._lights: list[list[bool]] = []
        self._doors: dict[Cell, DoorState] = {}
        self.reset()

    def reset(self) -> None:
        self._lights = [[bool(v) for v in row] for row in INITIAL_LIGHTS]
        self._doors = {cell: DoorState.CLOSED for cell in DOORS}

    # --- Lights ---

    def is_lit(self, row: int, col: int) -> bool:
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise ValueError(f"({row}, {col}) out of bounds for {ROWS}x{COLS} windows")
        return self._lights[row][col]

    def light_room(self, room: int, lit: bool) -> None:
        """Set both windows of ``room`` to ``lit``."""
        cells = ROOMS.get(room)
        if cells is None:
            raise KeyError(f"No room numbered {room}")
        for row, col in cells:
            self._lights[row][col] = bool(lit)

    def lights(self) -> tuple[tuple[bool, ...], ...]:
        return tuple(tuple(row) for row in self._lights)

    # --- Doors ---

    def door(self, cell: Cell) -> DoorState:
        try:
            return self._doors[cell]
        except KeyError:
            raise KeyError(f"No door at {cell}") from None

    def set_door(self, cell: Cell, state: DoorState) -> None:
        if cell not in self._doors:
            raise KeyError(f"No door at {cell}")
        self._doors[cell] = state

    def doors(self) -> dict[Cell, DoorState]:
        return dict(self._doors)

    def snapshot(self) -> dict[str, Any]:
        return {
            "lights": [[int(v) for v in row] for row in self._lights],
            "doors": [
                {"cell": list(cell), "state": state.value}
                for cell, state in self._doors.items()
            ],
        }
