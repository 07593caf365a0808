"""The show: every cue of the choreography, in authoring order.

Marks are window-relative (see ``stakeout.layout.Mark``); velocities are in
canvas pixels per frame. Stair climbs never satisfy the arrival test on
their own, so each one is closed by a snap onto the landing.
"""
from __future__ import annotations

from stakeout.cues import Animate, Cue, Light, Move, Snap, Sound, Turn, at
from stakeout.house import DoorState
from stakeout.layout import Mark

HALF = 0.5
THIRD = 1 / 3
TWO_THIRDS = 1 / 1.5
TWO_FIFTHS = 1 / 2.5
FOUR_FIFTHS = 1 / 1.25
NUDGE = 0.3125  # a 64th of the canvas width

LEFT = 1
RIGHT = -1

OPENING = DoorState.OPENING
OPEN = DoorState.OPEN
CLOSING = DoorState.CLOSING
CLOSED = DoorState.CLOSED

# Landings used by every stair climb.
GROUND_FOOT = Mark(3, 2, dx=-TWO_THIRDS)
FIRST_LANDING = Mark(2, 2, dx=TWO_THIRDS)
FIRST_LANDING_STEP = Mark(2, 2, dx=TWO_THIRDS, dy=TWO_THIRDS)
FIRST_STAIRWELL = Mark(2, 2, dx=HALF)
SECOND_LANDING = Mark(1, 2, dx=-TWO_THIRDS)
SECOND_TOP = Mark(1, 2, dx=-FOUR_FIFTHS)
SECOND_TOP_STEP = Mark(1, 2, dx=-FOUR_FIFTHS, drop=THIRD)
PARLOR_STAIRS = Mark(3, 1, dx=1, drop=TWO_FIFTHS)

BEAT_SHEET: tuple[Cue, ...] = (
    # Dinner is being laid.
    Move(at(0, 1), "maroon", Mark(3, 4), (-1, 0)),
    Turn(at(0, 3), "lilac", LEFT),
    Turn(at(0, 4), "maroon", RIGHT),
    Move(at(0, 4), "maroon", Mark(3, 5), (1, 0)),
    Turn(at(0, 5), "puce", LEFT),
    Move(at(0, 5), "puce", Mark(3, 1, dx=HALF), (-1, 0)),
    Turn(at(0, 8), "lilac", RIGHT),
    Turn(at(0, 9), "cobalt", RIGHT),
    Move(at(0, 12), "drab", Mark(3, 4, dx=-NUDGE), (1, 0)),
    Turn(at(0, 14), "lilac", LEFT),
    Turn(at(0, 17), "maroon", LEFT),
    Move(at(0, 17), "maroon", Mark(3, 4, dx=NUDGE), (-1, 0)),
    Turn(at(0, 22, 30), "drab", LEFT),
    Move(at(0, 23), "drab", Mark(3, 3), (-1, 0)),
    Move(at(0, 23), "maroon", Mark(3, 2, dx=-HALF), (-1, 0)),
    # Maroon goes upstairs; the bedrooms wake up.
    Move(at(0, 29), "maroon", FIRST_LANDING, (1, -1)),
    Snap(at(0, 31), "maroon", FIRST_LANDING),
    Move(at(0, 31, 30), "maroon", Mark(2, 2), (-1, 0)),
    Turn(at(0, 34), "cyan", RIGHT),
    Animate(at(0, 34, 15), (2, 1), OPENING),
    Animate(at(0, 34, 45), (2, 1), OPEN),
    Move(at(0, 35), "drab", Mark(3, 2), (-1, 0)),
    Turn(at(0, 36), "maroon", RIGHT),
    Move(at(0, 36), "maroon", Mark(2, 3, dx=TWO_THIRDS), (1, 0)),
    Turn(at(0, 36, 15), "cyan", LEFT),
    Turn(at(0, 37), "cyan", RIGHT),
    Move(at(0, 37), "cyan", FIRST_LANDING, (1, 0)),
    Animate(at(0, 38, 15), (2, 4), OPENING),
    Animate(at(0, 38, 45), (2, 4), OPEN),
    Turn(at(0, 39), "lilac", LEFT),
    Light(at(0, 40), 2, True),
    Turn(at(0, 41), "maroon", LEFT),
    Move(at(0, 41), "maroon", FIRST_STAIRWELL, (-1, 0)),
    Turn(at(0, 42), "lilac", RIGHT),
    Snap(at(0, 42), "cyan", FIRST_LANDING_STEP),
    Turn(at(0, 42), "cyan", LEFT),
    Move(at(0, 42), "cyan", GROUND_FOOT, (-1, 1)),
    Move(at(0, 43, 30), "lilac", Mark(2, 1, dx=TWO_THIRDS), (1, 0)),
    Move(at(0, 43, 30), "maroon", SECOND_LANDING, (-1, -1)),
    Snap(at(0, 43, 30), "cyan", GROUND_FOOT),
    Move(at(0, 43, 30), "cyan", Mark(3, 0), (-1, 0)),
    Snap(at(0, 45), "maroon", SECOND_LANDING),
    Light(at(0, 45, 30), 1, False),
    Animate(at(0, 45, 30), (2, 1), CLOSING),
    Animate(at(0, 45, 30), (2, 1), CLOSED),
    Animate(at(0, 46, 15), (1, 1), OPENING),
    Move(at(0, 46, 30), "lilac", FIRST_LANDING, (1, 0)),
    Animate(at(0, 46, 45), (1, 1), OPEN),
    Light(at(0, 47), 3, True),
    Turn(at(0, 47, 30), "maroon", RIGHT),
    Move(at(0, 47, 30), "maroon", Mark(1, 4, dx=-TWO_THIRDS), (1, 0)),
    Turn(at(0, 47, 45), "cyan", RIGHT),
    Move(at(0, 49), "cobalt", GROUND_FOOT, (1, 0)),
    Snap(at(0, 50), "lilac", FIRST_LANDING_STEP),
    Turn(at(0, 50), "lilac", LEFT),
    Move(at(0, 50), "lilac", GROUND_FOOT, (-1, 1)),
    Snap(at(0, 50, 30), "cobalt", GROUND_FOOT),
    Move(at(0, 50, 30), "cobalt", FIRST_LANDING, (1, -1)),
    Snap(at(0, 51, 30), "lilac", GROUND_FOOT),
    Turn(at(0, 51, 30), "lilac", RIGHT),
    Snap(at(0, 52), "cobalt", FIRST_LANDING),
    Move(at(0, 52), "cobalt", Mark(2, 3), (1, 0)),
    Animate(at(0, 52), (1, 4), OPENING),
    Animate(at(0, 52, 30), (1, 4), OPEN),
    Light(at(0, 53), 4, True),
    Move(at(0, 53, 30), "lilac", Mark(3, 4), (1, 0)),
    Turn(at(0, 54), "cobalt", LEFT),
    Move(at(0, 54, 30), "cyan", Mark(3, 3), (1, 0)),
    Turn(at(0, 54, 30), "cobalt", RIGHT),
    Turn(at(0, 54, 30), "maroon", LEFT),
    Move(at(0, 54, 30), "maroon", SECOND_TOP, (-1, 0)),
    Move(at(0, 55), "puce", Mark(3, 3, dx=TWO_FIFTHS), (1, 0)),
    Turn(at(0, 55), "puce", RIGHT),
    Move(at(0, 55), "cobalt", Mark(2, 4), (1, 0)),
    Turn(at(0, 56), "cobalt", LEFT),
    Animate(at(0, 56, 30), (2, 4), CLOSING),
    Animate(at(0, 57), (2, 4), CLOSED),
    # Maroon comes down; Cobalt goes up.
    Turn(at(1, 0), "maroon", RIGHT),
    Turn(at(1, 0), "lilac", LEFT),
    Snap(at(1, 0), "maroon", SECOND_TOP_STEP),
    Move(at(1, 0), "maroon", FIRST_LANDING, (1, 1)),
    Snap(at(1, 2), "maroon", Mark(2, 2, dx=TWO_THIRDS, drop=TWO_THIRDS)),
    Turn(at(1, 2), "maroon", LEFT),
    Move(at(1, 2), "maroon", GROUND_FOOT, (-1, 1)),
    Animate(at(1, 2, 45), (2, 4), OPENING),
    Animate(at(1, 3, 15), (2, 4), OPEN),
    Move(at(1, 3, 15), "cobalt", FIRST_STAIRWELL, (-2, 0)),
    Snap(at(1, 4), "maroon", PARLOR_STAIRS),
    Turn(at(1, 4), "maroon", RIGHT),
    Move(at(1, 4, 30), "drab", Mark(3, 1, dx=1), (-1, 0)),
    Move(at(1, 5), "maroon", FIRST_LANDING, (1, -1)),
    Move(at(1, 5, 15), "cobalt", SECOND_LANDING, (-2, -2)),
    Snap(at(1, 5, 30), "drab", PARLOR_STAIRS),
    Turn(at(1, 5, 30), "drab", RIGHT),
    Snap(at(1, 6), "cobalt", SECOND_LANDING),
    Turn(at(1, 6, 30), "cobalt", RIGHT),
    Move(at(1, 6, 30), "cobalt", Mark(1, 4), (2, 0)),
    Move(at(1, 6, 30), "drab", FIRST_LANDING, (1, -1)),
    Snap(at(1, 7), "maroon", FIRST_LANDING),
    Move(at(1, 7), "maroon", Mark(2, 3, dx=THIRD), (1, 0)),
    Snap(at(1, 8, 30), "drab", FIRST_LANDING),
    Move(at(1, 8, 30), "drab", Mark(2, 4), (1, 0)),
    Turn(at(1, 9), "maroon", LEFT),
    Turn(at(1, 10), "cobalt", LEFT),
    Turn(at(1, 11), "maroon", RIGHT),
    Turn(at(1, 13), "drab", LEFT),
    # The shot, and everyone looking about.
    Sound(at(1, 14, 30), "gunshot"),
    Move(at(1, 15, 30), "cobalt", Mark(1, 2, dx=-1), (-2, 0)),
    Turn(at(1, 15, 20), "cyan", LEFT),
    Turn(at(1, 15, 30), "maroon", LEFT),
    Turn(at(1, 15, 30), "puce", LEFT),
    Turn(at(1, 15, 37), "drab", RIGHT),
    Turn(at(1, 15, 45), "maroon", RIGHT),
    Turn(at(1, 15, 45), "puce", RIGHT),
    Turn(at(1, 16), "puce", LEFT),
    Turn(at(1, 16, 15), "puce", RIGHT),
    Turn(at(1, 16, 30), "cyan", RIGHT),
    Turn(at(1, 16, 30), "maroon", LEFT),
    Turn(at(1, 16, 30), "puce", LEFT),
    Turn(at(1, 16, 45), "puce", RIGHT),
    Turn(at(1, 16, 45), "drab", LEFT),
    Turn(at(1, 17), "maroon", RIGHT),
    Turn(at(1, 17), "puce", LEFT),
    Turn(at(1, 17, 15), "puce", RIGHT),
    Turn(at(1, 17, 30), "puce", LEFT),
    Turn(at(1, 17, 45), "puce", RIGHT),
    Turn(at(1, 18), "puce", LEFT),
    Turn(at(1, 18), "cyan", LEFT),
    Animate(at(1, 18, 30), (1, 1), OPENING),
    Animate(at(1, 19), (1, 1), OPEN),
    Move(at(1, 19), "cobalt", Mark(1, 1), (-2, 0)),
    Move(at(1, 19), "cyan", PARLOR_STAIRS, (-2, 0)),
    Move(at(1, 19, 30), "lilac", PARLOR_STAIRS, (-2, 0)),
    Turn(at(1, 20), "cobalt", RIGHT),
    Animate(at(1, 20), (1, 1), CLOSING),
    Animate(at(1, 20, 30), (1, 1), CLOSED),
    Turn(at(1, 20, 30), "cyan", RIGHT),
    Move(at(1, 20, 30), "cyan", FIRST_LANDING, (2, -2)),
    Move(at(1, 20, 45), "puce", PARLOR_STAIRS, (-2, 0)),
    Snap(at(1, 21, 30), "cyan", FIRST_LANDING),
    Move(at(1, 21, 30), "cyan", Mark(2, 3, dx=-HALF), (2, 0)),
    Turn(at(1, 22), "lilac", RIGHT),
    Turn(at(1, 22), "maroon", LEFT),
    Move(at(1, 22), "lilac", FIRST_LANDING, (2, -2)),
    Turn(at(1, 22, 30), "puce", RIGHT),
    Move(at(1, 22, 30), "puce", FIRST_LANDING, (2, -2)),
    Snap(at(1, 23, 30), "puce", FIRST_LANDING),
    Snap(at(1, 23), "lilac", FIRST_LANDING),
    # Everyone converges on the attic bedroom.
    Turn(at(1, 25), "cyan", LEFT),
    Move(at(1, 25), "cyan", FIRST_STAIRWELL, (-2, 0)),
    Move(at(1, 25, 15), "drab", FIRST_STAIRWELL, (-2, 0)),
    Turn(at(1, 25, 15), "maroon", LEFT),
    Move(at(1, 25, 15), "maroon", FIRST_STAIRWELL, (-2, 0)),
    Move(at(1, 25, 30), "cyan", SECOND_LANDING, (-2, -2)),
    Turn(at(1, 25, 45), "lilac", LEFT),
    Move(at(1, 25, 45), "lilac", FIRST_STAIRWELL, (-2, 0)),
    Turn(at(1, 25, 45), "puce", LEFT),
    Move(at(1, 25, 45), "puce", FIRST_STAIRWELL, (-2, 0)),
    Move(at(1, 26, 15), "maroon", SECOND_LANDING, (-2, -2)),
    Snap(at(1, 26, 30), "cyan", SECOND_LANDING),
    Turn(at(1, 26, 30), "cyan", RIGHT),
    Move(at(1, 26, 30), "cyan", Mark(1, 5), (2, 0)),
    Move(at(1, 26, 30), "lilac", SECOND_LANDING, (-2, -2)),
    Move(at(1, 26, 45), "puce", SECOND_LANDING, (-2, -2)),
    Snap(at(1, 27, 15), "maroon", SECOND_LANDING),
    Turn(at(1, 27, 15), "maroon", RIGHT),
    Move(at(1, 27, 15), "maroon", Mark(1, 4, dx=HALF), (2, 0)),
    Snap(at(1, 27, 30), "lilac", SECOND_LANDING),
    Turn(at(1, 27, 30), "lilac", RIGHT),
    Move(at(1, 27, 30), "lilac", Mark(1, 5, dx=-FOUR_FIFTHS), (2, 0)),
    Move(at(1, 27, 30), "drab", SECOND_LANDING, (-2, -2)),
    Snap(at(1, 27, 45), "puce", SECOND_LANDING),
    Turn(at(1, 27, 45), "puce", RIGHT),
    Move(at(1, 27, 45), "puce", Mark(1, 4, dx=-HALF), (2, 0)),
    Snap(at(1, 28, 30), "drab", SECOND_LANDING),
    Turn(at(1, 28, 30), "drab", RIGHT),
    Move(at(1, 28, 30), "drab", Mark(1, 4), (2, 0)),
    # Cobalt slips away.
    Animate(at(1, 28, 45), (1, 1), OPENING),
    Animate(at(1, 29, 15), (1, 1), CLOSING),
    Move(at(1, 29), "cobalt", SECOND_TOP, (2, 0)),
    Snap(at(1, 29, 15), "cobalt", SECOND_TOP_STEP),
    Animate(at(1, 29, 45), (1, 1), CLOSED),
    Move(at(1, 29, 15), "cobalt", FIRST_LANDING, (2, 2)),
    Snap(at(1, 30, 15), "cobalt", FIRST_LANDING),
    Turn(at(1, 30, 15), "cobalt", LEFT),
    Move(at(1, 30, 15), "cobalt", Mark(2, 0), (-2, 0)),
    Animate(at(1, 30, 45), (2, 1), OPENING),
    Animate(at(1, 31, 15), (2, 1), OPEN),
    Turn(at(1, 32), "cyan", LEFT),
    Move(at(1, 32), "cyan", SECOND_LANDING, (-2, 0)),
    Snap(at(1, 33), "cobalt", Mark(2, 0, drop=THIRD)),
    Turn(at(1, 34), "drab", LEFT),
    Move(at(1, 34), "drab", Mark(1, 1, dx=-TWO_THIRDS), (-2, 0)),
    Snap(at(1, 34, 30), "cobalt", Mark(2, 0)),
    Turn(at(1, 35), "cobalt", RIGHT),
    Move(at(1, 35), "cobalt", FIRST_LANDING, (2, 0)),
    Turn(at(1, 35), "puce", LEFT),
    Move(at(1, 35, 30), "puce", Mark(1, 3), (-1, 0)),
    Move(at(1, 36), "lilac", Mark(1, 5), (1, 0)),
    Animate(at(1, 36), (1, 1), OPENING),
    Move(at(1, 36, 15), "cyan", Mark(1, 0), (-2, 0)),
    Animate(at(1, 36, 15), (1, 1), OPEN),
    Move(at(1, 37), "maroon", Mark(1, 5, dx=-HALF), (1, 0)),
    Snap(at(1, 37, 45), "cobalt", Mark(2, 2, dx=TWO_THIRDS, drop=THIRD)),
    Move(at(1, 37, 45), "cobalt", GROUND_FOOT, (-2, 2)),
    Turn(at(1, 37, 45), "cobalt", LEFT),
    Turn(at(1, 38, 30), "cyan", RIGHT),
    Move(at(1, 38, 30), "cyan", SECOND_TOP, (2, 0)),
    Snap(at(1, 38, 45), "cobalt", GROUND_FOOT),
    Move(at(1, 38, 45), "cobalt", Mark(3, 0, dx=-TWO_THIRDS), (-2, 0)),
    Turn(at(1, 39), "puce", RIGHT),
    Turn(at(1, 39, 30), "drab", LEFT),
    Snap(at(1, 39, 45), "cyan", SECOND_TOP_STEP),
    Move(at(1, 39, 45), "cyan", FIRST_LANDING, (2, 2)),
    Snap(at(1, 41), "cyan", FIRST_LANDING),
    Turn(at(1, 41), "cyan", LEFT),
    Move(at(1, 41), "cyan", Mark(2, 0), (-2, 0)),
    Snap(at(1, 41), "cobalt", Mark(3, 0, dx=-1, drop=1)),
    Move(at(1, 41), "cobalt", Mark(3, 0, dx=-TWO_THIRDS), (-3, 0)),
)
