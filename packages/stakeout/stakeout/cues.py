"""Cue records. Each kind is a frozen dataclass with an ``at`` timecode."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from stakeout.house import Cell, DoorState
from stakeout.layout import Mark
from stakeout.types import Timecode


class CueKind(enum.Enum):
    MOVE = "move"
    TURN = "turn"
    SNAP = "snap"
    LIGHT = "light"
    ANIMATE = "animate"
    SOUND = "sound"


@dataclass(frozen=True)
class Move:
    """Start ``who`` walking toward ``to`` at ``velocity`` pixels per frame."""

    at: Timecode
    who: str
    to: Mark
    velocity: tuple[float, float]

    kind = CueKind.MOVE


@dataclass(frozen=True)
class Turn:
    at: Timecode
    who: str
    facing: int

    kind = CueKind.TURN


@dataclass(frozen=True)
class Snap:
    """Teleport ``who`` to ``to`` and stop them."""

    at: Timecode
    who: str
    to: Mark

    kind = CueKind.SNAP


@dataclass(frozen=True)
class Light:
    at: Timecode
    room: int
    lit: bool

    kind = CueKind.LIGHT


@dataclass(frozen=True)
class Animate:
    at: Timecode
    door: Cell
    state: DoorState

    kind = CueKind.ANIMATE


@dataclass(frozen=True)
class Sound:
    at: Timecode
    clip: str

    kind = CueKind.SOUND


Cue = Union[Move, Turn, Snap, Light, Animate, Sound]


def at(minute: int, second: int, frame: int = 0) -> Timecode:
    """Shorthand for authoring cue timecodes."""
    return Timecode(minute, second, frame)
