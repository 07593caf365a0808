"""Shared value types and protocols for the show engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

SECONDS_PER_MINUTE = 60


@dataclass(frozen=True, order=True, slots=True)
class Timecode:
    """A point on the show clock. Ordered by (minute, second, frame)."""

    minute: int = 0
    second: int = 0
    frame: int = 0

    @classmethod
    def from_frames(cls, total: int, fps: int = 60) -> Timecode:
        seconds, frame = divmod(total, fps)
        minute, second = divmod(seconds, SECONDS_PER_MINUTE)
        return cls(minute, second, frame)

    def to_frames(self, fps: int = 60) -> int:
        return (self.minute * SECONDS_PER_MINUTE + self.second) * fps + self.frame

    def __str__(self) -> str:
        return f"{self.minute}:{self.second:02d}.{self.frame:02d}"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    timecode: Timecode
    dt: float
    request_stop: Callable[[], None]


class CueError(ValueError):
    """Raised when a cue sheet references something that does not exist."""

    def __init__(self, cue: object, message: str) -> None:
        self.cue = cue
        super().__init__(message)


if TYPE_CHECKING:
    from stakeout.session import Session

System = Callable[["Session", TickContext], None]
