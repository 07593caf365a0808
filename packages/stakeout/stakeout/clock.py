"""Frame clock that times the show."""

from typing import Callable

from stakeout.types import SECONDS_PER_MINUTE, TickContext, Timecode


class Clock:
    def __init__(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._tick_number = 0
        self._minutes = 0
        self._seconds = 0
        self._frames = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def frames(self) -> int:
        return self._frames

    @property
    def timecode(self) -> Timecode:
        return Timecode(self._minutes, self._seconds, self._frames)

    def advance(self) -> Timecode:
        """Move forward one frame, carrying into seconds and minutes."""
        self._tick_number += 1
        self._frames += 1
        if self._frames == self._fps:
            self._frames = 0
            self._seconds += 1
        if self._seconds == SECONDS_PER_MINUTE:
            self._seconds = 0
            self._minutes += 1
        return self.timecode

    # Alias used by callers that think in "ticks" rather than frames.
    tick = advance

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            timecode=self.timecode,
            dt=self._dt,
            request_stop=stop_fn,
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._minutes = 0
        self._seconds = 0
        self._frames = 0
