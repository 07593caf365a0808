"""FilmRoll - exposures left, captured frames and the flash glare."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stakeout.types import Timecode


@dataclass(frozen=True)
class Photo:
    """One exposure: the renderer's frame plus where and when it was taken."""

    frame: Any
    taken_at: Timecode
    window: tuple[int, int]
    zoomed: bool


class FilmRoll:
    """Capture bookkeeping for one session.

    Frames are whatever the renderer hands over (a pygame Surface in the
    front-end); the roll only stores them in order.
    """

    def __init__(self, exposures: int = 24, glare_ticks: int = 50) -> None:
        if exposures < 0:
            raise ValueError("exposures must be >= 0")
        self._exposures = exposures
        self._glare_ticks = glare_ticks
        self._remaining = exposures
        self._photos: list[Photo] = []
        self._glare = 0

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def photos(self) -> tuple[Photo, ...]:
        return tuple(self._photos)

    @property
    def glare(self) -> float:
        """Flash intensity in [0, 1], fading one step per tick."""
        return self._glare / self._glare_ticks

    def capture(self, photo: Photo) -> bool:
        """Store one exposure. Refused (returns False) once the roll is spent."""
        if self._remaining == 0:
            return False
        self._remaining -= 1
        self._photos.append(photo)
        self._glare = self._glare_ticks
        return True

    def fade(self) -> None:
        if self._glare > 0:
            self._glare -= 1

    def reset(self) -> None:
        self._remaining = self._exposures
        self._photos = []
        self._glare = 0
