"""Session configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field

from stakeout.types import Timecode

FIRING_MODES = ("catch_up", "exact")


@dataclass(frozen=True)
class StakeoutConfig:
    """Immutable configuration for one play session.

    Attributes:
        fps: Frames per clock second. The clock carries at this many frames.
        canvas: Canvas size in pixels; all authored marks resolve against it.
        film_roll: Exposures available at the start of the show.
        glare_ticks: Ticks the flash glare takes to fade after a capture.
        fade_in_step: Curtain level removed per tick while the show opens.
        fade_out_step: Curtain level added per tick after the curtain call.
        curtain_call: Show time at which the closing fade begins.
        firing: ``"catch_up"`` fires every unfired cue at or before now;
            ``"exact"`` fires only cues whose timecode equals now.
        zoom_scale: Magnification the renderer applies while zoomed.
        collage_rotation: Max absolute photo rotation (degrees) in the darkroom.
        collage_spread: Max photo offset from centre, as a fraction of canvas.
        seed: Seed for the darkroom collage RNG. ``None`` draws one at random.
    """

    fps: int = 60
    canvas: tuple[int, int] = (1920, 1080)
    film_roll: int = 24
    glare_ticks: int = 50
    fade_in_step: float = 0.005
    fade_out_step: float = 0.010
    curtain_call: Timecode = field(default_factory=lambda: Timecode(1, 43, 0))
    firing: str = "catch_up"
    zoom_scale: float = 6.0
    collage_rotation: float = 30.0
    collage_spread: float = 0.125
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.canvas[0] <= 0 or self.canvas[1] <= 0:
            raise ValueError(f"canvas must be positive, got {self.canvas}")
        if self.film_roll < 0:
            raise ValueError("film_roll must be >= 0")
        if self.glare_ticks <= 0:
            raise ValueError("glare_ticks must be positive")
        if self.firing not in FIRING_MODES:
            raise ValueError(
                f"Unknown firing mode {self.firing!r}, expected one of {FIRING_MODES}"
            )
