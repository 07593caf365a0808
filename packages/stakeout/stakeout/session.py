"""Session - the one context that owns all show state, and the tick loop."""
from __future__ import annotations

import enum
import logging
import os
import random
from typing import Any, Callable, Iterable

from stakeout.beatsheet import BEAT_SHEET
from stakeout.capture import FilmRoll, Photo
from stakeout.cast import Cast
from stakeout.clock import Clock
from stakeout.config import StakeoutConfig
from stakeout.cues import Cue
from stakeout.darkroom import Placement, scatter
from stakeout.focus import Focus
from stakeout.house import DOORS, ROOMS, House
from stakeout.inputs import NO_COMMANDS, Commands, InputTranslator
from stakeout.layout import HouseLayout
from stakeout.motion import make_motion_system
from stakeout.scheduler import CueSheet, make_cue_system, make_dispatcher
from stakeout.signals import AMBIENCE, FLASH, PHASE, SignalBus, make_signal_system
from stakeout.types import System, TickContext

logger = logging.getLogger(__name__)

# Curtain level at which the closing fade counts as fully dark.
_OPAQUE = 0.995

Hook = Callable[["Session"], None]


class Phase(enum.Enum):
    TITLE = "title"
    SHOW = "show"
    DARKROOM = "darkroom"


class Session:
    """Everything one play-through mutates, advanced one tick per rendered frame.

    Tick order during the show:

    1. Clock advances (cues see the post-tick time)
    2. Commands: focus moves, zoom flag, capture request
    3. Cues due at the new time fire, in sheet order
    4. Moving characters step and test arrival
    5. Glare fades, then a requested capture is taken
    6. Curtain fades; past the curtain call the show closes into the darkroom
    7. Extra systems added with ``add_system``
    8. Signals are flushed to subscribers

    On the title and darkroom screens a tick only looks for ``proceed``.
    """

    def __init__(
        self,
        config: StakeoutConfig | None = None,
        cues: Iterable[Cue] = BEAT_SHEET,
        frame_source: Callable[[], Any] | None = None,
    ) -> None:
        self._config = config if config is not None else StakeoutConfig()
        self._layout = HouseLayout(*self._config.canvas)
        self._clock = Clock(self._config.fps)
        self._cast = Cast(self._layout)
        self._house = House()
        self._focus = Focus()
        self._film = FilmRoll(self._config.film_roll, self._config.glare_ticks)
        self._bus = SignalBus()
        self._inputs = InputTranslator()
        self._sheet = CueSheet(cues, firing=self._config.firing)
        self._sheet.validate(self._cast.names(), ROOMS.keys(), DOORS)
        self._frame_source = frame_source

        seed = self._config.seed
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._phase = Phase.TITLE
        self._curtain = 1.0
        self._curtain_called = False
        self._capture_requested = False
        self._collage: list[Placement] | None = None
        self._stop_requested = False

        self._systems: list[System] = [
            self._command_system,
            make_cue_system(self._sheet, make_dispatcher()),
            make_motion_system(self._cast),
            self._film_system,
            self._curtain_system,
        ]
        self._extra_systems: list[System] = []
        self._signal_system = make_signal_system(self._bus)
        self._start_hooks: list[Hook] = []
        self._darkroom_hooks: list[Hook] = []
        self._pending: Commands = NO_COMMANDS

    # --- Read-only state for the renderer ---

    @property
    def config(self) -> StakeoutConfig:
        return self._config

    @property
    def layout(self) -> HouseLayout:
        return self._layout

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def cast(self) -> Cast:
        return self._cast

    @property
    def house(self) -> House:
        return self._house

    @property
    def focus(self) -> Focus:
        return self._focus

    @property
    def film(self) -> FilmRoll:
        return self._film

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def inputs(self) -> InputTranslator:
        return self._inputs

    @property
    def sheet(self) -> CueSheet:
        return self._sheet

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def film_remaining(self) -> int:
        return self._film.remaining

    @property
    def photos(self) -> tuple[Photo, ...]:
        return self._film.photos

    @property
    def curtain(self) -> float:
        """Opacity of the black overlay, 1.0 fully dark."""
        return min(max(self._curtain, 0.0), 1.0)

    @property
    def collage(self) -> tuple[Placement, ...]:
        if self._collage is None:
            return ()
        return tuple(self._collage)

    # --- Registration ---

    def add_system(self, system: System) -> None:
        """Append a system that runs after the built-in ones each show tick."""
        self._extra_systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_darkroom(self, hook: Hook) -> None:
        self._darkroom_hooks.append(hook)

    def set_frame_source(self, frame_source: Callable[[], Any] | None) -> None:
        self._frame_source = frame_source

    # --- Lifecycle ---

    def start(self) -> None:
        """Reset every piece of show state and raise the curtain."""
        self._clock.reset()
        self._cast.reset()
        self._house.reset()
        self._focus.reset()
        self._film.reset()
        self._inputs.reset()
        self._sheet.reset()
        self._bus.clear()
        self._rng.seed(self._seed)
        self._curtain = 1.0
        self._curtain_called = False
        self._capture_requested = False
        self._collage = None
        self._pending = NO_COMMANDS
        self._set_phase(Phase.SHOW)
        self._bus.publish(AMBIENCE, action="play")
        logger.info("show started (firing=%s, seed=%d)", self._sheet.firing, self._seed)
        for hook in self._start_hooks:
            hook(self)

    def restart(self) -> None:
        self.start()

    def _set_phase(self, phase: Phase) -> None:
        if phase is self._phase:
            return
        logger.info("phase %s -> %s", self._phase.value, phase.value)
        self._phase = phase
        self._bus.publish(PHASE, phase=phase.value)

    def _enter_darkroom(self) -> None:
        self._set_phase(Phase.DARKROOM)
        self._collage = scatter(
            len(self._film.photos),
            self._layout.canvas,
            self._rng,
            max_rotation=self._config.collage_rotation,
            spread=self._config.collage_spread,
        )
        logger.info("darkroom with %d photos", len(self._collage))
        for hook in self._darkroom_hooks:
            hook(self)

    # --- Capture ---

    def request_capture(self, frame: Any = None) -> bool:
        """Photograph the current frame. No-op outside the show or with no film left.

        ``frame`` defaults to whatever the frame source returns.
        """
        if self._phase is not Phase.SHOW:
            return False
        if self._film.remaining == 0:
            logger.debug("capture refused at %s: out of film", self._clock.timecode)
            return False
        if frame is None and self._frame_source is not None:
            frame = self._frame_source()
        photo = Photo(
            frame=frame,
            taken_at=self._clock.timecode,
            window=(self._focus.col, self._focus.row),
            zoomed=self._focus.zoomed,
        )
        self._film.capture(photo)
        self._bus.publish(FLASH, remaining=self._film.remaining)
        logger.info(
            "photo %d taken at %s of window %s",
            len(self._film.photos), photo.taken_at, photo.window,
        )
        return True

    # --- Built-in systems ---

    def _command_system(self, session: Session, ctx: TickContext) -> None:
        commands = self._pending
        focus = self._focus
        if commands.focus_left:
            focus.move(-1, 0)
        if commands.focus_right:
            focus.move(1, 0)
        if commands.focus_up:
            focus.move(0, -1)
        if commands.focus_down:
            focus.move(0, 1)
        focus.zoomed = commands.zoom_held
        if commands.request_capture and self._film.remaining > 0:
            self._capture_requested = True

    def _film_system(self, session: Session, ctx: TickContext) -> None:
        self._film.fade()
        if self._capture_requested:
            self._capture_requested = False
            self.request_capture()

    def _curtain_system(self, session: Session, ctx: TickContext) -> None:
        step_in = self._config.fade_in_step
        if self._curtain > step_in:
            self._curtain -= step_in
        if ctx.timecode < self._config.curtain_call:
            return
        if not self._curtain_called:
            self._curtain_called = True
            self._bus.publish(AMBIENCE, action="fade")
            logger.info("curtain call at %s", ctx.timecode)
        if self._curtain <= _OPAQUE:
            self._curtain += self._config.fade_out_step
        else:
            self._enter_darkroom()

    # --- Ticking ---

    def _request_stop(self) -> None:
        self._stop_requested = True

    def step(self, commands: Commands | None = None) -> None:
        """Advance one rendered frame with this frame's translated commands."""
        commands = commands if commands is not None else NO_COMMANDS
        self._stop_requested = False

        if self._phase is not Phase.SHOW:
            if commands.proceed:
                if self._phase is Phase.TITLE:
                    self.start()
                else:
                    self.restart()
            self._bus.flush()
            return

        self._pending = commands
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self, ctx)
        for system in self._extra_systems:
            system(self, ctx)
            if self._stop_requested:
                break
        self._pending = NO_COMMANDS
        self._signal_system(self, ctx)

    def run(self, n: int, commands: Commands | None = None) -> int:
        """Step up to ``n`` times, stopping early on request. Returns ticks run."""
        ran = 0
        for _ in range(n):
            self.step(commands)
            ran += 1
            if self._stop_requested:
                break
        return ran

    def play_through(self, limit: int | None = None) -> int:
        """Run the show with no input until the darkroom. Returns ticks run.

        Starts the show first if still on the title screen. ``limit`` caps
        the number of ticks.
        """
        if self._phase is not Phase.SHOW:
            self.start()
        ran = 0
        while self._phase is Phase.SHOW:
            if limit is not None and ran >= limit:
                break
            self.step()
            ran += 1
            if self._stop_requested:
                break
        return ran

    # --- Snapshot ---

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible view of everything the renderer draws."""
        return {
            "phase": self._phase.value,
            "timecode": str(self._clock.timecode),
            "tick_number": self._clock.tick_number,
            "characters": self._cast.snapshot(),
            **self._house.snapshot(),
            "focus": [self._focus.col, self._focus.row],
            "focus_origin": list(self._focus.origin(self._layout)),
            "zoomed": self._focus.zoomed,
            "film_remaining": self._film.remaining,
            "photos": len(self._film.photos),
            "glare": self._film.glare,
            "curtain": self.curtain,
            "cues_fired": self._sheet.fired_count(),
        }
