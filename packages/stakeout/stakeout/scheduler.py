"""CueSheet and CueDispatcher - firing authored cues against the show clock."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Collection, Iterable, Iterator

from stakeout import motion
from stakeout.config import FIRING_MODES
from stakeout.cues import Animate, Cue, Light, Move, Snap, Sound, Turn
from stakeout.signals import SOUND
from stakeout.types import CueError, Timecode

if TYPE_CHECKING:
    from stakeout.house import Cell
    from stakeout.session import Session
    from stakeout.types import TickContext

logger = logging.getLogger(__name__)


class CueSheet:
    """The authored cue table, sorted by timecode with authoring order kept for ties.

    Each cue carries a fired flag. In ``"catch_up"`` mode every unfired cue at
    or before the current timecode is due, so a skipped tick delays cues
    instead of losing them. In ``"exact"`` mode only cues whose timecode
    equals the current one are due.
    """

    def __init__(self, cues: Iterable[Cue], firing: str = "catch_up") -> None:
        if firing not in FIRING_MODES:
            raise ValueError(
                f"Unknown firing mode {firing!r}, expected one of {FIRING_MODES}"
            )
        self._firing = firing
        # sorted() is stable, so cues sharing a timecode keep authoring order.
        self._cues: list[Cue] = sorted(cues, key=lambda cue: cue.at)
        self._fired: list[bool] = [False] * len(self._cues)
        self._cursor = 0
        self._by_time: dict[Timecode, list[int]] = {}
        for index, cue in enumerate(self._cues):
            self._by_time.setdefault(cue.at, []).append(index)

    @property
    def firing(self) -> str:
        return self._firing

    def __len__(self) -> int:
        return len(self._cues)

    def __iter__(self) -> Iterator[Cue]:
        return iter(self._cues)

    def __getitem__(self, index: int) -> Cue:
        return self._cues[index]

    def is_fired(self, index: int) -> bool:
        return self._fired[index]

    def fired_count(self) -> int:
        return sum(self._fired)

    def reset(self) -> None:
        self._fired = [False] * len(self._cues)
        self._cursor = 0

    # --- Due-set computation ---

    def due(self, now: Timecode) -> list[int]:
        """Indices of cues due at ``now``, in firing order. Does not mark them."""
        if self._firing == "exact":
            return [i for i in self._by_time.get(now, ()) if not self._fired[i]]
        indices: list[int] = []
        index = self._cursor
        while index < len(self._cues) and self._cues[index].at <= now:
            if not self._fired[index]:
                indices.append(index)
            index += 1
        return indices

    def mark_fired(self, index: int) -> None:
        self._fired[index] = True
        while self._cursor < len(self._cues) and self._fired[self._cursor]:
            self._cursor += 1

    def take_due(self, now: Timecode) -> list[Cue]:
        """Return the due cues and mark each as fired."""
        taken: list[Cue] = []
        for index in self.due(now):
            self.mark_fired(index)
            taken.append(self._cues[index])
        return taken

    def missed(self, now: Timecode) -> list[Cue]:
        """Unfired cues whose timecode is already behind ``now``."""
        return [
            cue
            for index, cue in enumerate(self._cues)
            if not self._fired[index] and cue.at < now
        ]

    def next_due(self) -> Timecode | None:
        """Timecode of the earliest unfired cue, or None when the show is spent."""
        for index in range(self._cursor, len(self._cues)):
            if not self._fired[index]:
                return self._cues[index].at
        return None

    # --- Validation ---

    def validate(
        self,
        characters: Collection[str],
        rooms: Collection[int],
        doors: Collection[Cell],
    ) -> None:
        """Raise CueError for the first cue that references something unknown."""
        for cue in self._cues:
            if isinstance(cue, (Move, Turn, Snap)) and cue.who not in characters:
                raise CueError(cue, f"Cue at {cue.at} names unknown character {cue.who!r}")
            if isinstance(cue, Turn) and cue.facing not in (-1, 1):
                raise CueError(cue, f"Turn at {cue.at} faces {cue.facing}, expected -1 or 1")
            if isinstance(cue, Light) and cue.room not in rooms:
                raise CueError(cue, f"Light at {cue.at} names unknown room {cue.room}")
            if isinstance(cue, Animate) and cue.door not in doors:
                raise CueError(cue, f"Animate at {cue.at} names no door at {cue.door}")


class CueDispatcher:
    """Applies a cue to the session. One handler per cue class, dispatched by type."""

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[..., None]] = {}

    def handle(self, cue_type: type[Any], handler: Callable[..., None]) -> None:
        """Register ``handler(cue, session, ctx)``. Later calls overwrite."""
        self._handlers[cue_type] = handler

    def dispatch(self, cue: Cue, session: Session, ctx: TickContext) -> None:
        handler = self._handlers.get(type(cue))
        if handler is None:
            raise TypeError(f"No handler registered for {type(cue).__qualname__}")
        handler(cue, session, ctx)


def _apply_move(cue: Move, session: Session, ctx: TickContext) -> None:
    vx, vy = cue.velocity
    motion.begin_move(
        session.cast[cue.who], session.layout.resolve(cue.to), (float(vx), float(vy))
    )


def _apply_turn(cue: Turn, session: Session, ctx: TickContext) -> None:
    motion.turn(session.cast[cue.who], cue.facing)


def _apply_snap(cue: Snap, session: Session, ctx: TickContext) -> None:
    motion.snap_to(session.cast[cue.who], session.layout.resolve(cue.to))


def _apply_light(cue: Light, session: Session, ctx: TickContext) -> None:
    session.house.light_room(cue.room, cue.lit)


def _apply_animate(cue: Animate, session: Session, ctx: TickContext) -> None:
    session.house.set_door(cue.door, cue.state)


def _apply_sound(cue: Sound, session: Session, ctx: TickContext) -> None:
    session.bus.publish(SOUND, clip=cue.clip)


def make_dispatcher() -> CueDispatcher:
    """A dispatcher wired with the standard effect of every cue kind."""
    dispatcher = CueDispatcher()
    dispatcher.handle(Move, _apply_move)
    dispatcher.handle(Turn, _apply_turn)
    dispatcher.handle(Snap, _apply_snap)
    dispatcher.handle(Light, _apply_light)
    dispatcher.handle(Animate, _apply_animate)
    dispatcher.handle(Sound, _apply_sound)
    return dispatcher


def make_cue_system(
    sheet: CueSheet,
    dispatcher: CueDispatcher,
    on_fire: Callable[[Session, TickContext, Cue], None] | None = None,
) -> Callable[[Session, TickContext], None]:
    """Return a system that fires every due cue once per tick.

    Must run after the clock has advanced so firing sees the post-tick time.
    """

    def cue_system(session: Session, ctx: TickContext) -> None:
        now = ctx.timecode
        for cue in sheet.take_due(now):
            if cue.at != now:
                logger.warning("cue %s %s fired late at %s", cue.kind.value, cue.at, now)
            logger.debug("fire %s at %s: %r", cue.kind.value, now, cue)
            dispatcher.dispatch(cue, session, ctx)
            if on_fire is not None:
                on_fire(session, ctx, cue)

    return cue_system
