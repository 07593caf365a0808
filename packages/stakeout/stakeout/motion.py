"""Character movement: cue effects and the per-tick stepping system."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from stakeout.cast import Cast, Character, MoveState
from stakeout.layout import Point

if TYPE_CHECKING:
    from stakeout.session import Session
    from stakeout.types import TickContext


def begin_move(character: Character, target: Point, velocity: Point) -> None:
    character.target = target
    character.velocity = velocity
    character.state = MoveState.MOVING


def snap_to(character: Character, position: Point) -> None:
    """Teleport and stop, discarding any residual velocity."""
    character.position = position
    character.velocity = (0.0, 0.0)
    character.state = MoveState.IDLE


def turn(character: Character, orientation: int) -> None:
    if orientation not in (-1, 1):
        raise ValueError(f"orientation must be -1 or 1, got {orientation}")
    character.orientation = orientation


def has_arrived(character: Character) -> bool:
    """True when the character is within one step of its target on both axes.

    A zero velocity vector means the character is parked and counts as
    arrived wherever it stands.
    """
    x, y = character.position
    tx, ty = character.target
    dx, dy = character.velocity
    if dx == 0 and dy == 0:
        return True
    return abs(x - tx) <= abs(dx) and abs(y - ty) <= abs(dy)


def step(character: Character) -> bool:
    """Advance one tick. Returns True if the character arrived this tick."""
    if character.state is not MoveState.MOVING:
        return False
    x, y = character.position
    dx, dy = character.velocity
    character.position = (x + dx, y + dy)
    if has_arrived(character):
        character.velocity = (0.0, 0.0)
        character.state = MoveState.IDLE
        return True
    return False


def make_motion_system(
    cast: Cast,
    on_arrive: Callable[[Session, TickContext, Character], None] | None = None,
) -> Callable[[Session, TickContext], None]:
    """Return a system that steps every moving character once per tick."""

    def motion_system(session: Session, ctx: TickContext) -> None:
        for character in cast:
            if step(character) and on_arrive is not None:
                on_arrive(session, ctx, character)

    return motion_system
