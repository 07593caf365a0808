"""The cast - six characters and their movement state."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterator

from stakeout.layout import HouseLayout, Mark, Point


class MoveState(enum.Enum):
    IDLE = "idle"
    MOVING = "moving"


@dataclass
class Character:
    """Spatial state of one character. Mutated only by cues and the motion system."""

    name: str
    position: Point
    velocity: Point = (0.0, 0.0)
    orientation: int = 1
    target: Point = (0.0, 0.0)
    state: MoveState = MoveState.IDLE
    image: str = ""

    @property
    def moving(self) -> bool:
        return self.state is MoveState.MOVING

    def snapshot(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "position": list(self.position),
            "velocity": list(self.velocity),
            "orientation": self.orientation,
            "target": list(self.target),
            "state": self.state.value,
            "image": self.image,
        }


@dataclass(frozen=True)
class CharacterSpec:
    """Authored starting pose for a character."""

    name: str
    title: str
    start: Mark
    orientation: int = 1


# The starting cast. Two of them stand a little left of a window centre
# (a 64th of the canvas, which is 0.3125 window widths).
CAST: tuple[CharacterSpec, ...] = (
    CharacterSpec("puce", "Professor Puce", Mark(3, 3), orientation=-1),
    CharacterSpec("lilac", "Lady Lilac", Mark(2, 0), orientation=-1),
    CharacterSpec("cyan", "Sir Cyan", Mark(2, 1)),
    CharacterSpec("maroon", "Mrs. Maroon", Mark(3, 5, dx=-0.3125)),
    CharacterSpec("drab", "Dr. Drab", Mark(3, 0), orientation=-1),
    CharacterSpec("cobalt", "Captain Cobalt", Mark(3, 1, dx=-0.3125)),
)


class Cast:
    """Named character registry, created once per session."""

    def __init__(
        self,
        layout: HouseLayout,
        specs: tuple[CharacterSpec, ...] = CAST,
    ) -> None:
        self._layout = layout
        self._specs = specs
        self._characters: dict[str, Character] = {}
        self.reset()

    def reset(self) -> None:
        """Put every character back on its authored starting mark.

        Existing ``Character`` objects are reused so references held by the
        renderer stay valid across restarts.
        """
        for spec in self._specs:
            position = self._layout.resolve(spec.start)
            character = self._characters.get(spec.name)
            if character is None:
                character = Character(name=spec.name, position=position, image=spec.name)
                self._characters[spec.name] = character
            character.position = position
            character.velocity = (0.0, 0.0)
            character.orientation = spec.orientation
            character.target = position
            character.state = MoveState.IDLE

    def __getitem__(self, name: str) -> Character:
        try:
            return self._characters[name]
        except KeyError:
            raise KeyError(f"No character named {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._characters

    def __iter__(self) -> Iterator[Character]:
        return iter(self._characters.values())

    def __len__(self) -> int:
        return len(self._characters)

    def names(self) -> list[str]:
        return list(self._characters)

    def title(self, name: str) -> str:
        for spec in self._specs:
            if spec.name == name:
                return spec.title
        raise KeyError(f"No character named {name!r}")

    def snapshot(self) -> list[dict[str, Any]]:
        return [c.snapshot() for c in self._characters.values()]
