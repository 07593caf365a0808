"""Input translation: keyboard edges and the camera peripheral byte to commands."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Protocol, runtime_checkable

# Peripheral channels in bit order, most significant first.
CHANNELS = ("snap", "light", "down", "left", "right", "up")


@dataclass(frozen=True)
class PeripheralReading:
    snap: int
    light: int
    down: int
    left: int
    right: int
    up: int


def decode(data: int) -> PeripheralReading:
    """Split the peripheral byte into its channels by base-2 digit extraction.

    The snap channel takes everything above bit 4, so bytes of 64 and up
    read as snap > 1. Any non-zero value counts as pressed.
    """
    if not 0 <= data <= 255:
        raise ValueError(f"peripheral byte must be in 0..255, got {data}")
    return PeripheralReading(
        snap=data // 32,
        light=(data % 32) // 16,
        down=(data % 16) // 8,
        left=(data % 8) // 4,
        right=(data % 4) // 2,
        up=data % 2,
    )


@dataclass
class ChannelBuffer:
    """Two-slot (previous, current) buffer for edge detection on one channel."""

    previous: int = 0
    current: int = 0

    def push(self, value: int) -> None:
        self.previous = self.current
        self.current = value

    def rising(self) -> bool:
        return self.current > self.previous

    def reset(self) -> None:
        self.previous = 0
        self.current = 0


@runtime_checkable
class PeripheralSource(Protocol):
    """A non-blocking supplier of peripheral bytes.

    ``poll`` returns the newest byte, or None when nothing new arrived.
    """

    @property
    def connected(self) -> bool: ...

    def poll(self) -> int | None: ...


class ByteFeed:
    """Replays a scripted sequence of peripheral bytes, one per poll.

    ``None`` entries stand for ticks with no new data. Once exhausted every
    poll returns None.
    """

    def __init__(self, data: Iterable[int | None], connected: bool = True) -> None:
        self._data: Iterator[int | None] = iter(data)
        self._connected = connected

    @property
    def connected(self) -> bool:
        return self._connected

    def poll(self) -> int | None:
        return next(self._data, None)


class Key(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    SHUTTER = "shutter"


@dataclass
class KeyboardState:
    """Keys pressed since the last tick, in order, and whether zoom is held."""

    pressed: list[Key] = field(default_factory=list)
    zoom_held: bool = False


@dataclass(frozen=True)
class Commands:
    focus_left: bool = False
    focus_right: bool = False
    focus_up: bool = False
    focus_down: bool = False
    request_capture: bool = False
    zoom_held: bool = False
    proceed: bool = False


NO_COMMANDS = Commands()


class InputTranslator:
    """Merges keyboard and peripheral input into one ``Commands`` per tick."""

    def __init__(self) -> None:
        self._channels: dict[str, ChannelBuffer] = {name: ChannelBuffer() for name in CHANNELS}
        self._last_byte = 0

    def channel(self, name: str) -> ChannelBuffer:
        return self._channels[name]

    def reset(self) -> None:
        for buffer in self._channels.values():
            buffer.reset()
        self._last_byte = 0

    def sample(self, data: int | None) -> PeripheralReading:
        """Push one reading into every channel; None repeats the last byte."""
        if data is not None:
            self._last_byte = data
        reading = decode(self._last_byte)
        for name in CHANNELS:
            self._channels[name].push(getattr(reading, name))
        return reading

    def translate(
        self,
        keyboard: KeyboardState | None = None,
        peripheral: PeripheralSource | None = None,
    ) -> Commands:
        flags = {
            "focus_left": False,
            "focus_right": False,
            "focus_up": False,
            "focus_down": False,
            "request_capture": False,
            "zoom_held": False,
            "proceed": False,
        }

        if keyboard is not None:
            for key in keyboard.pressed:
                if key is Key.LEFT:
                    flags["focus_left"] = True
                elif key is Key.RIGHT:
                    flags["focus_right"] = True
                elif key is Key.UP:
                    flags["focus_up"] = True
                elif key is Key.DOWN:
                    flags["focus_down"] = True
                elif key is Key.SHUTTER:
                    flags["request_capture"] = True
                    flags["proceed"] = True
            flags["zoom_held"] = keyboard.zoom_held

        if peripheral is not None and peripheral.connected:
            self.sample(peripheral.poll())
            # One peripheral command per tick, first rising edge wins.
            ch = self._channels
            if ch["up"].rising():
                flags["focus_up"] = True
            elif ch["right"].rising():
                flags["focus_right"] = True
            elif ch["left"].rising():
                flags["focus_left"] = True
            elif ch["down"].rising():
                flags["focus_down"] = True
            elif ch["snap"].rising():
                flags["request_capture"] = True
            # A blocked light sensor reads 0.
            if ch["light"].current == 0:
                flags["zoom_held"] = True

        return Commands(**flags)
