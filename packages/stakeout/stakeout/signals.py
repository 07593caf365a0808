"""Per-tick pub/sub bus for effects owned by collaborators (audio, glare)."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from stakeout.session import Session
    from stakeout.types import TickContext

_Handler = Callable[[str, dict[str, Any]], None]

# Signal names published by the core.
SOUND = "sound"
FLASH = "flash"
AMBIENCE = "ambience"
PHASE = "phase"


class SignalBus:
    """Queues signals during a tick and delivers them on ``flush``.

    Handlers subscribed to ``"*"`` receive every signal.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is not None and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> list[str]:
        return [name for name, _ in self._queue]

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in self._subscribers.get(signal_name, []):
                handler(signal_name, data)
            for handler in self._subscribers.get("*", []):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()


def make_signal_system(bus: SignalBus) -> Callable[[Session, TickContext], None]:
    def signal_system(session: Session, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
