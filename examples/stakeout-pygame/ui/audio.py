"""Sound board driven by session signals."""
from __future__ import annotations

import logging
from pathlib import Path

import pygame

from stakeout.signals import AMBIENCE, FLASH, SOUND, SignalBus
from ui.constants import AMBIENCE_FADE_MS, AMBIENCE_VOLUME, CLIPS

logger = logging.getLogger(__name__)


class SoundBoard:
    """Plays clips from an asset directory. Missing files are skipped."""

    def __init__(self, assets: Path | None) -> None:
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._ambience_channel: pygame.mixer.Channel | None = None
        if assets is None:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("audio disabled: %s", exc)
            return
        for name, filename in CLIPS.items():
            path = assets / filename
            if not path.exists():
                logger.info("no clip for %r at %s", name, path)
                continue
            self._sounds[name] = pygame.mixer.Sound(str(path))

    def attach(self, bus: SignalBus) -> None:
        bus.subscribe(SOUND, self._on_sound)
        bus.subscribe(FLASH, self._on_flash)
        bus.subscribe(AMBIENCE, self._on_ambience)

    def _play(self, name: str) -> pygame.mixer.Channel | None:
        sound = self._sounds.get(name)
        if sound is None:
            return None
        return sound.play()

    def _on_sound(self, signal: str, data: dict) -> None:
        self._play(data["clip"])

    def _on_flash(self, signal: str, data: dict) -> None:
        self._play("flashbulb")

    def _on_ambience(self, signal: str, data: dict) -> None:
        if data["action"] == "play":
            if self._ambience_channel is not None:
                self._ambience_channel.stop()
            sound = self._sounds.get("ambience")
            if sound is None:
                return
            sound.set_volume(AMBIENCE_VOLUME)
            self._ambience_channel = sound.play(loops=-1)
        elif data["action"] == "fade" and self._ambience_channel is not None:
            self._ambience_channel.fadeout(AMBIENCE_FADE_MS)
