"""Layout, color, and input constants."""
from __future__ import annotations

import pygame

from stakeout.inputs import Key

FPS = 60
DEFAULT_SCALE = 0.5

# Scene colors
COLOR_NIGHT = (12, 14, 28)
COLOR_FACADE = (46, 40, 52)
COLOR_ROOF = (30, 26, 36)
COLOR_WINDOW_DARK = (22, 22, 30)
COLOR_WINDOW_LIT = (236, 196, 110)
COLOR_FRAME = (70, 62, 74)
COLOR_FOCUS = (240, 240, 240)
COLOR_TEXT = (220, 220, 220)
COLOR_TEXT_DIM = (140, 140, 150)
COLOR_DARKROOM = (60, 8, 8)
COLOR_PRINT_BORDER = (235, 232, 220)

DOOR_COLORS: dict[str, tuple[int, int, int]] = {
    "closed": (92, 60, 40),
    "opening": (120, 84, 56),
    "closing": (120, 84, 56),
    "open": (30, 24, 20),
}

CHARACTER_COLORS: dict[str, tuple[int, int, int]] = {
    "puce": (204, 136, 153),
    "lilac": (200, 162, 200),
    "cyan": (0, 183, 235),
    "maroon": (128, 0, 0),
    "drab": (150, 113, 23),
    "cobalt": (0, 71, 171),
}

# Keyboard bindings. Shift held zooms.
KEYMAP: dict[int, Key] = {
    pygame.K_a: Key.LEFT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_w: Key.UP,
    pygame.K_UP: Key.UP,
    pygame.K_s: Key.DOWN,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_SPACE: Key.SHUTTER,
}

# Sound clips looked up under --assets, by signal name or cue clip.
CLIPS: dict[str, str] = {
    "gunshot": "gunshot.wav",
    "flashbulb": "flashbulb.wav",
    "ambience": "ambience.wav",
}
AMBIENCE_VOLUME = 0.25
AMBIENCE_FADE_MS = 3000

DARKROOM_PROMPT = "What do you think happened?"
