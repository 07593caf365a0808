"""Stakeout - watch the house across the street and photograph what happens.

One session tick per rendered frame. The core owns all show state; this
front-end turns keys into commands, draws the session, and plays sounds
when the session's signals say so.

Controls:
  WASD / arrows  Move the viewfinder one window
  Shift (hold)   Zoom in on the focused window
  Space          Start / take a photo / restart from the darkroom
  Escape         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from stakeout import ByteFeed, KeyboardState, Phase, Session, StakeoutConfig
from stakeout.config import FIRING_MODES
from ui.audio import SoundBoard
from ui.constants import DEFAULT_SCALE, FPS, KEYMAP
from ui.renderer import (
    build_facade,
    draw_darkroom,
    draw_hud,
    draw_overlays,
    draw_scene,
    draw_title,
    viewfinder,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stakeout - pygame front-end")
    p.add_argument("--scale", type=float, default=DEFAULT_SCALE,
                   help="Window size as a fraction of the 1920x1080 canvas (default: 0.5)")
    p.add_argument("--seed", type=int, default=None, help="Darkroom collage seed")
    p.add_argument("--firing", choices=FIRING_MODES, default="catch_up",
                   help="Cue firing policy (default: catch_up)")
    p.add_argument("--assets", type=Path, default=None, metavar="DIR",
                   help="Directory holding gunshot/flashbulb/ambience .wav clips")
    p.add_argument("--feed", type=Path, default=None, metavar="FILE",
                   help="Replay camera peripheral bytes from FILE, one per frame ('-' for none)")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args()
    args.scale = max(0.2, min(1.0, args.scale))
    return args


def load_feed(path: Path) -> ByteFeed:
    values: list[int | None] = []
    for token in path.read_text().split():
        values.append(None if token == "-" else int(token, 0))
    return ByteFeed(values)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = StakeoutConfig(firing=args.firing, seed=args.seed)
    canvas_w, canvas_h = config.canvas
    screen_w, screen_h = int(canvas_w * args.scale), int(canvas_h * args.scale)

    pygame.init()
    screen = pygame.display.set_mode((screen_w, screen_h))
    pygame.display.set_caption("Stakeout")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", max(12, int(28 * args.scale)))
    big_font = pygame.font.SysFont("serif", max(24, int(120 * args.scale)), bold=True)

    canvas = pygame.Surface((canvas_w, canvas_h))
    # The last composed view; a capture prints what the player saw.
    last_view = pygame.Surface((screen_w, screen_h))

    session = Session(config, frame_source=lambda: last_view.copy())
    facade = build_facade(session.layout)
    translator = session.inputs
    feed = load_feed(args.feed) if args.feed is not None else None
    sounds = SoundBoard(args.assets)
    sounds.attach(session.bus)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        pressed = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in KEYMAP:
                    pressed.append(KEYMAP[event.key])
        keyboard = KeyboardState(
            pressed=pressed,
            zoom_held=bool(pygame.key.get_mods() & pygame.KMOD_SHIFT),
        )

        # --- Tick ---
        session.step(translator.translate(keyboard, feed))

        # --- Render ---
        if session.phase is Phase.TITLE:
            draw_title(screen, big_font, font)
        elif session.phase is Phase.DARKROOM:
            draw_darkroom(screen, font, session)
        else:
            draw_scene(canvas, facade, session)
            view = viewfinder(canvas, session, config.zoom_scale) if session.focus.zoomed else canvas
            pygame.transform.smoothscale(view, (screen_w, screen_h), last_view)
            screen.blit(last_view, (0, 0))
            draw_overlays(screen, session)
            draw_hud(screen, font, session)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
