"""Offscreen checks for the darkroom screen."""
from __future__ import annotations

import os

import pytest

pygame = pytest.importorskip("pygame")

from stakeout import Commands, Phase, Session, StakeoutConfig  # noqa: E402
from ui.constants import COLOR_DARKROOM, DARKROOM_PROMPT  # noqa: E402
from ui.renderer import draw_darkroom  # noqa: E402


@pytest.fixture(scope="module")
def font():
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.font.init()
    yield pygame.font.Font(None, 24)
    pygame.font.quit()


def _darkroom_session() -> Session:
    session = Session(StakeoutConfig(seed=3))
    session.start()
    session.step(Commands(request_capture=True))
    session.play_through()
    assert session.phase is Phase.DARKROOM
    return session


def test_prompt_heads_the_darkroom(font) -> None:
    screen = pygame.Surface((960, 540))
    draw_darkroom(screen, font, _darkroom_session())

    header_h = font.size(DARKROOM_PROMPT)[1]
    strip = [
        screen.get_at((x, y))[:3]
        for y in range(16, 16 + header_h)
        for x in range(0, 960, 2)
    ]
    assert any(tuple(pixel) != COLOR_DARKROOM for pixel in strip)
