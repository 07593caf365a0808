"""Scene drawing: the house at night, the viewfinder, and the darkroom table."""
from __future__ import annotations

import pygame

from stakeout.layout import COLS, ROWS, HouseLayout
from stakeout.session import Session
from ui.constants import (
    CHARACTER_COLORS,
    COLOR_DARKROOM,
    COLOR_FACADE,
    COLOR_FOCUS,
    COLOR_FRAME,
    COLOR_NIGHT,
    COLOR_PRINT_BORDER,
    COLOR_ROOF,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    COLOR_WINDOW_DARK,
    COLOR_WINDOW_LIT,
    DARKROOM_PROMPT,
    DOOR_COLORS,
)


def _window_rect(layout: HouseLayout, row: int, col: int) -> pygame.Rect:
    cx, cy = layout.window_center(row, col)
    w, h = layout.window_size
    return pygame.Rect(int(cx - w / 2), int(cy - h / 2), int(w), int(h))


def build_facade(layout: HouseLayout) -> pygame.Surface:
    """The house front with transparent window holes, drawn once."""
    facade = pygame.Surface((int(layout.canvas[0]), int(layout.canvas[1])), pygame.SRCALPHA)
    ox, oy = layout.offset
    hw, hh = layout.house_size
    body = pygame.Rect(int(ox), int(oy), int(hw), int(hh))
    roof = [(ox - hw * 0.04, oy), (ox + hw / 2, oy - hh * 0.18), (ox + hw * 1.04, oy)]
    pygame.draw.polygon(facade, COLOR_ROOF, roof)
    pygame.draw.rect(facade, COLOR_FACADE, body)
    for row in range(ROWS):
        for col in range(COLS):
            rect = _window_rect(layout, row, col)
            pygame.draw.rect(facade, COLOR_FRAME, rect.inflate(8, 8))
            facade.fill((0, 0, 0, 0), rect)
    return facade


def draw_interiors(surface: pygame.Surface, session: Session) -> None:
    """Window backlights, doors and the cast, behind the facade."""
    layout = session.layout
    lights = session.house.lights()
    for row in range(ROWS):
        for col in range(COLS):
            color = COLOR_WINDOW_LIT if lights[row][col] else COLOR_WINDOW_DARK
            pygame.draw.rect(surface, color, _window_rect(layout, row, col))

    w, h = layout.window_size
    for cell, state in session.house.doors().items():
        rect = _window_rect(layout, *cell)
        door = pygame.Rect(0, 0, int(w * 0.3), int(h * 0.7))
        door.midbottom = rect.midbottom
        pygame.draw.rect(surface, DOOR_COLORS[state.value], door)

    for character in session.cast:
        _draw_character(surface, layout, character.name, character.position, character.orientation)


def _draw_character(
    surface: pygame.Surface,
    layout: HouseLayout,
    name: str,
    position: tuple[float, float],
    orientation: int,
) -> None:
    w, h = layout.window_size
    x, y = position
    color = CHARACTER_COLORS.get(name, (160, 160, 160))
    body = pygame.Rect(0, 0, int(w * 0.28), int(h * 0.45))
    body.midtop = (int(x), int(y - h * 0.05))
    pygame.draw.ellipse(surface, color, body)
    head_r = max(2, int(w * 0.09))
    head = (int(x), int(y - h * 0.05 - head_r))
    pygame.draw.circle(surface, color, head, head_r)
    # Nose points the way the character faces; +1 is left.
    nose = (head[0] - orientation * head_r, head[1])
    pygame.draw.circle(surface, color, nose, max(1, head_r // 3))


def draw_scene(canvas: pygame.Surface, facade: pygame.Surface, session: Session) -> None:
    canvas.fill(COLOR_NIGHT)
    draw_interiors(canvas, session)
    canvas.blit(facade, (0, 0))
    if not session.focus.zoomed:
        rect = _window_rect(session.layout, session.focus.row, session.focus.col)
        pygame.draw.rect(canvas, COLOR_FOCUS, rect.inflate(14, 14), 2)


def viewfinder(canvas: pygame.Surface, session: Session, zoom_scale: float) -> pygame.Surface:
    """Crop around the focused window and magnify, masked to a round barrel."""
    width, height = canvas.get_size()
    ox, oy = session.focus.origin(session.layout)
    crop_w, crop_h = int(width / zoom_scale), int(height / zoom_scale)
    crop = pygame.Rect(0, 0, crop_w, crop_h)
    crop.center = (int(ox), int(oy))
    crop.clamp_ip(canvas.get_rect())
    view = pygame.transform.smoothscale(canvas.subsurface(crop), (width, height))

    mask = pygame.Surface((width, height), pygame.SRCALPHA)
    mask.fill((0, 0, 0, 255))
    pygame.draw.circle(mask, (0, 0, 0, 0), (width // 2, height // 2), int(height * 0.48))
    view.blit(mask, (0, 0))
    return view


def draw_overlays(view: pygame.Surface, session: Session) -> None:
    """Flash glare, then the curtain fade, over everything."""
    size = view.get_size()
    glare = session.film.glare
    if glare > 0:
        flash = pygame.Surface(size, pygame.SRCALPHA)
        flash.fill((255, 255, 255, int(255 * glare)))
        view.blit(flash, (0, 0))
    curtain = session.curtain
    if curtain > 0:
        black = pygame.Surface(size, pygame.SRCALPHA)
        black.fill((0, 0, 0, int(255 * curtain)))
        view.blit(black, (0, 0))


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, session: Session) -> None:
    film = font.render(f"FILM {session.film_remaining:02d}", True, COLOR_TEXT)
    screen.blit(film, (16, 12))
    tc = font.render(str(session.clock.timecode), True, COLOR_TEXT_DIM)
    screen.blit(tc, (screen.get_width() - tc.get_width() - 16, 12))


def draw_title(screen: pygame.Surface, big: pygame.font.Font, font: pygame.font.Font) -> None:
    screen.fill(COLOR_NIGHT)
    cx = screen.get_width() // 2
    title = big.render("STAKEOUT", True, COLOR_TEXT)
    screen.blit(title, title.get_rect(center=(cx, screen.get_height() // 3)))
    lines = (
        "WASD / arrows  move the viewfinder",
        "Shift          zoom in",
        "Space          take a photo (24 exposures)",
        "",
        "Press Space to begin",
    )
    y = screen.get_height() // 2
    for line in lines:
        text = font.render(line, True, COLOR_TEXT_DIM)
        screen.blit(text, text.get_rect(midtop=(cx, y)))
        y += font.get_linesize()


def draw_darkroom(screen: pygame.Surface, font: pygame.font.Font, session: Session) -> None:
    """Lay the prints on the table where the collage placed them."""
    screen.fill(COLOR_DARKROOM)
    sw, sh = screen.get_size()
    header = font.render(DARKROOM_PROMPT, True, COLOR_TEXT)
    screen.blit(header, header.get_rect(midtop=(sw // 2, 16)))
    cw, ch = session.layout.canvas
    sx, sy = sw / cw, sh / ch
    for photo, place in zip(session.photos, session.collage):
        if photo.frame is None:
            continue
        thumb = pygame.transform.smoothscale(photo.frame, (sw // 4, sh // 4))
        framed = pygame.Surface((thumb.get_width() + 12, thumb.get_height() + 12))
        framed.fill(COLOR_PRINT_BORDER)
        framed.blit(thumb, (6, 6))
        rotated = pygame.transform.rotate(framed, place.rotation)
        screen.blit(rotated, rotated.get_rect(center=(int(place.x * sx), int(place.y * sy))))
    caption = f"{len(session.photos)} photographs developed. Press Space to watch again."
    text = font.render(caption, True, COLOR_TEXT)
    screen.blit(text, text.get_rect(midbottom=(sw // 2, sh - 16)))
