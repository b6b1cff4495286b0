"""Interactive window: walk an animated sprite around with W, A, S, D."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import pygame

from tilesprite.sprite import SHEET_COLUMNS, SHEET_ROWS, SPRITE_SIZE, Sprite
from tilesprite.vectors import Vec2

WIDTH, HEIGHT = 800, 600
TITLE = "Vampirinho"
DEFAULT_SHEET = "../assets/sprites/Walk.png"
BACKGROUND = (26, 26, 26)
SPEED = 100.0


def frame_rect(
    sheet_width: int, sheet_height: int, frame_x: int, frame_y: int
) -> tuple[int, int, int, int]:
    """Pixel rectangle ``(left, top, width, height)`` of a frame in the sheet.

    Frame rows count from the bottom of the image, as texture coordinates do.
    """
    w = sheet_width // SHEET_COLUMNS
    h = sheet_height // SHEET_ROWS
    return frame_x * w, sheet_height - (frame_y + 1) * h, w, h


def screen_position(position: Vec2, height: int) -> tuple[float, float]:
    """Top-left window pixel of a sprite whose bottom-left is ``position`` (y up)."""
    return position.x, height - position.y - SPRITE_SIZE


def _load_sheet(path: str) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, OSError):
        print(f"Failed to load texture: {path}", file=sys.stderr)
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run until it is closed."""
    parser = argparse.ArgumentParser(description="Walk a sprite with W, A, S, D.")
    parser.add_argument("--sheet", default=DEFAULT_SHEET, help="sprite sheet image")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        sheet = _load_sheet(args.sheet)
        sprite = Sprite(texture=sheet, position=Vec2(368.0, 268.0))
        clock = pygame.time.Clock()
        size = int(SPRITE_SIZE)

        running = True
        while running:
            delta_time = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            keys = pygame.key.get_pressed()
            sprite.move(
                keys[pygame.K_a],
                keys[pygame.K_d],
                keys[pygame.K_w],
                keys[pygame.K_s],
                delta_time,
                SPEED,
            )
            sprite.update(delta_time)

            screen.fill(BACKGROUND)
            if sheet is not None:
                rect = pygame.Rect(
                    frame_rect(
                        sheet.get_width(),
                        sheet.get_height(),
                        sprite.frame_x,
                        sprite.frame_y,
                    )
                )
                image = pygame.transform.scale(sheet.subsurface(rect), (size, size))
                screen.blit(image, screen_position(sprite.position, HEIGHT))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())