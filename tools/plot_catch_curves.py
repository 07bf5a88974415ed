"""Render catch probability curves to a PNG for balance tuning.

Usage: python tools/plot_catch_curves.py [output.png]
"""
import os
import sys
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from angler.catch.formulas import (
    MAX_DIFFICULTY,
    calculate_perfect_chance,
    calculate_success_chance,
    calculate_treasure_chance,
    compute_strength,
)

OUTPUT = ROOT / "catch_curves.png"
SIZE = (960, 540)
MARGIN = 60
LEVELS = (0, 5, 10)
CURVES = {
    "success": ((80, 200, 120), calculate_success_chance),
    "perfect": ((230, 200, 60), calculate_perfect_chance),
    "treasure": ((90, 150, 240), calculate_treasure_chance),
}


def to_screen(difficulty: float, chance: float) -> tuple[int, int]:
    width = SIZE[0] - 2 * MARGIN
    height = SIZE[1] - 2 * MARGIN
    x = MARGIN + width * difficulty / MAX_DIFFICULTY
    y = SIZE[1] - MARGIN - height * chance
    return int(x), int(y)


def draw_axes(surface: pygame.Surface) -> None:
    grey = (90, 90, 90)
    for tick in range(0, MAX_DIFFICULTY + 1, 10):
        pygame.draw.line(surface, grey, to_screen(tick, 0.0), to_screen(tick, 1.0), 1)
    for step in range(0, 11):
        chance = step / 10
        pygame.draw.line(surface, grey, to_screen(0, chance), to_screen(MAX_DIFFICULTY, chance), 1)
    pygame.draw.rect(surface, (200, 200, 200), (MARGIN, MARGIN, SIZE[0] - 2 * MARGIN, SIZE[1] - 2 * MARGIN), 1)


def render(surface: pygame.Surface) -> None:
    surface.fill((16, 18, 24))
    draw_axes(surface)
    for index, level in enumerate(LEVELS):
        strength = compute_strength(level)
        # Lower levels are drawn dimmer.
        shade = 0.45 + 0.55 * index / max(1, len(LEVELS) - 1)
        for colour, curve in CURVES.values():
            tint = tuple(int(channel * shade) for channel in colour)
            points = [to_screen(d, curve(strength, d)) for d in range(1, MAX_DIFFICULTY + 1)]
            pygame.draw.lines(surface, tint, False, points, 2)


def main() -> None:
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else OUTPUT
    pygame.init()
    surface = pygame.Surface(SIZE)
    render(surface)
    pygame.image.save(surface, str(output))
    pygame.quit()
    print(f"Wrote {output}")


if __name__ == "__main__":
    main()
