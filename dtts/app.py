"""Window setup and the menu / game loop."""

from __future__ import annotations

import argparse

import pygame

from dtts.gameplay import GamePlay
from dtts.menu import Menu

DEFAULT_CELL = 72.0
CAPTION = "Kolce"
ROWS_PER_DESKTOP = 19


def cell_size_for(desktop_height: int) -> float:
    """Cell size in pixels for a desktop of the given height."""
    if desktop_height < 0:
        raise ValueError(f"desktop height must not be negative, got {desktop_height}")
    return float(int(desktop_height) // ROWS_PER_DESKTOP)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dtts", description="Don't touch the spikes.")
    parser.add_argument("--data", default="data", help="progress file")
    parser.add_argument("--cell", type=float, help="cell size in pixels")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        if args.cell is not None:
            cell = args.cell
        else:
            height = pygame.display.Info().current_h
            cell = cell_size_for(height) if height >= ROWS_PER_DESKTOP else DEFAULT_CELL
        if cell <= 0:
            cell = DEFAULT_CELL
        screen = pygame.display.set_mode((int(cell * 9), int(cell * 14)))
        pygame.display.set_caption(CAPTION)
        while True:
            if not Menu(screen, cell, args.data).start():
                break
            game = GamePlay(screen, cell, args.data)
            game.run()
            if game.closed:
                break
    finally:
        pygame.quit()
    return 0