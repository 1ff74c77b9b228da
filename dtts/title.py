"""The game title shown in the menu."""

from __future__ import annotations

import pygame

DEFAULT_TEXT = "Don't touch\n the spikes"

Color = tuple[int, int, int]


class Title:
    """Multi-line title text with a disk behind it."""

    def __init__(self, font: pygame.font.Font, text: str = DEFAULT_TEXT) -> None:
        self.font = font
        self.text = text
        self.color: Color = (255, 255, 255)
        self.disk_color: Color = (255, 255, 255)
        self.disk_radius = 0.0
        self.disk_position = (0.0, 0.0)
        self.position = (0.0, 0.0)

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    @property
    def size(self) -> tuple[int, int]:
        """Width and height of the rendered text block."""
        sizes = [self.font.size(line) for line in self.lines]
        return max(w for w, _ in sizes), sum(h for _, h in sizes)

    def set_disk(self, x: float, y: float, size: float) -> None:
        """Centre a disk of radius ``size`` on (x, y)."""
        self.disk_radius = size
        self.disk_position = (x - size, y - size)

    def draw(self, surface: pygame.Surface) -> None:
        r = self.disk_radius
        if r > 0:
            centre = (round(self.disk_position[0] + r), round(self.disk_position[1] + r))
            pygame.draw.circle(surface, self.disk_color, centre, round(r))
        x, y = self.position
        for line in self.lines:
            rendered = self.font.render(line, True, self.color)
            surface.blit(rendered, (round(x), round(y)))
            y += rendered.get_height()