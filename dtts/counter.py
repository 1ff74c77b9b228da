"""The score counter shown on a disk in the middle of the field."""

from __future__ import annotations

import pygame

Color = tuple[int, int, int]


class Counter:
    """Current score, drawn over a white disk."""

    def __init__(self, font: pygame.font.Font, size: float = 144.0) -> None:
        self.font = font
        self.score = 0
        self.color: Color = (0, 0, 0)
        self.disk_color: Color = (255, 255, 255)
        self.disk_radius = size
        self.disk_position = (0.0, 0.0)
        self.position = (0.0, 0.0)
        self.origin = (0.0, 0.0)

    @property
    def text(self) -> str:
        return str(self.score)

    def add_point(self) -> None:
        self.score += 1

    def place(self, x: float, y: float) -> None:
        """Centre the disk on (x, y) and put the number over it."""
        r = self.disk_radius
        disk_x, disk_y = x - r, y - r
        self.disk_position = (disk_x, disk_y)
        width, height = self.font.size(self.text)
        if self.score < 10:
            text_x = disk_x + r - 4 + width / 2
        else:
            text_x = disk_x + r - 4 - width / 10
        self.position = (text_x, disk_y + r / 2 + height / 2)

    def draw(self, surface: pygame.Surface) -> None:
        r = self.disk_radius
        centre = (round(self.disk_position[0] + r), round(self.disk_position[1] + r))
        pygame.draw.circle(surface, self.disk_color, centre, round(r))
        rendered = self.font.render(self.text, True, self.color)
        surface.blit(rendered, (round(self.position[0] - self.origin[0]),
                                round(self.position[1] - self.origin[1])))