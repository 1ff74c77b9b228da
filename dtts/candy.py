"""A collectable candy."""

from __future__ import annotations

import pygame

Rect = tuple[float, float, float, float]


def _intersects(a: Rect, b: Rect) -> bool:
    left = max(a[0], b[0])
    top = max(a[1], b[1])
    right = min(a[0] + a[2], b[0] + b[2])
    bottom = min(a[1] + a[3], b[1] + b[3])
    return left < right and top < bottom


class Candy:
    """A candy the bird can pick up while it is visible."""

    def __init__(self, image: pygame.Surface, size: tuple[float, float] | None = None) -> None:
        self.image = image
        self.size = size if size is not None else image.get_size()
        self.x = 0.0
        self.y = 0.0
        self.visible = False

    def bounds(self) -> Rect:
        return self.x, self.y, self.size[0], self.size[1]

    def collide(self, rect: Rect) -> bool:
        """Pick the candy up if it is visible and overlaps ``rect``."""
        if not self.visible:
            return False
        if _intersects(self.bounds(), rect):
            self.visible = False
            return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        width, height = (max(1, round(v)) for v in self.size)
        surface.blit(pygame.transform.scale(self.image, (width, height)),
                     (round(self.x), round(self.y)))