"""A tile in the skin shop."""

from __future__ import annotations

import pygame

BACKGROUND_COLOR = (180, 180, 180)
PRICE_COLOR = (255, 110, 38)


class SkinTile:
    """Shows a skin when unlocked and its price otherwise."""

    def __init__(self, cell_size: float, unlocked: bool, price: int,
                 bird_image: pygame.Surface, font: pygame.font.Font) -> None:
        self.cell_size = cell_size
        self.unlocked = unlocked
        self.price = price
        self.background_size = (cell_size * 3, cell_size * 1.2)
        self.background_position = (0.0, 0.0)

        scale = cell_size * 1.2 / 290
        width, height = bird_image.get_size()
        self._bird_size = (width * scale, height * scale)
        self._bird_image = pygame.transform.scale(
            bird_image, (max(1, round(width * scale)), max(1, round(height * scale))))
        # the sprite's origin is half its scaled size, in unscaled coordinates
        self._bird_offset = (self._bird_size[0] / 2 * scale, self._bird_size[1] / 2 * scale)
        self.bird_position = (0.0, 0.0)

        text = font.render(str(price), True, PRICE_COLOR)
        factor = cell_size / 40
        self._price_image = pygame.transform.scale(
            text, (max(1, round(text.get_width() * factor)),
                   max(1, round(text.get_height() * factor))))
        self.price_position = (0.0, 0.0)

    def set_position(self, x: float, y: float) -> None:
        bw, bh = self.background_size
        self.background_position = (x, y)
        sw, sh = self._bird_size
        self.bird_position = (x + bw / 2 - sw / 2.5, y + bh / 2 - sh / 2.5)
        pw, ph = self._price_image.get_size()
        self.price_position = (x + bw / 2 - pw / 2, y + bh / 2 - ph / 1.25)

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies on the tile's background."""
        x, y = point
        left, top = self.background_position
        width, height = self.background_size
        return left <= x < left + width and top <= y < top + height

    def draw(self, surface: pygame.Surface) -> None:
        left, top = self.background_position
        width, height = self.background_size
        surface.fill(BACKGROUND_COLOR, pygame.Rect(round(left), round(top),
                                                   round(width), round(height)))
        if self.unlocked:
            x = self.bird_position[0] - self._bird_offset[0]
            y = self.bird_position[1] - self._bird_offset[1]
            surface.blit(self._bird_image, (round(x), round(y)))
        else:
            surface.blit(self._price_image,
                         (round(self.price_position[0]), round(self.price_position[1])))