"""The skin shop: buy and pick the bird's look with collected candies."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pygame

from dtts.candy import Candy
from dtts.gameplay import (
    BACKGROUND_COLOR,
    CANDY_IMAGE,
    OUTLINE_COLOR,
    _load_font,
    _load_image,
    _load_optional_image,
    _load_skin,
)
from dtts.savedata import SKIN_SLOTS, SaveData
from dtts.skintile import PRICE_COLOR, SkinTile
from dtts.spikes import Spikes

SKIN_NAMES = ("bird.png", "bird1.png", "bird2.png", "bird3.png", "bird4.png") + ("",) * 15
SKIN_DIRECTORY = "img/skins/"
FALLBACK_SKIN = "bird.png"
TILE_ROWS = 10
MAX_SCROLL = 32
SHOP_FONT = "font/ariblk.ttf"
RETURN_IMAGE = "img/return.png"

Rect = tuple[float, float, float, float]


def _check_index(index: int) -> None:
    if not 0 <= index < SKIN_SLOTS:
        raise IndexError(f"skin index {index} out of range 0..{SKIN_SLOTS - 1}")


def tile_price(index: int) -> int:
    """Candies needed to buy the skin in slot ``index``."""
    _check_index(index)
    return 100 + 50 * (index % 10 // 2)


def skin_path(index: int) -> str:
    """Image path of the skin in slot ``index``."""
    _check_index(index)
    return SKIN_DIRECTORY + (SKIN_NAMES[index] or FALLBACK_SKIN)


def _contains(rect: Rect, point: tuple[float, float]) -> bool:
    left, top, width, height = rect
    x, y = point
    return left <= x < left + width and top <= y < top + height


def _pixel_rect(left: float, top: float, width: float, height: float) -> pygame.Rect:
    return pygame.Rect(round(left), round(top), round(width), round(height))


def _draw_round_button(surface: pygame.Surface, image: pygame.Surface | None,
                       rect: Rect) -> None:
    left, top, width, height = rect
    size = (max(1, round(width)), max(1, round(height)))
    button = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.ellipse(button, (255, 255, 255, 255), button.get_rect())
    if image is not None:
        button.blit(pygame.transform.scale(image, size), (0, 0),
                    special_flags=pygame.BLEND_RGBA_MULT)
    surface.blit(button, (round(left), round(top)))


class Shop:
    """A scrollable grid of skin tiles."""

    def __init__(self, screen: pygame.Surface, cell_size: float,
                 data_path: str | Path = "data") -> None:
        c = cell_size
        self.screen = screen
        self.cell_size = cell_size
        self.data_path = Path(data_path)
        self.data = SaveData.load(self.data_path)
        self.offset = 0.0
        self.closed = False

        self.spikes = Spikes(c, OUTLINE_COLOR, random.Random())
        self.spikes.place_top_bottom()

        candy_image = _load_image(CANDY_IMAGE, (340, 340))
        self.candy = Candy(candy_image, (candy_image.get_width() * c / 240,
                                         candy_image.get_height() * c / 240))
        self.candy.x, self.candy.y = c * 5, c * 1.5
        self.candy.visible = True

        self.return_button: Rect = (c * 1.5, c * 1.25, c * 1.2, c * 1.2)
        self._return_image = _load_optional_image(RETURN_IMAGE)
        self._font = _load_font(SHOP_FONT, 30 * c / 40)

        tile_font = _load_font(SHOP_FONT, 30)
        self.tiles = [
            SkinTile(c, self.data.bought_skins[index], tile_price(index),
                     _load_skin(skin_path(index))[0], tile_font)
            for index in range(SKIN_SLOTS)
        ]
        self.move_tiles()

    @property
    def skin_name(self) -> str:
        """Path of the skin currently chosen."""
        return self.data.skin_name

    @property
    def candy_text(self) -> str:
        return str(self.data.candy_amount)

    def move_tiles(self) -> None:
        """Clamp the scroll offset and lay the tiles out in two columns."""
        self.offset = min(0.0, max(-float(MAX_SCROLL), self.offset))
        c = self.cell_size
        for index, tile in enumerate(self.tiles):
            column, row = divmod(index, TILE_ROWS)
            tile.set_position(c + c * 4 * column,
                              c * 3 + c * 1.5 * row + (c * 0.15) * self.offset)

    def scroll(self, delta: float) -> None:
        self.offset += delta
        self.move_tiles()

    def buy_skin(self, number: int) -> None:
        """Buy skin ``number`` if there are enough candies, and choose it."""
        tile = self.tiles[number]
        if self.data.candy_amount >= tile.price:
            self.data.candy_amount -= tile.price
            tile.unlocked = True
            self.data.skin_name = skin_path(number)
        self.data.bought_skins[number] = True

    def click(self, point: tuple[float, float]) -> bool:
        """Handle a click at ``point``; returns whether the shop should close."""
        selected = _contains(self.return_button, point)
        for index, tile in enumerate(self.tiles):
            if not tile.contains(point):
                continue
            if tile.unlocked:
                self.data.skin_name = skin_path(index)
                selected = True
            else:
                self.buy_skin(index)
        return selected

    def draw(self) -> None:
        c = self.cell_size
        screen = self.screen
        screen.fill((0, 0, 0))
        self.spikes.draw(screen)
        outline = c / 2
        screen.fill(OUTLINE_COLOR, _pixel_rect(c / 2 - outline, c / 2 - outline,
                                               c * 8 + 2 * outline, c * 13 + 2 * outline))
        screen.fill(BACKGROUND_COLOR, _pixel_rect(c / 2, c / 2, c * 8, c * 13))
        for tile in self.tiles:
            tile.draw(screen)
        screen.fill(OUTLINE_COLOR, _pixel_rect(0, 0, c * 9, c / 2))
        screen.fill(BACKGROUND_COLOR, _pixel_rect(c / 2, c / 2, c * 8, c * 2))
        screen.fill(OUTLINE_COLOR, _pixel_rect(0, c * 13.5, c * 9, c / 2))
        self.spikes.draw(screen)
        self.candy.draw(screen)
        text = self._font.render(self.candy_text, True, PRICE_COLOR)
        screen.blit(text, (round(self.candy.x + self.candy.size[0] * 1.25),
                           round(self.candy.y)))
        _draw_round_button(screen, self._return_image, self.return_button)
        if screen is pygame.display.get_surface():
            pygame.display.flip()

    def _save(self) -> None:
        try:
            self.data.save(self.data_path, 0)
        except OSError as error:
            print(error, file=sys.stderr)

    def open(self) -> str:
        """Run the shop until a skin is picked or it is left; returns the skin path."""
        clock = pygame.time.Clock()
        selected = False
        while not selected:
            for event in pygame.event.get():
                if event.type == pygame.MOUSEWHEEL:
                    self.scroll(event.y)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if getattr(event, "button", 1) in (4, 5):
                        continue
                    if self.click(event.pos):
                        selected = True
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    selected = True
                elif event.type == pygame.QUIT:
                    self.closed = True
                    selected = True
            self.draw()
            clock.tick(60)
        self._save()
        return self.skin_name