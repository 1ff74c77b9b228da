"""The start menu with the title, high score and shop button."""

from __future__ import annotations

import sys
from enum import Enum, auto
from pathlib import Path

import pygame

from dtts.gameplay import GamePlay, _load_font, _load_optional_image, _load_skin
from dtts.shop import Shop, _draw_round_button
from dtts.title import Title

TITLE_FONT = "font/ariblk.ttf"
SHOP_IMAGE = "img/shop.png"
BUTTON_SOUND = "audio/button.wav"
CANDY_TEXT_COLOR = (255, 110, 38)
HIGH_SCORE_COLOR = (28, 188, 4)


class MenuAction(Enum):
    NONE = auto()
    SHOP = auto()
    START = auto()
    QUIT = auto()


def _load_sound(path: str):
    if not Path(path).is_file():
        return None
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError) as error:
        print(error, file=sys.stderr)
        return None


class Menu(GamePlay):
    """The screen shown before each round."""

    def __init__(self, screen: pygame.Surface, cell_size: float,
                 data_path: str | Path = "data") -> None:
        super().__init__(screen, cell_size, data_path)
        c = cell_size
        half = screen.get_width() / 2

        self.shop_button = (c, c * 5, c * 1.2, c * 1.2)
        self._shop_image = _load_optional_image(SHOP_IMAGE)

        self.title = Title(_load_font(TITLE_FONT, c * 0.75))
        self.title.set_disk(half, c * 7, c * 2)
        self.title.position = (half - self.title.size[0] / 2, c * 2)

        self.candy.x = half - self.candy.size[0]
        self.candy.y = c * 4.25
        self.candy.visible = True

        self._button_sound = _load_sound(BUTTON_SOUND)
        self._candy_font = _load_font(TITLE_FONT, 30 * c / 60)
        self._high_score_font = _load_font(TITLE_FONT, 30 * c / 50)

    @property
    def candy_text(self) -> str:
        return str(self.data.candy_amount)

    @property
    def high_score_text(self) -> str:
        return f"High Score: {self.data.high_score}"

    def _on_shop_button(self, point: tuple[float, float]) -> bool:
        left, top, width, height = self.shop_button
        x, y = point
        return left <= x < left + width and top <= y < top + height

    def handle_event(self, event: pygame.event.Event) -> MenuAction:
        """What the menu should do in response to ``event``."""
        if event.type == pygame.MOUSEBUTTONUP:
            if getattr(event, "button", 1) in (4, 5):
                return MenuAction.NONE
            if self._on_shop_button(event.pos):
                return MenuAction.SHOP
            return MenuAction.START
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                return MenuAction.START
            if event.key == pygame.K_ESCAPE:
                return MenuAction.QUIT
        if event.type == pygame.QUIT:
            return MenuAction.QUIT
        return MenuAction.NONE

    def draw(self) -> None:
        c = self.cell_size
        screen = self.screen
        screen.fill((0, 0, 0))
        self._draw_background()
        self.title.draw(screen)
        self.bird.draw(screen)
        self.spikes.draw(screen)
        self.candy.draw(screen)
        candy_text = self._candy_font.render(self.candy_text, True, CANDY_TEXT_COLOR)
        screen.blit(candy_text, (round(self.candy.x + self.candy.size[0] * 1.25),
                                 round(self.candy.y)))
        high = self._high_score_font.render(self.high_score_text, True, HIGH_SCORE_COLOR)
        screen.blit(high, (round(screen.get_width() / 2 - high.get_width() / 2),
                           round(c * 12)))
        _draw_round_button(screen, self._shop_image, self.shop_button)
        if screen is pygame.display.get_surface():
            pygame.display.flip()

    def _open_shop(self) -> None:
        if self._button_sound is not None:
            self._button_sound.play()
        shop = Shop(self.screen, self.cell_size, self.data_path)
        self.bird.set_frames(_load_skin(shop.open()))
        if shop.closed:
            self.closed = True

    def start(self) -> bool:
        """Show the menu; True when a round should start, False when the window closes."""
        self.spikes.cell_size = self.cell_size
        self.spikes.place_side(0)
        clock = pygame.time.Clock()
        started = False
        while not started:
            for event in pygame.event.get():
                action = self.handle_event(event)
                if action is MenuAction.SHOP:
                    self._open_shop()
                elif action is MenuAction.START:
                    started = True
                elif action is MenuAction.QUIT:
                    self.closed = True
                if self.closed:
                    return False
            self.draw()
            clock.tick(60)
        return True