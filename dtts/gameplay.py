"""One round of the game: the bird flying between spiked walls."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pygame

from dtts.bird import FRAME_SIZE, Bird, BirdSounds, Direction, Frames, load_frames
from dtts.candy import Candy
from dtts.counter import Counter
from dtts.savedata import SaveData
from dtts.spikes import Spikes

Color = tuple[int, int, int]

BACKGROUND_COLOR: Color = (120, 120, 120)
OUTLINE_COLOR: Color = (166, 166, 166)
TICK_MS = 30
DEATH_DELAY_MS = 1500
COUNTER_FONT = "font/segoeuib.ttf"
CANDY_IMAGE = "img/candy.png"
DEAD_IMAGE = "img/bird_dead.png"


def next_color(color: Color) -> Color:
    """The background colour that follows ``color``."""
    r, g, b = color[:3]
    return (r + 41) % 256, (g + 87) % 256, (b + 163) % 256


def _load_image(path: str | Path, fallback_size: tuple[int, int]) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return pygame.Surface(fallback_size, pygame.SRCALPHA)


def _load_optional_image(path: str | Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


def _load_font(path: str | Path, size: float) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    size = max(1, round(size))
    try:
        return pygame.font.Font(str(path), size)
    except (pygame.error, OSError):
        return pygame.font.Font(None, size)


def _load_skin(path: str | Path) -> Frames:
    try:
        return load_frames(path)
    except (pygame.error, OSError):
        return (pygame.Surface(FRAME_SIZE, pygame.SRCALPHA),
                pygame.Surface(FRAME_SIZE, pygame.SRCALPHA))


class GamePlay:
    """A single game, from the first flap to the bird's death."""

    def __init__(self, screen: pygame.Surface, cell_size: float,
                 data_path: str | Path = "data") -> None:
        self.screen = screen
        self.cell_size = cell_size
        self.data_path = Path(data_path)
        self.data = SaveData.load(self.data_path)
        self.game_over = False
        self.closed = False
        self.background_color: Color = BACKGROUND_COLOR
        self.bird = Bird(_load_skin(self.data.skin_name), BirdSounds.load(),
                         cell_size * 1.25 / 290)
        self.counter = Counter(_load_font(COUNTER_FONT, cell_size * 2), cell_size * 2)
        self.spikes = Spikes(cell_size, OUTLINE_COLOR, random.Random())
        candy_image = _load_image(CANDY_IMAGE, (340, 340))
        self.candy = Candy(candy_image, (candy_image.get_width() * cell_size / 340,
                                         candy_image.get_height() * cell_size / 340))
        self._dead_image = _load_optional_image(DEAD_IMAGE)
        self._last_tick: int | None = None
        self._death_time: int | None = None
        self.initial_layout()

    def initial_layout(self) -> None:
        """Place the bird, counter and spikes for a fresh round."""
        c = self.cell_size
        width = self.screen.get_width()
        _, _, bird_width, _ = self.bird.bounds()
        self.bird.x = width / 2 - bird_width / 2
        self.bird.y = c * 6.5
        self.background_color = BACKGROUND_COLOR
        self.counter.origin = (c, c)
        self.counter.place(width / 2, c * 7)
        self.counter.color = BACKGROUND_COLOR
        self.spikes.color = OUTLINE_COLOR
        self.spikes.cell_size = c

    def change_color(self) -> None:
        color = next_color(self.background_color)
        self.background_color = color
        self.counter.color = color

    def place_candy(self) -> None:
        """Show the candy next to the wall it is not already on."""
        c = self.cell_size
        if self.candy.x != c and not self.candy.visible:
            self.candy.x, self.candy.y = c, c * self.spikes.random(9) + c * 2
        elif self.candy.x != c * 7 and not self.candy.visible:
            self.candy.x, self.candy.y = c * 7, c * self.spikes.random(9) + c * 2
        self.candy.visible = True

    def _save(self) -> None:
        try:
            self.data.save(self.data_path, self.counter.score)
        except OSError as error:
            print(error, file=sys.stderr)

    def _die(self, now: int) -> None:
        if self.bird.alive:
            self._death_time = now
        self.bird.kill(self._dead_image)
        self._save()

    def _near_wall(self, right_limit: float) -> bool:
        c = self.cell_size
        x = self.bird.x
        direction = self.bird.direction
        return ((x > right_limit and direction is Direction.RIGHT)
                or (x <= c and direction is Direction.LEFT))

    def tick(self, now: int) -> None:
        """Advance the game to time ``now`` in milliseconds."""
        if self._last_tick is None:
            self._last_tick = now
        c = self.cell_size
        if now - self._last_tick >= TICK_MS:
            if self._near_wall(c * 6.5):
                if self.spikes.collides(self.bird.y):
                    self._die(now)
                if self._near_wall(c * 7):
                    self.bird.bounce()
                    if self.bird.alive:
                        self.counter.add_point()
                    if self.counter.score % 5 == 0:
                        self.change_color()
                    self.spikes.place_side(self.counter.score)
                    self.place_candy()
            if self.bird.y >= c * 12 or self.bird.y <= c:
                self.bird.vertical_speed = -15 if self.bird.y > c else 15
                self._die(now)
            self.bird.step()
            if self.candy.collide(self.bird.bounds()):
                self.data.candy_amount += 1
            self._last_tick = now
        if (not self.bird.alive and self._death_time is not None
                and now - self._death_time >= DEATH_DELAY_MS):
            self.game_over = True

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.game_over = True
            self.closed = True
        elif ((event.type == pygame.MOUSEBUTTONUP
               or (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE))
              and self.bird.alive):
            self.bird.toss()

    def _draw_background(self) -> None:
        c = self.cell_size
        outline = c / 2
        self.screen.fill(OUTLINE_COLOR, pygame.Rect(
            round(c / 2 - outline), round(c / 2 - outline),
            round(c * 8 + 2 * outline), round(c * 13 + 2 * outline)))
        self.screen.fill(self.background_color, pygame.Rect(
            round(c / 2), round(c / 2), round(c * 8), round(c * 13)))

    def draw(self) -> None:
        self.screen.fill((0, 0, 0))
        self._draw_background()
        if self.counter.score >= 10:
            self.counter.place(self.screen.get_width() / 2, self.cell_size * 7)
        self.counter.draw(self.screen)
        self.bird.draw(self.screen)
        self.spikes.draw(self.screen)
        self.candy.draw(self.screen)
        if self.screen is pygame.display.get_surface():
            pygame.display.flip()

    def run(self) -> None:
        """Play until the bird has been dead a moment or the window closes."""
        self.bird.toss()
        self.spikes.place_top_bottom()
        clock = pygame.time.Clock()
        self._last_tick = pygame.time.get_ticks()
        while not self.game_over:
            for event in pygame.event.get():
                self.handle_event(event)
            if self.closed:
                break
            self.tick(pygame.time.get_ticks())
            self.draw()
            clock.tick(240)