"""Spikes along the side walls, the floor and the ceiling."""

from __future__ import annotations

import random as _random

import pygame

SIDE_SLOTS = 12
EDGE_SPIKES = 8

Point = tuple[float, float]
Triangle = tuple[Point, Point, Point]
Color = tuple[int, int, int]


def spike_count(counter: int) -> int:
    """Number of wall spikes for the given score."""
    number = abs(counter) // 5
    if counter < 0:
        number = -number
    if number >= SIDE_SLOTS:
        return SIDE_SLOTS - 1
    if number == 0 and counter != 0:
        return 1
    return number


class Spikes:
    """The spike layout of the playing field."""

    def __init__(self, cell_size: float = 72.0, color: Color = (0, 0, 0),
                 rng: _random.Random | None = None) -> None:
        self.cell_size = cell_size
        self.color = color
        self.rng = rng if rng is not None else _random.Random()
        self.counter = 1
        self.side = [False] * SIDE_SLOTS
        self.triangles: list[Triangle] = []
        self._edge_color = color

    def random(self, maximum: int) -> int:
        """A uniformly drawn integer from 0 to ``maximum`` inclusive."""
        return self.rng.randint(0, maximum)

    def place_top_bottom(self) -> None:
        """Lay out the eight spikes on the floor and the eight on the ceiling."""
        c = self.cell_size
        bottom = [
            ((c / 2 + c * i, c * 13.75),
             (c / 2 + c * (i + 0.5), c * 13),
             (c / 2 + c * (i + 1), c * 13.75))
            for i in range(EDGE_SPIKES)
        ]
        top = [
            ((c / 2 + c * i, c * 0.25),
             (c / 2 + c * (i + 0.5), c),
             (c / 2 + c * (i + 1), c * 0.25))
            for i in range(EDGE_SPIKES)
        ]
        self.triangles = bottom + top
        self._edge_color = self.color

    def place_side(self, counter: int) -> None:
        """Choose fresh wall spikes for the wall the bird flies towards."""
        self.counter = counter
        self.side = [False] * SIDE_SLOTS
        for _ in range(spike_count(counter)):
            index = self.random(SIDE_SLOTS - 1)
            while self.side[index]:
                index = self.random(SIDE_SLOTS - 1)
            self.side[index] = True
        self.place_top_bottom()

    def collides(self, y: float) -> bool:
        """Whether a bird at height ``y`` hits one of the wall spikes."""
        c = self.cell_size
        centre = y + 0.5 * c
        return any(
            (i * c + c - 0.25 * c) < centre < ((i + 1) * c + c + 0.25 * c)
            for i, active in enumerate(self.side)
            if active
        )

    def side_triangles(self) -> list[Triangle]:
        """Triangles of the active wall spikes, on the left for odd counters."""
        c = self.cell_size
        left = self.counter % 2 == 1
        triangles: list[Triangle] = []
        for i, active in enumerate(self.side):
            if not active:
                continue
            if left:
                triangles.append(((c * 0.4, i * c + c),
                                  (c, (i + 0.5) * c + c),
                                  (c * 0.4, (i + 1) * c + c)))
            else:
                triangles.append(((c * 8.6, i * c + c),
                                  (c * 8, (i + 0.5) * c + c),
                                  (c * 8.6, (i + 1) * c + c)))
        return triangles

    def draw(self, surface: pygame.Surface) -> None:
        """Paint every spike onto ``surface``."""
        for triangle in self.side_triangles():
            pygame.draw.polygon(surface, self.color, triangle)
        for triangle in self.triangles:
            pygame.draw.polygon(surface, self._edge_color, triangle)