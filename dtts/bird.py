"""The bird: its frames, sounds and flight."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any

import pygame

FRAME_SIZE = (340, 240)
SOUND_FILES = {
    "jump": "audio/jump.wav",
    "death": "audio/dead.wav",
    "point": "audio/point.wav",
}

Frames = tuple[pygame.Surface, pygame.Surface]


class Direction(IntEnum):
    LEFT = 0
    RIGHT = 1


def _blank_frame() -> pygame.Surface:
    frame = pygame.Surface(FRAME_SIZE, pygame.SRCALPHA)
    frame.fill((0, 0, 0, 0))
    return frame


def compose_down(sheet: pygame.Surface) -> pygame.Surface:
    """Body with the wing lowered, cut from a skin sheet."""
    frame = _blank_frame()
    frame.blit(sheet, (0, 0), pygame.Rect(0, 0, *FRAME_SIZE))
    frame.blit(sheet, (100, 120), pygame.Rect(340, 0, 100, 90))
    return frame


def compose_up(sheet: pygame.Surface) -> pygame.Surface:
    """Body with the wing raised, cut from a skin sheet."""
    frame = _blank_frame()
    frame.blit(sheet, (0, 0), pygame.Rect(0, 0, *FRAME_SIZE))
    flipped = pygame.transform.flip(sheet, False, True)
    frame.blit(flipped, (100, 40), pygame.Rect(340, 140, 100, 90))
    return frame


def load_frames(path: str | Path) -> Frames:
    """Load a skin sheet and build its (down, up) frames."""
    sheet = pygame.image.load(str(path))
    return compose_down(sheet), compose_up(sheet)


@dataclass
class BirdSounds:
    """The jump, death and point sounds; missing ones stay silent."""

    sounds: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls) -> BirdSounds:
        present = {name: path for name, path in SOUND_FILES.items() if Path(path).is_file()}
        if not present:
            return cls()
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error:
            return cls()
        loaded = {}
        for name, path in present.items():
            try:
                loaded[name] = pygame.mixer.Sound(path)
            except (pygame.error, OSError):
                continue
        return cls(loaded)

    def play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()


class Bird:
    """The player's bird, bouncing between the walls."""

    def __init__(self, frames: Frames, sounds: BirdSounds | None = None,
                 scale: float = 1.0) -> None:
        self.down, self.up = frames
        self.sounds = sounds if sounds is not None else BirdSounds()
        self.scale = scale
        self.x = 0.0
        self.y = 0.0
        self.direction = Direction.RIGHT
        self._vertical_speed = 0
        self.horizontal_speed = 10.0
        self.alive = True
        self._showing_up = False

    @property
    def vertical_speed(self) -> int:
        return self._vertical_speed

    @vertical_speed.setter
    def vertical_speed(self, speed: float) -> None:
        self._vertical_speed = math.trunc(speed)

    @property
    def image(self) -> pygame.Surface:
        return self.up if self._showing_up else self.down

    def step(self) -> None:
        """Advance one physics tick."""
        dx = -self.horizontal_speed if self.direction is Direction.LEFT else self.horizontal_speed
        self.move_by(dx, self.vertical_speed)
        self.vertical_speed = self.vertical_speed + 1.25
        if self.vertical_speed > 0:
            self._showing_up = False

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def bounce(self) -> None:
        """Turn around at a wall and speed up slightly."""
        self.direction = Direction.RIGHT if self.direction is Direction.LEFT else Direction.LEFT
        self.horizontal_speed += 0.125
        if self.alive:
            self.sounds.play("point")

    def toss(self) -> None:
        """Flap upwards."""
        self._showing_up = True
        self.vertical_speed = -15
        if self.alive:
            self.sounds.play("jump")

    def kill(self, dead_image: pygame.Surface | None = None) -> None:
        if self.alive:
            self.sounds.play("death")
        if dead_image is not None:
            self.down = dead_image
        self.alive = False

    def set_frames(self, frames: Frames) -> None:
        self.down, self.up = frames

    def bounds(self) -> tuple[float, float, float, float]:
        """Screen rectangle (left, top, width, height) covered by the bird."""
        width = FRAME_SIZE[0] * self.scale
        height = FRAME_SIZE[1] * self.scale
        left = self.x
        if self.direction is Direction.LEFT:
            left = self.x - (FRAME_SIZE[0] - FRAME_SIZE[1]) * self.scale
        return left, self.y, width, height

    def draw(self, surface: pygame.Surface) -> None:
        left, top, width, height = self.bounds()
        image = pygame.transform.scale(self.image, (max(1, round(width)), max(1, round(height))))
        if self.direction is Direction.LEFT:
            image = pygame.transform.flip(image, True, False)
        surface.blit(image, (round(left), round(top)))