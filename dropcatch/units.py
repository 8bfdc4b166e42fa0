"""Player, falling enemies and the spawner that drops them."""

import math
import random
from abc import abstractmethod
from collections.abc import Sequence
from enum import IntEnum

import pygame

from dropcatch import draw
from dropcatch.draw_manager import Drawable
from dropcatch.ids import TextureId

ENEMY_SIZE = 50.0
_ANGULAR_SPEED = 3.1415
_SWAY = 2.5


class Unit(Drawable):
    """Something with a position (top-left), a square size and a colour."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0),
        size: float = 0.0,
        color: Sequence[float] = (1.0, 1.0, 1.0, 1.0),
    ) -> None:
        self.position = position
        self.size = float(size)
        self.color = color

    @property
    def position(self) -> tuple[float, float]:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        x, y = value
        self._position = (float(x), float(y))

    @property
    def color(self) -> tuple[float, float, float, float]:
        return self._color

    @color.setter
    def color(self, value: Sequence[float]) -> None:
        channels = tuple(float(c) for c in value)
        if len(channels) == 3:
            channels += (1.0,)
        if len(channels) != 4:
            raise ValueError(f"colour needs 3 or 4 channels, got {len(channels)}")
        self._color = channels

    def _distance(self, other: "Unit") -> float:
        return math.dist(self.position, other.position)

    def _draw_texture(self, target: pygame.Surface, resources, texture_id: TextureId) -> None:
        x, y = self.position
        half = self.size / 2.0
        draw.sprite(
            target, resources, texture_id, (x + half, y + half), (self.size, self.size), self.color
        )

    @abstractmethod
    def check_collision(self, other: "Unit") -> bool:
        """True if this unit touches ``other``."""


class Box(Unit):
    def check_collision(self, other: Unit) -> bool:
        return self._distance(other) < self.size / 2.0 + other.size / 2.0

    def draw(self, target: pygame.Surface, resources) -> None:
        self._draw_texture(target, resources, TextureId.BOX)


class MovementType(IntEnum):
    UNDEFINED = -1
    LINEAR = 0
    ZIGZAG = 1
    SPIRAL = 2


class Movement:
    """Moves an enemy down the screen along a straight, zigzag or spiral path."""

    def __init__(
        self, movement_type: MovementType = MovementType.UNDEFINED, speed: float = 0.0
    ) -> None:
        self.type = MovementType(movement_type)
        self.speed = float(speed)
        self.angle = 0.0

    def process(self, enemy: "Enemy", dt: float) -> None:
        if self.type is MovementType.LINEAR:
            enemy.move(0.0, self.speed * dt)
        elif self.type is MovementType.ZIGZAG:
            self.angle += _ANGULAR_SPEED * dt
            enemy.move(math.sin(self.angle) * _SWAY, self.speed * dt)
        elif self.type is MovementType.SPIRAL:
            self.angle += _ANGULAR_SPEED * dt
            enemy.move(
                math.cos(self.angle) * _SWAY,
                math.sin(self.angle) * _SWAY + self.speed * 0.5 * dt,
            )


class Enemy(Unit):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.movement = Movement()

    def check_collision(self, other: Unit) -> bool:
        return self._distance(other) < self.size + other.size

    def draw(self, target: pygame.Surface, resources) -> None:
        self._draw_texture(target, resources, TextureId.CIRCLE)

    def move(self, dx: float, dy: float) -> None:
        x, y = self.position
        self.position = (x + dx, y + dy)

    def create_movement(self, movement_type: MovementType, speed: float) -> None:
        self.movement = Movement(movement_type, speed)

    def movement_process(self, dt: float) -> None:
        self.movement.process(self, dt)


class EnemySpawner:
    """Drops enemies at intervals, speeding up after every eleven catches.

    Removal is deferred: ``remove`` marks an enemy and ``prepare`` drops the
    marked ones, so the enemy list can be iterated while removing.
    """

    def __init__(self, width: float, rng: random.Random | None = None) -> None:
        self.width = float(width)
        self._rng = rng if rng is not None else random.Random()
        self._counter = 0
        self._timeline = 0.0
        self._move_speed = 60.0
        self._spawn_speed = 3.0
        self._enemies: list[Enemy] = []
        self._pending: list[Enemy] = []

    @property
    def enemies(self) -> tuple[Enemy, ...]:
        return tuple(self._enemies)

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def move_speed(self) -> float:
        return self._move_speed

    @property
    def spawn_speed(self) -> float:
        """Seconds between spawns."""
        return self._spawn_speed

    def __iter__(self):
        return iter(tuple(self._enemies))

    def __len__(self) -> int:
        return len(self._enemies)

    def prepare(self) -> None:
        """Drop the enemies marked for removal."""
        marked = {id(enemy) for enemy in self._pending if enemy is not None}
        self._enemies = [e for e in self._enemies if id(e) not in marked]
        self._pending.clear()

    def movement_process(self, dt: float) -> None:
        for enemy in self._enemies:
            enemy.movement_process(dt)

    def create(self, dt: float) -> Enemy | None:
        """Advance the timer and return a new enemy when one is due."""
        self._timeline += dt
        if self._timeline < self._spawn_speed:
            return None

        self._timeline = 0.0
        if self._counter > 10:
            self._counter = 0
            self._spawn_speed = max(self._spawn_speed - 0.01, 0.05)
            self._move_speed += 10.0

        rng = self._rng
        x = rng.uniform(ENEMY_SIZE, self.width - ENEMY_SIZE * 2.0)
        color = (rng.random(), rng.random(), rng.random())
        movement_type = MovementType(math.floor(rng.uniform(0.0, 2.0) + 0.5))

        enemy = Enemy((x, ENEMY_SIZE), ENEMY_SIZE, color)
        enemy.create_movement(movement_type, self._move_speed)
        self._enemies.append(enemy)
        return enemy

    def remove(self, enemy: Enemy) -> None:
        """Mark ``enemy`` for removal and count it as caught."""
        self._pending.append(enemy)
        self._counter += 1


class Player(Unit):
    """The player's circle with the catching box that moves alongside it."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.box = Box()

    def check_collision(self, other: Unit) -> bool:
        return self.box.check_collision(other)

    def draw(self, target: pygame.Surface, resources) -> None:
        self._draw_texture(target, resources, TextureId.CIRCLE)
        self.box.draw(target, resources)

    def move(self, offset: float) -> None:
        """Shift the player and its box horizontally."""
        x, y = self.position
        self.position = (x + offset, y)
        bx, by = self.box.position
        self.box.position = (bx + offset, by)