"""The playing state: move the box to catch falling enemies."""

import random
from collections.abc import Sequence

import pygame

from dropcatch.draw_manager import DrawManager
from dropcatch.ids import StateId
from dropcatch.message_bus import Message, MessageType
from dropcatch.state import WINDOW_SIZE, State
from dropcatch.units import EnemySpawner, Player

KEY_PAUSE = pygame.K_ESCAPE
KEY_LEFT = pygame.K_a
KEY_RIGHT = pygame.K_d
PLAYER_SPEED = 210.0

BACKGROUND = (0.8, 0.8, 0.8, 1.0)
ACTIVE_TINT = (1.0, 1.0, 1.0, 1.0)
PAUSED_TINT = (0.5, 0.5, 0.5, 1.0)


class Game(State):
    """Runs the player, the spawner and the catch and game-over checks."""

    def __init__(
        self,
        context,
        window_size: Sequence[int] = WINDOW_SIZE,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(context)
        width, height = window_size
        self._window_size = (int(width), int(height))
        self.player = Player()
        self.spawner = EnemySpawner(self._window_size[0], rng)
        self._draw_manager: DrawManager | None = None

    @property
    def window_size(self) -> tuple[int, int]:
        return self._window_size

    @property
    def draw_manager(self) -> DrawManager:
        if self._draw_manager is None:
            raise RuntimeError("game has not been created")
        return self._draw_manager

    def create(self) -> None:
        width, height = self._window_size
        manager = DrawManager((width, height), clear_color=BACKGROUND)

        self.player.position = ((width - 50.0) / 2.0, height - 50.0)
        self.player.size = 50.0
        self.player.color = (0.8, 0.2, 0.1)

        box = self.player.box
        box.position = ((width - 32.0) / 2.0, height - 32.0 - 40.0)
        box.size = 32.0
        box.color = (1.0, 1.0, 1.0)

        manager.add(self.player, 0)
        self._draw_manager = manager

    def handle_message(self, message: Message) -> None:
        if message.type == MessageType.STATE_PROCESS and message.state_id == StateId.GAME:
            self.draw_manager.color = ACTIVE_TINT if message.update else PAUSED_TINT

    def update(self, dt: float) -> None:
        manager = self.draw_manager
        bus = self.message_bus
        keyboard = self.keyboard

        if keyboard.is_just_clicked(KEY_PAUSE):
            bus.send_state_process(StateId.GAME, False, True)
            bus.send_state_stack_push(StateId.MENU_IN_GAME)

        if keyboard.is_clicked(KEY_LEFT):
            self.player.move(-PLAYER_SPEED * dt)
        if keyboard.is_clicked(KEY_RIGHT):
            self.player.move(PLAYER_SPEED * dt)

        self.spawner.prepare()
        enemy = self.spawner.create(dt)
        if enemy is not None:
            manager.add(enemy, 0)

        self.spawner.movement_process(dt)

        height = float(self._window_size[1])
        for enemy in self.spawner:
            if self.player.check_collision(enemy):
                self.spawner.remove(enemy)
                manager.remove(enemy)
            if enemy.position[1] > height:
                bus.send_state_process(StateId.GAME, False, True)
                bus.send_state_stack_push(StateId.GAME_OVER)
                break

    def render(self, target) -> None:
        self.draw_manager.draw(target, self.resources)