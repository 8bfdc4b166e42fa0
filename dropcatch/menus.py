"""Main menu, pause menu and game-over screen."""

from collections.abc import Sequence

from dropcatch.button import Button
from dropcatch.draw_manager import DrawManager
from dropcatch.ids import ColorState, StateId, TextureId
from dropcatch.message_bus import Message
from dropcatch.state import WINDOW_SIZE, State

BACKGROUND = (0.8, 0.8, 0.8, 1.0)
BUTTON_COLORS = {
    ColorState.DEFAULT: (0.6, 0.4, 0.4, 1.0),
    ColorState.HOVERED: (0.8, 0.6, 0.6, 1.0),
    ColorState.ACTIVE: (0.7, 0.5, 0.5, 1.0),
}


def _style(button: Button, position, size, texture_id: TextureId) -> None:
    button.position = (float(position[0]), float(position[1]))
    button.size = (float(size[0]), float(size[1]))
    button.texture_id = texture_id
    for state, color in BUTTON_COLORS.items():
        button.set_color(state, color)


def _popup_geometry(window_size) -> tuple[tuple[float, float], tuple[float, float]]:
    width, height = window_size
    size = (width - 120.0, height - 450.0)
    position = ((width - size[0]) / 2.0, (height - size[1]) / 2.0 - 100.0)
    return size, position


class _Screen(State):
    """Shared set-up for screens drawn through their own frame."""

    def __init__(self, context, window_size: Sequence[int] = WINDOW_SIZE) -> None:
        super().__init__(context)
        width, height = window_size
        self._window_size = (int(width), int(height))
        self._draw_manager: DrawManager | None = None

    @property
    def window_size(self) -> tuple[int, int]:
        return self._window_size

    @property
    def draw_manager(self) -> DrawManager:
        if self._draw_manager is None:
            raise RuntimeError(f"{type(self).__name__} has not been created")
        return self._draw_manager


class MenuMain(_Screen):
    """Start screen with a play button and an exit button."""

    def __init__(self, context, window_size: Sequence[int] = WINDOW_SIZE) -> None:
        super().__init__(context, window_size)
        self.play_button = Button()
        self.exit_button = Button()

    def create(self) -> None:
        width, height = self._window_size
        manager = DrawManager((width, height), clear_color=BACKGROUND)

        button_size = (300.0, 100.0)
        x = (width - button_size[0]) / 2.0
        y = 180.0
        _style(self.play_button, (x, y), button_size, TextureId.BUTTON_START)
        y += button_size[1] + 50.0
        _style(self.exit_button, (x, y), button_size, TextureId.BUTTON_EXIT)

        manager.add(self.play_button, 0)
        manager.add(self.exit_button, 0)
        self._draw_manager = manager

    def handle_message(self, message: Message) -> None:
        pass

    def update(self, dt: float) -> None:
        if self.play_button.check(self.context):
            self.message_bus.send_state_stack_clear()
            self.message_bus.send_state_stack_push(StateId.GAME)
        if self.exit_button.check(self.context):
            self.message_bus.send_close_app()

    def render(self, target) -> None:
        self.draw_manager.draw(target, self.resources)


class MenuInGame(_Screen):
    """Pause pop-up with continue and exit buttons."""

    def __init__(self, context, window_size: Sequence[int] = WINDOW_SIZE) -> None:
        super().__init__(context, window_size)
        self.continue_button = Button()
        self.exit_button = Button()
        self.window_pos = (0.0, 0.0)

    def create(self) -> None:
        size, self.window_pos = _popup_geometry(self._window_size)
        manager = DrawManager(size, clear_color=BACKGROUND, position=self.window_pos)

        button_size = (200.0, 65.0)
        x = (size[0] - button_size[0]) / 2.0
        y = 20.0
        _style(self.continue_button, (x, y), button_size, TextureId.BUTTON_CONTINUE)
        y += button_size[1] + 20.0
        _style(self.exit_button, (x, y), button_size, TextureId.BUTTON_EXIT)

        manager.add(self.continue_button, 0)
        manager.add(self.exit_button, 0)
        self._draw_manager = manager

    def handle_message(self, message: Message) -> None:
        pass

    def update(self, dt: float) -> None:
        if self.continue_button.check(self.context, self.window_pos):
            self.message_bus.send_state_process(StateId.GAME, True, True)
            self.message_bus.send_state_stack_pop()
        if self.exit_button.check(self.context, self.window_pos):
            self.message_bus.send_close_app()

    def render(self, target) -> None:
        self.draw_manager.draw(target, self.resources)


class GameOver(_Screen):
    """Pop-up shown when an enemy gets past the player, with an exit button."""

    def __init__(self, context, window_size: Sequence[int] = WINDOW_SIZE) -> None:
        super().__init__(context, window_size)
        self.exit_button = Button()
        self.window_pos = (0.0, 0.0)

    def create(self) -> None:
        size, self.window_pos = _popup_geometry(self._window_size)
        manager = DrawManager(size, clear_color=BACKGROUND, position=self.window_pos)

        button_size = (200.0, 65.0)
        x = (size[0] - button_size[0]) / 2.0
        _style(self.exit_button, (x, 70.0), button_size, TextureId.BUTTON_EXIT)

        manager.add(self.exit_button, 0)
        self._draw_manager = manager

    def handle_message(self, message: Message) -> None:
        pass

    def update(self, dt: float) -> None:
        if self.exit_button.check(self.context, self.window_pos):
            self.message_bus.send_close_app()

    def render(self, target) -> None:
        self.draw_manager.draw(target, self.resources)