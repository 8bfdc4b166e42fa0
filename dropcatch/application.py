"""The application: window, input, resources and the state stack in one loop."""

import argparse
import random
import sys
from pathlib import Path

from dropcatch.clock import Clock
from dropcatch.context import Context
from dropcatch.event_manager import EventManager
from dropcatch.events import CursorPosHandler, KeyHandler, MouseButtonHandler
from dropcatch.game import Game
from dropcatch.ids import StateId, TextureId
from dropcatch.input import Cursor, FrameCounter, Keyboard, Mouse
from dropcatch.menus import GameOver, MenuInGame, MenuMain
from dropcatch.message_bus import MessageBus, MessageType
from dropcatch.resources import ResourceError, Resources
from dropcatch.state import WINDOW_SIZE, StateStack
from dropcatch.window import Window

TITLE = "SimpleGame"
DEFAULT_ASSETS = Path("assets")

TEXTURE_FILES = {
    TextureId.BUTTON_START: "button_start.png",
    TextureId.BUTTON_EXIT: "button_exit.png",
    TextureId.BUTTON_CONTINUE: "button_continue.png",
    TextureId.CIRCLE: "circle.png",
    TextureId.BOX: "box.png",
}


class Application:
    """Owns every subsystem and drives the event, message, update and render loop.

    ``event_source`` supplies window events (pygame's queue by default),
    ``clock`` measures frame time and ``rng`` seeds enemy spawning.
    """

    def __init__(
        self,
        assets_dir=DEFAULT_ASSETS,
        window_size=WINDOW_SIZE,
        title: str = TITLE,
        event_source=None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.assets_dir = Path(assets_dir)
        width, height = window_size
        self.window_size = (int(width), int(height))
        self.title = title
        self._rng = rng

        self.window = Window()
        if event_source is None:
            self.event_manager = EventManager(on_quit=self._on_quit)
        else:
            self.event_manager = EventManager(event_source, on_quit=self._on_quit)
        self.clock = clock if clock is not None else Clock()

        self.keyboard = Keyboard()
        self.mouse = Mouse()
        self.cursor = Cursor(on_toggle=self.window.set_cursor_active)
        self.message_bus = MessageBus()
        self.resources = Resources()

        self.context = Context(
            self.keyboard, self.mouse, self.cursor, self.message_bus, self.resources
        )
        self.state_stack = StateStack(self.context)

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info) -> None:
        self.window.__exit__(*exc_info)

    def _on_quit(self) -> None:
        self.window.close()

    def create(self) -> None:
        """Open the window, load textures, build the states and queue the main menu."""
        self.window.create(*self.window_size, self.title)
        self.window.set_vsync(True)
        self.window.set_clear_color(1.0, 1.0, 1.0)

        self.event_manager.set_key_handler(KeyHandler())
        self.event_manager.set_mouse_button_handler(MouseButtonHandler())
        self.event_manager.set_cursor_pos_handler(CursorPosHandler())

        self._create_textures()
        self._create_states()

    def _create_textures(self) -> None:
        images = self.assets_dir / "images"
        for texture_id, name in TEXTURE_FILES.items():
            self.resources.textures.load_from_file(texture_id, images / name)

    def _create_states(self) -> None:
        stack = self.state_stack
        stack.add_state(StateId.MENU_MAIN, MenuMain, self.window_size)
        stack.add_state(StateId.MENU_IN_GAME, MenuInGame, self.window_size)
        stack.add_state(StateId.GAME, Game, self.window_size, self._rng)
        stack.add_state(StateId.GAME_OVER, GameOver, self.window_size)
        stack.create()
        self.message_bus.send_state_stack_push(StateId.MENU_MAIN)

    def run(self) -> None:
        """Create everything and loop until the window is closed."""
        self.create()
        self.clock.elapsed()
        while self.window.is_open:
            self.handle_events()
            self.handle_messages()
            self.update(self.clock.elapsed())
            self.render()
            if self.state_stack.is_empty:
                self.window.close()

    def handle_events(self) -> None:
        """Start a new input frame and feed pending events to the input devices."""
        FrameCounter.update_frame()
        for event in self.event_manager.poll_events():
            self.keyboard.handle_event(event)
            self.mouse.handle_event(event)
            self.cursor.handle_event(event)

    def handle_messages(self) -> None:
        """Deliver this round's messages to the application and the state stack."""
        while (message := self.message_bus.poll()) is not None:
            if message.type == MessageType.CLOSE_APP:
                self.window.close()
            self.state_stack.handle_message(message)

    def update(self, dt: float) -> None:
        self.state_stack.update(dt)

    def render(self) -> None:
        self.window.clear()
        self.state_stack.render(self.window.surface)
        self.window.swap_buffers()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="dropcatch", description="Catch the falling circles.")
    parser.add_argument(
        "--assets",
        default=str(DEFAULT_ASSETS),
        help="directory holding the images/ folder (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    with Application(assets_dir=args.assets) as app:
        try:
            app.run()
        except ResourceError as exc:
            print(f"dropcatch: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())