"""Routes raw window events to the input handlers and drains their queues."""

from collections.abc import Callable, Iterable, Iterator

import pygame

from dropcatch.events import (
    KEY_UNKNOWN,
    Action,
    CursorPosHandler,
    InputEvent,
    KeyHandler,
    MouseButtonHandler,
)
from dropcatch.input import Keyboard, Mouse

MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1
MOUSE_BUTTON_MIDDLE = 2


def _key_code(key: int) -> int:
    return key if 0 <= key < Keyboard.SIZE else KEY_UNKNOWN


def _mouse_code(button: int) -> int:
    code = button - 1
    return code if 0 <= code < Mouse.SIZE else KEY_UNKNOWN


class EventManager:
    """Feeds window events to the key, mouse button and cursor handlers.

    ``event_source`` returns the window events that arrived since the last
    call; ``on_quit`` is called when the window is asked to close.
    """

    def __init__(
        self,
        event_source: Callable[[], Iterable[pygame.event.Event]] = pygame.event.get,
        on_quit: Callable[[], None] | None = None,
    ) -> None:
        self._event_source = event_source
        self._on_quit = on_quit
        self._key_handler: KeyHandler | None = None
        self._mouse_button_handler: MouseButtonHandler | None = None
        self._cursor_pos_handler: CursorPosHandler | None = None

    def set_key_handler(self, handler: KeyHandler) -> None:
        if handler is None:
            raise ValueError("key handler must not be None")
        self._key_handler = handler

    def set_mouse_button_handler(self, handler: MouseButtonHandler) -> None:
        if handler is None:
            raise ValueError("mouse button handler must not be None")
        self._mouse_button_handler = handler

    def set_cursor_pos_handler(self, handler: CursorPosHandler) -> None:
        if handler is None:
            raise ValueError("cursor position handler must not be None")
        self._cursor_pos_handler = handler

    def dispatch(self, event: pygame.event.Event) -> None:
        """Pass one window event to the handler responsible for it."""
        kind = event.type
        if kind == pygame.QUIT:
            if self._on_quit is not None:
                self._on_quit()
        elif kind in (pygame.KEYDOWN, pygame.KEYUP):
            if self._key_handler is not None:
                action = Action.PRESS if kind == pygame.KEYDOWN else Action.RELEASE
                self._key_handler.callback(
                    _key_code(event.key),
                    getattr(event, "scancode", 0),
                    action,
                    getattr(event, "mod", 0),
                )
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if self._mouse_button_handler is not None:
                action = Action.PRESS if kind == pygame.MOUSEBUTTONDOWN else Action.RELEASE
                self._mouse_button_handler.callback(_mouse_code(event.button), action, 0)
        elif kind == pygame.MOUSEMOTION:
            if self._cursor_pos_handler is not None:
                x, y = event.pos
                self._cursor_pos_handler.callback(float(x), float(y))

    def poll_events(self) -> Iterator[InputEvent]:
        """Fetch pending window events and yield the resulting input events.

        Key events come first, then mouse button events, then cursor moves.
        """
        for event in self._event_source():
            self.dispatch(event)
        for handler in (self._key_handler, self._mouse_button_handler, self._cursor_pos_handler):
            if handler is not None:
                yield from handler.drain()