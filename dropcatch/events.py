"""Input events and the handlers that turn raw callbacks into queued events."""

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

KEY_UNKNOWN = -1


class EventType(IntEnum):
    """Kind of an input event."""

    UNDEFINED = -1
    KEY_PRESSED = 0
    KEY_RELEASED = 1
    MOUSE_BUTTON_PRESSED = 2
    MOUSE_BUTTON_RELEASED = 3
    CURSOR_MOVED = 4


class Action(IntEnum):
    """Action reported by a key or mouse button callback."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class InputEvent:
    """A single input event; ``code`` for keys and buttons, ``x``/``y`` for the cursor."""

    type: EventType
    code: int = 0
    x: float = 0.0
    y: float = 0.0


class EventQueue:
    """First-in, first-out queue of input events."""

    def __init__(self) -> None:
        self._events: deque[InputEvent] = deque()

    def poll(self) -> InputEvent | None:
        """Remove and return the oldest event, or None when the queue is empty."""
        return self._events.popleft() if self._events else None

    def send(self, event: InputEvent) -> None:
        self._events.append(event)

    def drain(self) -> Iterator[InputEvent]:
        """Yield queued events until the queue is empty."""
        while (event := self.poll()) is not None:
            yield event

    def __len__(self) -> int:
        return len(self._events)


def _press_or_release(action: int) -> bool:
    return action in (Action.PRESS, Action.RELEASE)


class KeyHandler(EventQueue):
    """Queues key press and release events."""

    def callback(self, key: int, scancode: int, action: int, mods: int) -> None:
        if key == KEY_UNKNOWN or not _press_or_release(action):
            return
        kind = EventType.KEY_PRESSED if action == Action.PRESS else EventType.KEY_RELEASED
        self.send(InputEvent(kind, code=key))


class MouseButtonHandler(EventQueue):
    """Queues mouse button press and release events."""

    def callback(self, button: int, action: int, mods: int) -> None:
        if button == KEY_UNKNOWN or not _press_or_release(action):
            return
        kind = (
            EventType.MOUSE_BUTTON_PRESSED
            if action == Action.PRESS
            else EventType.MOUSE_BUTTON_RELEASED
        )
        self.send(InputEvent(kind, code=button))


class CursorPosHandler(EventQueue):
    """Queues cursor movement events."""

    def callback(self, x: float, y: float) -> None:
        self.send(InputEvent(EventType.CURSOR_MOVED, x=x, y=y))