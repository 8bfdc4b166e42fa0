"""Shared services handed to every game state."""

from dataclasses import dataclass

from dropcatch.input import Cursor, Keyboard, Mouse
from dropcatch.message_bus import MessageBus
from dropcatch.resources import Resources


@dataclass(frozen=True, eq=False)
class Context:
    keyboard: Keyboard
    mouse: Mouse
    cursor: Cursor
    message_bus: MessageBus
    resources: Resources