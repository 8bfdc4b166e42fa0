"""Keyboard, mouse and cursor state tracked per frame."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from dropcatch.events import EventType, InputEvent


class FrameCounter:
    """Global frame number shared by every input device."""

    _frame = 0

    @classmethod
    def update_frame(cls) -> None:
        FrameCounter._frame += 1

    @classmethod
    def current_frame(cls) -> int:
        return FrameCounter._frame


class Input(FrameCounter, ABC):
    """Pressed state and last-change frame for a fixed number of codes."""

    SIZE = 0

    def __init__(self) -> None:
        self._active = [False] * self.SIZE
        self._frames = [0] * self.SIZE

    @abstractmethod
    def handle_event(self, event: InputEvent) -> None:
        """Update state from one input event."""

    def _in_range(self, code: int) -> bool:
        return 0 <= code < self.SIZE

    def is_clicked(self, code: int) -> bool:
        """True while the code is held down."""
        return self._in_range(code) and self._active[code]

    def is_just_clicked(self, code: int) -> bool:
        """True only in the frame the code went down."""
        return (
            self._in_range(code)
            and self._active[code]
            and self._frames[code] == self.current_frame()
        )

    def is_released(self, code: int) -> bool:
        """True only in the frame the code went up."""
        return (
            self._in_range(code)
            and not self._active[code]
            and self._frames[code] == self.current_frame()
        )

    def _set(self, code: int, active: bool, frame: int) -> None:
        if not self._in_range(code):
            raise ValueError(f"input code {code} out of range 0..{self.SIZE - 1}")
        self._active[code] = active
        self._frames[code] = frame


class Keyboard(Input):
    SIZE = 512

    def handle_event(self, event: InputEvent) -> None:
        if event.type is EventType.KEY_PRESSED:
            self._set(event.code, True, self.current_frame())
        elif event.type is EventType.KEY_RELEASED:
            self._set(event.code, False, self.current_frame())


class Mouse(Input):
    SIZE = 16

    def handle_event(self, event: InputEvent) -> None:
        if event.type is EventType.MOUSE_BUTTON_PRESSED:
            self._set(event.code, True, self.current_frame())
        elif event.type is EventType.MOUSE_BUTTON_RELEASED:
            self._set(event.code, False, self.current_frame())


class Cursor:
    """Cursor position, tracked only while the cursor is active.

    ``on_toggle`` is called with the new active flag whenever it is toggled,
    so the window can show or capture the pointer.
    """

    def __init__(self, on_toggle: Callable[[bool], None] | None = None) -> None:
        self._active = True
        self._local_pos = (0.0, 0.0)
        self._on_toggle = on_toggle

    @property
    def active(self) -> bool:
        return self._active

    @property
    def local_pos(self) -> tuple[float, float]:
        return self._local_pos

    def handle_event(self, event: InputEvent) -> None:
        if event.type is EventType.CURSOR_MOVED and self._active:
            self._local_pos = (float(event.x), float(event.y))

    def toggle(self, active: bool | None = None) -> None:
        """Set the active flag, or flip it when no value is given."""
        self._active = (not self._active) if active is None else bool(active)
        if self._on_toggle is not None:
            self._on_toggle(self._active)