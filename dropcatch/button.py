"""Clickable screen areas and textured buttons."""

from collections.abc import Sequence

import pygame

from dropcatch import draw
from dropcatch.draw_manager import Drawable
from dropcatch.event_manager import MOUSE_BUTTON_LEFT
from dropcatch.events import KEY_UNKNOWN
from dropcatch.ids import ColorState, TextureId

WHITE = (1.0, 1.0, 1.0, 1.0)
_COLOR_STATES = (ColorState.DEFAULT, ColorState.HOVERED, ColorState.ACTIVE)


def _pair(values: Sequence[float]) -> tuple[float, float]:
    x, y = values
    return (float(x), float(y))


class InvisibleButton:
    """A rectangular area that tracks hover, press and click from mouse input.

    A click is reported in the frame the mouse button is released over the
    area, provided the press also started over it.
    """

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (0.0, 0.0),
        mouse_button_code: int = KEY_UNKNOWN,
    ) -> None:
        self.position = _pair(position)
        self.size = _pair(size)
        self.mouse_button_code = mouse_button_code
        self._hovered = False
        self._active = False
        self._clicked = False

    @property
    def hovered(self) -> bool:
        return self._hovered

    @property
    def active(self) -> bool:
        return self._active

    @property
    def clicked(self) -> bool:
        return self._clicked

    def update(self, context, offset: Sequence[float] = (0.0, 0.0)) -> None:
        """Refresh hover, press and click state from the context's input."""
        cursor_active = context.cursor.active
        cx, cy = context.cursor.local_pos
        ox, oy = _pair(offset)
        min_x, min_y = self.position[0] + ox, self.position[1] + oy
        max_x, max_y = min_x + self.size[0], min_y + self.size[1]

        self._hovered = (
            min_x <= cx <= max_x and min_y <= cy <= max_y and cursor_active
        )

        mouse = context.mouse
        code = self.mouse_button_code
        if self._active:
            self._active = mouse.is_clicked(code) and cursor_active
            self._clicked = mouse.is_released(code) and cursor_active and self._hovered
        else:
            self._active = mouse.is_just_clicked(code) and cursor_active and self._hovered
            self._clicked = False


class Button(InvisibleButton, Drawable):
    """A left-click button drawn as a texture tinted by its current state."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0),
        size: Sequence[float] = (0.0, 0.0),
        texture_id: TextureId = TextureId.UNDEFINED,
    ) -> None:
        super().__init__(position, size, MOUSE_BUTTON_LEFT)
        self.texture_id = texture_id
        self._colors: dict[ColorState, tuple[float, ...]] = {
            state: WHITE for state in _COLOR_STATES
        }

    @property
    def colors(self) -> dict[ColorState, tuple[float, ...]]:
        return dict(self._colors)

    @property
    def current_color(self) -> tuple[float, ...]:
        """Colour for the state the button is in now."""
        if self.active:
            return self._colors[ColorState.ACTIVE]
        if self.hovered:
            return self._colors[ColorState.HOVERED]
        return self._colors[ColorState.DEFAULT]

    def set_color(self, color_state: ColorState, color: Sequence[float]) -> None:
        state = ColorState(color_state)
        if state not in self._colors:
            raise ValueError(f"no colour slot for {state!r}")
        channels = tuple(float(c) for c in color)
        if len(channels) == 3:
            channels += (1.0,)
        if len(channels) != 4:
            raise ValueError(f"colour needs 3 or 4 channels, got {len(channels)}")
        self._colors[state] = channels

    def draw(self, target: pygame.Surface, resources) -> None:
        width, height = self.size
        center = (self.position[0] + width / 2.0, self.position[1] + height / 2.0)
        draw.sprite(target, resources, self.texture_id, center, self.size, self.current_color)

    def check(self, context, offset: Sequence[float] = (0.0, 0.0)) -> bool:
        """Update from input and return True if the button was clicked this frame."""
        self.update(context, offset)
        return self.clicked