"""Layered drawing into an off-screen frame that is then placed on the target."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import pygame

from dropcatch.draw import _to_rgba255


class Drawable(ABC):
    """Anything that can draw itself onto a surface."""

    @abstractmethod
    def draw(self, target: pygame.Surface, resources) -> None:
        """Draw onto ``target`` using ``resources``."""


class DrawManager:
    """Draws elements layer by layer into its own frame, then blits the frame.

    Lower layers are drawn first; within a layer, in the order elements were
    added. The frame is cleared with ``clear_color``, tinted with ``color``
    and placed at ``position`` on the target.
    """

    def __init__(
        self,
        size: Sequence[float],
        color: Sequence[float] = (1.0, 1.0, 1.0, 1.0),
        clear_color: Sequence[float] = (1.0, 1.0, 1.0, 1.0),
        position: Sequence[float] = (0.0, 0.0),
    ) -> None:
        width, height = (int(s) for s in size)
        if width < 0 or height < 0:
            raise ValueError(f"frame size must not be negative: {tuple(size)}")
        self._surface = pygame.Surface((width, height))
        self.color = tuple(color)
        self.clear_color = tuple(clear_color)
        self.position = tuple(position)
        self._layers: dict[int, list[Drawable]] = {}

    @property
    def size(self) -> tuple[int, int]:
        return self._surface.get_size()

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def add(self, element: Drawable, layer: int) -> None:
        if element is None:
            return
        self._layers.setdefault(layer, []).append(element)

    def remove(self, element: Drawable) -> None:
        """Remove every occurrence of ``element`` from all layers."""
        if element is None:
            return
        for layer, elements in self._layers.items():
            self._layers[layer] = [e for e in elements if e is not element]

    def __iter__(self):
        for layer in sorted(self._layers):
            yield from list(self._layers[layer])

    def draw(self, target: pygame.Surface, resources) -> pygame.Rect:
        """Render all elements into the frame and place it on ``target``."""
        self._surface.fill(_to_rgba255(self.clear_color))
        for element in self:
            element.draw(self._surface, resources)
        frame = self._surface.copy()
        r, g, b, a = _to_rgba255(self.color)
        if (r, g, b) != (255, 255, 255):
            frame.fill((r, g, b), special_flags=pygame.BLEND_RGB_MULT)
        frame.set_alpha(a)
        x, y = self.position
        return target.blit(frame, (round(x), round(y)))