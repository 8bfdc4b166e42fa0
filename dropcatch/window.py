"""The game window."""

import os

import pygame

from dropcatch.draw import _to_rgba255

REFRESH_RATE = 60


class Window:
    """A fixed-size window with a clear colour and optional frame pacing."""

    def __init__(self) -> None:
        self._surface: pygame.Surface | None = None
        self._open = False
        self._clear_color = _to_rgba255((1.0, 1.0, 1.0, 1.0))
        self._clock = pygame.time.Clock()
        self.vsync = False

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, *exc_info) -> None:
        self._open = False
        self._surface = None
        pygame.display.quit()

    def create(self, width: int, height: int, title: str) -> pygame.Surface:
        """Open the window centred on the screen and return its surface."""
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        pygame.display.init()
        self._surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._open = True
        return self._surface

    def _require(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("window has not been created")
        return self._surface

    @property
    def surface(self) -> pygame.Surface:
        return self._require()

    @property
    def size(self) -> tuple[int, int]:
        return self._require().get_size()

    @property
    def clear_color(self) -> tuple[int, int, int, int]:
        return self._clear_color

    @property
    def is_open(self) -> bool:
        self._require()
        return self._open

    def clear(self) -> None:
        self._require().fill(self._clear_color)

    def swap_buffers(self) -> None:
        self._require()
        pygame.display.flip()
        if self.vsync:
            self._clock.tick(REFRESH_RATE)

    def close(self) -> None:
        self._require()
        self._open = False

    def set_vsync(self, vsync: bool) -> None:
        self.vsync = bool(vsync)

    def set_clear_color(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        self._clear_color = _to_rgba255((r, g, b, a))

    def set_cursor_active(self, active: bool) -> None:
        """Show the pointer when active, otherwise hide and capture it."""
        pygame.mouse.set_visible(bool(active))
        pygame.event.set_grab(not active)