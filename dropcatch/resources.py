"""Textures and the managers that own them."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

import pygame

from dropcatch.ids import TextureId

T = TypeVar("T")


class ResourceError(Exception):
    """A resource is missing or could not be loaded."""


class Texture:
    """An image that can be drawn scaled to any size."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.smooth = False
        self.repeat = False
        self._scaled: dict[tuple[int, int], pygame.Surface] = {}

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def set_smooth(self, smooth: bool) -> None:
        """Use filtered scaling when smooth, nearest-neighbour otherwise."""
        if bool(smooth) != self.smooth:
            self.smooth = bool(smooth)
            self._scaled.clear()

    def set_repeat(self, repeat: bool) -> None:
        self.repeat = bool(repeat)

    def scaled(self, size: tuple[int, int]) -> pygame.Surface:
        """Return the image scaled to ``size``, cached per size."""
        key = (int(size[0]), int(size[1]))
        if key == self.size:
            return self.surface
        if key not in self._scaled:
            if self.smooth:
                try:
                    image = pygame.transform.smoothscale(self.surface, key)
                except ValueError:
                    image = pygame.transform.scale(self.surface, key)
            else:
                image = pygame.transform.scale(self.surface, key)
            self._scaled[key] = image
        return self._scaled[key]


class ResourceManager(Generic[T]):
    """Owns resources keyed by an identifier."""

    def __init__(self) -> None:
        self._items: dict[int, T] = {}

    def get(self, resource_id: int) -> T:
        try:
            return self._items[int(resource_id)]
        except KeyError:
            raise ResourceError(f"resource {resource_id!r} is not loaded") from None

    def push(self, resource_id: int, resource: T) -> None:
        """Store ``resource`` under ``resource_id``, replacing any previous one."""
        if int(resource_id) < 0:
            raise ValueError(f"invalid resource id {resource_id!r}")
        self._items[int(resource_id)] = resource

    def __contains__(self, resource_id: int) -> bool:
        return int(resource_id) in self._items


class TextureManager(ResourceManager[Texture]):
    def load_from_file(self, texture_id: TextureId, path) -> Texture:
        """Load an image file as the texture for ``texture_id``."""
        try:
            surface = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError, OSError) as exc:
            raise ResourceError(f"cannot load texture {path}: {exc}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        texture = Texture(surface)
        self.push(texture_id, texture)
        return texture


@dataclass
class Resources:
    textures: TextureManager = field(default_factory=TextureManager)