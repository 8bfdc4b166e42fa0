import pygame
import pytest

from dropcatch.ids import TextureId
from dropcatch.resources import (
    ResourceError,
    ResourceManager,
    Resources,
    Texture,
    TextureManager,
)


def test_get_missing_raises():
    with pytest.raises(ResourceError):
        ResourceManager().get(TextureId.BOX)


def test_push_then_get_returns_same_object():
    manager = ResourceManager()
    item = object()
    manager.push(TextureId.CIRCLE, item)
    assert manager.get(TextureId.CIRCLE) is item
    assert TextureId.CIRCLE in manager


def test_push_replaces_previous():
    manager = ResourceManager()
    first, second = object(), object()
    manager.push(TextureId.BOX, first)
    manager.push(TextureId.BOX, second)
    assert manager.get(TextureId.BOX) is second


def test_push_undefined_id_rejected():
    with pytest.raises(ValueError):
        ResourceManager().push(TextureId.UNDEFINED, object())


def test_load_from_file(tmp_path):
    path = tmp_path / "box.bmp"
    pygame.image.save(pygame.Surface((3, 2)), str(path))
    manager = TextureManager()
    texture = manager.load_from_file(TextureId.BOX, path)
    assert texture.size == (3, 2)
    assert manager.get(TextureId.BOX) is texture


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ResourceError):
        TextureManager().load_from_file(TextureId.BOX, tmp_path / "absent.png")


def test_texture_defaults_and_flags():
    texture = Texture(pygame.Surface((4, 4)))
    assert (texture.smooth, texture.repeat) == (False, False)
    texture.set_smooth(True)
    texture.set_repeat(True)
    assert (texture.smooth, texture.repeat) == (True, True)


@pytest.mark.parametrize("smooth", [False, True])
def test_scaled_has_requested_size(smooth):
    surface = pygame.Surface((4, 4), pygame.SRCALPHA)
    texture = Texture(surface)
    texture.set_smooth(smooth)
    assert texture.scaled((9, 7)).get_size() == (9, 7)
    assert texture.scaled((4, 4)) is surface


def test_resources_hold_texture_manager():
    resources = Resources()
    texture = Texture(pygame.Surface((1, 1)))
    resources.textures.push(TextureId.CIRCLE, texture)
    assert resources.textures.get(TextureId.CIRCLE) is texture