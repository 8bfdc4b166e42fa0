import pygame
import pytest

from dropcatch.button import Button, InvisibleButton
from dropcatch.context import Context
from dropcatch.event_manager import MOUSE_BUTTON_LEFT
from dropcatch.events import EventType, InputEvent
from dropcatch.ids import ColorState, TextureId
from dropcatch.input import Cursor, FrameCounter, Keyboard, Mouse
from dropcatch.message_bus import MessageBus
from dropcatch.resources import ResourceError, Resources, Texture


@pytest.fixture
def resources():
    res = Resources()
    image = pygame.Surface((4, 4), pygame.SRCALPHA)
    image.fill((255, 255, 255, 255))
    res.textures.push(TextureId.BUTTON_START, Texture(image))
    return res


@pytest.fixture
def ctx(resources):
    return Context(Keyboard(), Mouse(), Cursor(), MessageBus(), resources)


def move(ctx, x, y):
    ctx.cursor.handle_event(InputEvent(EventType.CURSOR_MOVED, x=x, y=y))


def press(ctx, code=MOUSE_BUTTON_LEFT):
    ctx.mouse.handle_event(InputEvent(EventType.MOUSE_BUTTON_PRESSED, code=code))


def release(ctx, code=MOUSE_BUTTON_LEFT):
    ctx.mouse.handle_event(InputEvent(EventType.MOUSE_BUTTON_RELEASED, code=code))


def test_hover_inside_and_outside(ctx):
    button = Button((10, 10), (100, 50))
    move(ctx, 50, 30)
    button.update(ctx)
    assert button.hovered is True
    move(ctx, 200, 30)
    button.update(ctx)
    assert button.hovered is False


def test_hover_bounds_are_inclusive(ctx):
    button = Button((10, 10), (100, 50))
    move(ctx, 110, 60)
    button.update(ctx)
    assert button.hovered is True
    move(ctx, 10, 10)
    button.update(ctx)
    assert button.hovered is True


def test_offset_shifts_area(ctx):
    button = Button((0, 0), (10, 10))
    move(ctx, 105, 105)
    button.update(ctx, (100, 100))
    assert button.hovered is True
    move(ctx, 5, 5)
    button.update(ctx, (100, 100))
    assert button.hovered is False


def test_inactive_cursor_never_hovers(ctx):
    button = Button((0, 0), (10, 10))
    move(ctx, 5, 5)
    ctx.cursor.toggle(False)
    button.update(ctx)
    assert button.hovered is False


def test_full_click_cycle(ctx):
    button = Button((10, 10), (100, 50))
    move(ctx, 50, 30)
    FrameCounter.update_frame()
    press(ctx)
    assert button.check(ctx) is False
    assert button.active is True

    FrameCounter.update_frame()
    assert button.check(ctx) is False
    assert button.active is True

    FrameCounter.update_frame()
    release(ctx)
    assert button.check(ctx) is True
    assert button.active is False

    FrameCounter.update_frame()
    assert button.check(ctx) is False


def test_press_outside_does_not_activate(ctx):
    button = Button((10, 10), (100, 50))
    move(ctx, 300, 300)
    FrameCounter.update_frame()
    press(ctx)
    button.check(ctx)
    move(ctx, 50, 30)
    FrameCounter.update_frame()
    release(ctx)
    assert button.check(ctx) is False
    assert button.active is False


def test_release_outside_does_not_click(ctx):
    button = Button((10, 10), (100, 50))
    move(ctx, 50, 30)
    FrameCounter.update_frame()
    press(ctx)
    button.check(ctx)
    move(ctx, 300, 300)
    FrameCounter.update_frame()
    release(ctx)
    assert button.check(ctx) is False


def test_invisible_button_default_code_never_activates(ctx):
    area = InvisibleButton((0, 0), (10, 10))
    move(ctx, 5, 5)
    FrameCounter.update_frame()
    press(ctx)
    area.update(ctx)
    assert area.active is False
    assert area.hovered is True


def test_other_mouse_button_is_ignored(ctx):
    button = Button((0, 0), (10, 10))
    move(ctx, 5, 5)
    FrameCounter.update_frame()
    press(ctx, code=2)
    button.check(ctx)
    assert button.active is False


def test_colors_default_to_white():
    button = Button()
    assert set(button.colors.values()) == {(1.0, 1.0, 1.0, 1.0)}


def test_set_color_accepts_rgb():
    button = Button()
    button.set_color(ColorState.HOVERED, (0.2, 0.4, 0.6))
    assert button.colors[ColorState.HOVERED] == (0.2, 0.4, 0.6, 1.0)


def test_set_color_undefined_state_rejected():
    button = Button()
    with pytest.raises(ValueError):
        button.set_color(ColorState.UNDEFINED, (1.0, 1.0, 1.0, 1.0))


def test_current_color_follows_state(ctx):
    button = Button((0, 0), (10, 10))
    button.set_color(ColorState.DEFAULT, (1.0, 0.0, 0.0, 1.0))
    button.set_color(ColorState.HOVERED, (0.0, 1.0, 0.0, 1.0))
    button.set_color(ColorState.ACTIVE, (0.0, 0.0, 1.0, 1.0))
    assert button.current_color == (1.0, 0.0, 0.0, 1.0)
    move(ctx, 5, 5)
    button.update(ctx)
    assert button.current_color == (0.0, 1.0, 0.0, 1.0)
    FrameCounter.update_frame()
    press(ctx)
    button.update(ctx)
    assert button.current_color == (0.0, 0.0, 1.0, 1.0)


def test_draw_uses_default_color(resources):
    target = pygame.Surface((40, 40))
    target.fill((0, 0, 0))
    button = Button((10, 10), (20, 20), TextureId.BUTTON_START)
    button.set_color(ColorState.DEFAULT, (1.0, 0.0, 0.0, 1.0))
    button.draw(target, resources)
    assert tuple(target.get_at((20, 20)))[:3] == (255, 0, 0)
    assert tuple(target.get_at((2, 2)))[:3] == (0, 0, 0)


def test_draw_uses_hovered_color(ctx, resources):
    target = pygame.Surface((40, 40))
    target.fill((0, 0, 0))
    button = Button((10, 10), (20, 20), TextureId.BUTTON_START)
    button.set_color(ColorState.HOVERED, (0.0, 1.0, 0.0, 1.0))
    move(ctx, 15, 15)
    button.update(ctx)
    button.draw(target, resources)
    assert tuple(target.get_at((20, 20)))[:3] == (0, 255, 0)


def test_draw_without_texture_raises(resources):
    target = pygame.Surface((40, 40))
    button = Button((10, 10), (20, 20))
    with pytest.raises(ResourceError):
        button.draw(target, resources)