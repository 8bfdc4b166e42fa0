"""Primitive drawing helpers: lines, rectangle outlines and tinted sprites."""

import math
from collections.abc import Sequence

import pygame

from dropcatch.ids import TextureId


def _to_rgba255(color: Sequence[float]) -> tuple[int, int, int, int]:
    channels = tuple(float(c) for c in color)
    if len(channels) == 3:
        channels += (1.0,)
    if len(channels) != 4:
        raise ValueError(f"colour needs 3 or 4 channels, got {len(channels)}")
    return tuple(round(min(max(c, 0.0), 1.0) * 255) for c in channels)


def _corners(center, size, angle):
    cos = math.cos(math.radians(angle))
    sin = math.sin(math.radians(angle))
    cx, cy = center
    sx, sy = size
    return [
        (
            round(cos * sx * u - sin * sy * v + cx, 6),
            round(sin * sx * u + cos * sy * v + cy, 6),
        )
        for u, v in ((-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5))
    ]


def line(target: pygame.Surface, start, end, color) -> pygame.Rect:
    """Draw a one-pixel line from ``start`` to ``end``."""
    return pygame.draw.line(target, _to_rgba255(color), start, end)


def rect(target: pygame.Surface, center, size, color, angle: float = 0.0) -> pygame.Rect:
    """Draw the outline of a rectangle rotated by ``angle`` degrees about its centre."""
    return pygame.draw.polygon(target, _to_rgba255(color), _corners(center, size, angle), width=1)


def sprite(
    target: pygame.Surface,
    resources,
    texture_id: TextureId,
    center,
    size,
    color,
    angle: float = 0.0,
) -> pygame.Rect:
    """Draw a texture scaled to ``size``, tinted by ``color`` and centred on ``center``."""
    texture = resources.textures.get(texture_id)
    width, height = (round(abs(s)) for s in size)
    position = (round(center[0]), round(center[1]))
    if width == 0 or height == 0:
        return pygame.Rect(position, (0, 0))
    image = pygame.Surface((width, height), pygame.SRCALPHA)
    image.blit(texture.scaled((width, height)), (0, 0))
    image.fill(_to_rgba255(color), special_flags=pygame.BLEND_RGBA_MULT)
    if angle:
        image = pygame.transform.rotate(image, -angle)
    return target.blit(image, image.get_rect(center=position))