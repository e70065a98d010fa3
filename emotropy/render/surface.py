"""
Drawing surfaces.

The renderer draws through :class:`DrawingSurface`, a small immediate-mode
API modelled on a 2D canvas context. Colors are ``(r, g, b, a)`` tuples with
0-255 channels and alpha in [0, 1]. ``CompositeMode.LIGHTER`` adds color
channels together (overlapping particles bloom toward white);
``CompositeMode.SOURCE_OVER`` is ordinary alpha blending.
"""

import math
from abc import ABC, abstractmethod
from enum import Enum

import pygame

MAX_GRADIENT_RINGS = 32


class CompositeMode(str, Enum):
    SOURCE_OVER = "source-over"
    LIGHTER = "lighter"


class DrawingSurface(ABC):

    composite_mode = CompositeMode.SOURCE_OVER

    @property
    @abstractmethod
    def width(self) -> int: ...

    @property
    @abstractmethod
    def height(self) -> int: ...

    def set_composite(self, mode):
        self.composite_mode = CompositeMode(mode)

    @abstractmethod
    def fill_rect(self, rgba):
        """Covers the whole surface with ``rgba``."""

    @abstractmethod
    def fill_circle(self, x, y, radius, rgba):
        ...

    @abstractmethod
    def fill_radial_gradient(self, x, y, radius, stops):
        """Fills a circle whose color runs through ``stops`` (``(offset, rgba)`` pairs) from center to edge."""

    @abstractmethod
    def stroke_circle(self, x, y, radius, rgba, width=1):
        ...


def gradient_at(stops, offset):
    """Linearly interpolates the color at ``offset`` in [0, 1] between gradient stops."""
    if offset <= stops[0][0]:
        return stops[0][1]
    for (o1, c1), (o2, c2) in zip(stops, stops[1:]):
        if offset <= o2:
            span = (o2 - o1) or 1.0
            t = (offset - o1) / span
            return tuple(a + (b - a) * t for a, b in zip(c1, c2))
    return stops[-1][1]


def _premultiplied(rgba):
    r, g, b, a = rgba
    return (int(r * a), int(g * a), int(b * a))


def _straight(rgba):
    r, g, b, a = rgba
    return (int(r), int(g), int(b), int(round(max(0.0, min(1.0, a)) * 255)))


class PygameSurface(DrawingSurface):
    """
    A :class:`DrawingSurface` over a ``pygame.Surface``.

    Shapes are drawn into a small sprite first and then blitted: with alpha
    for SOURCE_OVER, or premultiplied onto black with ``BLEND_RGB_ADD`` for
    LIGHTER.
    """

    def __init__(self, target: pygame.Surface):
        self.target = target
        self._overlay = None

    @property
    def width(self) -> int:
        return self.target.get_width()

    @property
    def height(self) -> int:
        return self.target.get_height()

    def _sprite(self, radius):
        side = int(math.ceil(radius * 2)) + 2
        if self.composite_mode is CompositeMode.LIGHTER:
            sprite = pygame.Surface((side, side))
            sprite.fill((0, 0, 0))
        else:
            sprite = pygame.Surface((side, side), pygame.SRCALPHA)
        return sprite, side / 2

    def _color(self, rgba):
        if self.composite_mode is CompositeMode.LIGHTER:
            return _premultiplied(rgba)
        return _straight(rgba)

    def _blit(self, sprite, x, y, half):
        dest = (int(round(x - half)), int(round(y - half)))
        if self.composite_mode is CompositeMode.LIGHTER:
            self.target.blit(sprite, dest, special_flags=pygame.BLEND_RGB_ADD)
        else:
            self.target.blit(sprite, dest)

    def _full_overlay(self):
        # Reused across frames; rebuilt only when the target changes size.
        size = self.target.get_size()
        if self._overlay is None or self._overlay.get_size() != size:
            self._overlay = pygame.Surface(size, pygame.SRCALPHA)
        return self._overlay

    def fill_rect(self, rgba):
        if self.composite_mode is CompositeMode.LIGHTER:
            self.target.fill(_premultiplied(rgba), special_flags=pygame.BLEND_RGB_ADD)
            return
        overlay = self._full_overlay()
        overlay.fill(_straight(rgba))
        self.target.blit(overlay, (0, 0))

    def fill_circle(self, x, y, radius, rgba):
        if radius <= 0:
            return
        sprite, half = self._sprite(radius)
        pygame.draw.circle(sprite, self._color(rgba), (half, half), radius)
        self._blit(sprite, x, y, half)

    def fill_radial_gradient(self, x, y, radius, stops):
        if radius <= 0:
            return
        sprite, half = self._sprite(radius)
        rings = max(1, min(MAX_GRADIENT_RINGS, int(math.ceil(radius))))
        # Outer rings first; each smaller ring overwrites the pixels it covers.
        for i in range(rings, 0, -1):
            ring_radius = radius * i / rings
            color = gradient_at(stops, ring_radius / radius)
            pygame.draw.circle(sprite, self._color(color), (half, half), ring_radius)
        self._blit(sprite, x, y, half)

    def stroke_circle(self, x, y, radius, rgba, width=1):
        if radius <= 0:
            return
        sprite, half = self._sprite(radius + width)
        pygame.draw.circle(sprite, self._color(rgba), (half, half), radius, max(1, int(round(width))))
        self._blit(sprite, x, y, half)

    def save(self, path):
        pygame.image.save(self.target, str(path))
