import math

from emotropy.particles.fields import FieldKind
from emotropy.render.colors import ColorCache
from emotropy.render.surface import CompositeMode

MOTION_BLUR = (8, 8, 20, 0.22)
PRIMARY_GLOW_RADIUS = 0.55
SECONDARY_GLOW_RADIUS = 0.4
SECONDARY_GLOW_OFFSET = (1.1, 0.9)

ATTRACT_COLOR = (100, 255, 200)
REPEL_COLOR = (255, 100, 80)
INDICATOR_DOT_RADIUS = 3
INDICATOR_LINE_WIDTH = 1.5


class FrameRenderer:
    """
    Draws one frame of a world.

    Background layers and field indicators use normal compositing; the
    particle pass alone is drawn additively.
    """

    def __init__(self, colors: ColorCache | None = None, cache_size: int = 1000):
        self.colors = colors or ColorCache(cache_size)

    def render(self, world, surface):
        surface.set_composite(CompositeMode.SOURCE_OVER)
        surface.fill_rect(MOTION_BLUR)
        self._draw_background(world, surface)

        surface.set_composite(CompositeMode.LIGHTER)
        try:
            for particle in world.particles:
                particle.render(surface, self.colors)
        finally:
            surface.set_composite(CompositeMode.SOURCE_OVER)

        self._draw_fields(world, surface)

    def _glow(self, surface, color, cx, cy, radius):
        r, g, b, a = self.colors.tint(color)
        surface.fill_radial_gradient(cx, cy, radius, [(0.0, (r, g, b, a)), (1.0, (r, g, b, 0.0))])

    def _draw_background(self, world, surface):
        cx = surface.width / 2
        cy = surface.height / 2
        max_dim = max(surface.width, surface.height)
        if world.bg_glow:
            self._glow(surface, world.bg_glow, cx, cy, max_dim * PRIMARY_GLOW_RADIUS)
        if world.bg_glow_secondary:
            ox, oy = SECONDARY_GLOW_OFFSET
            self._glow(surface, world.bg_glow_secondary, cx * ox, cy * oy, max_dim * SECONDARY_GLOW_RADIUS)

    def _draw_fields(self, world, surface):
        lifetime = world.fields.lifetime
        for point in world.fields.points:
            alpha = max(0.0, 1 - point.age / lifetime) * 0.5
            ring = point.radius * (0.1 + 0.06 * math.sin(point.age * 0.05))
            rgb = ATTRACT_COLOR if point.kind is FieldKind.ATTRACT else REPEL_COLOR
            surface.stroke_circle(point.x, point.y, ring, (*rgb, alpha), INDICATOR_LINE_WIDTH)
            surface.fill_circle(point.x, point.y, INDICATOR_DOT_RADIUS, (*rgb, min(1.0, alpha * 2)))
