import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from emotropy.render.colors import ColorCache, parse_color
from emotropy.render.surface import CompositeMode, DrawingSurface, PygameSurface
from emotropy.render.renderer import FrameRenderer

__all__ = [
    "ColorCache",
    "parse_color",
    "CompositeMode",
    "DrawingSurface",
    "PygameSurface",
    "FrameRenderer",
]
