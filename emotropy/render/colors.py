"""Color parsing with a bounded cache owned by the renderer."""

import re

_RGBA = re.compile(r"rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)")

DEFAULT_CACHE_SIZE = 1000


def parse_color(color: str):
    """
    Parses ``#rgb``, ``#rrggbb``, ``rgb(...)`` or ``rgba(...)`` into an
    ``(r, g, b, a)`` tuple with 0-255 channels and alpha in [0, 1].
    """
    color = color.strip()
    if color.startswith('#'):
        hex_digits = color[1:]
        if len(hex_digits) == 3:
            hex_digits = ''.join(c + c for c in hex_digits)
        if len(hex_digits) != 6:
            raise ValueError(f"Unsupported hex color: {color!r}")
        return (
            int(hex_digits[0:2], 16),
            int(hex_digits[2:4], 16),
            int(hex_digits[4:6], 16),
            1.0,
        )
    match = _RGBA.fullmatch(color)
    if match:
        r, g, b, a = match.groups()
        return int(float(r)), int(float(g)), int(float(b)), float(a) if a is not None else 1.0
    raise ValueError(f"Unsupported color: {color!r}")


class ColorCache:
    """
    Memoizes ``(color, alpha)`` → RGBA conversions.

    Alpha is quantized to two decimals, so the number of distinct keys per
    color stays small. When ``max_size`` entries are reached the cache is
    cleared wholesale.
    """

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE):
        self.max_size = max_size
        self._entries = {}

    def __len__(self):
        return len(self._entries)

    def rgba(self, color: str, alpha: float):
        """Returns ``color`` with its alpha replaced by ``alpha`` (clamped to [0, 1])."""
        alpha_key = f"{min(1.0, max(0.0, alpha)):.2f}"
        key = (color, alpha_key)
        cached = self._entries.get(key)
        if cached is not None:
            return cached

        r, g, b, _ = parse_color(color)
        result = (r, g, b, float(alpha_key))

        if len(self._entries) >= self.max_size:
            self._entries.clear()
        self._entries[key] = result
        return result

    def tint(self, color: str):
        """Returns ``color`` parsed with its own alpha, e.g. a background tint."""
        key = (color, None)
        cached = self._entries.get(key)
        if cached is None:
            cached = parse_color(color)
            if len(self._entries) >= self.max_size:
                self._entries.clear()
            self._entries[key] = cached
        return cached

    def clear(self):
        self._entries.clear()
