"""Color token resolution with a configured fallback."""

from __future__ import annotations

from push_template_renderer.models.notification import ResolvedColor

# Names understood by the platform color parser, as 0xAARRGGBB.
NAMED_COLORS: dict[str, int] = {
    "black": 0xFF000000,
    "darkgray": 0xFF444444,
    "gray": 0xFF888888,
    "lightgray": 0xFFCCCCCC,
    "white": 0xFFFFFFFF,
    "red": 0xFFFF0000,
    "green": 0xFF00FF00,
    "blue": 0xFF0000FF,
    "yellow": 0xFFFFFF00,
    "cyan": 0xFF00FFFF,
    "magenta": 0xFFFF00FF,
    "aqua": 0xFF00FFFF,
    "fuchsia": 0xFFFF00FF,
    "darkgrey": 0xFF444444,
    "grey": 0xFF888888,
    "lightgrey": 0xFFCCCCCC,
    "lime": 0xFF00FF00,
    "maroon": 0xFF800000,
    "navy": 0xFF000080,
    "olive": 0xFF808000,
    "purple": 0xFF800080,
    "silver": 0xFFC0C0C0,
    "teal": 0xFF008080,
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_color(token: str) -> ResolvedColor:
    """Parse #RRGGBB, #AARRGGBB or a named color.

    Raises:
        ValueError: If the token is not a recognised color.
    """
    if token.startswith("#"):
        digits = token[1:]
        if len(digits) not in (6, 8) or not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"Unknown color: {token!r}")
        value = int(digits, 16)
        if len(digits) == 6:
            value |= 0xFF000000
        return ResolvedColor(value)
    named = NAMED_COLORS.get(token.lower())
    if named is None:
        raise ValueError(f"Unknown color: {token!r}")
    return ResolvedColor(named)


class ColorResolver:
    """Resolve an optional color token, falling back to the default on absence or parse failure."""

    def __init__(self, default: ResolvedColor) -> None:
        self._default = default

    @property
    def default(self) -> ResolvedColor:
        return self._default

    def resolve(self, token: str | None) -> ResolvedColor:
        if token is None:
            return self._default
        try:
            return parse_color(token)
        except ValueError:
            return self._default
