"""Math and colour helpers."""

from __future__ import annotations

import colorsys
import enum
import math
import re
import string
from dataclasses import dataclass

__all__ = [
    "RGBA",
    "GradientType",
    "signum",
    "degrees_to_radians",
    "degrees_to_positive",
    "hsv_lerp",
    "rgb_lerp",
    "parse_color",
    "hex_to_rgb",
    "get_color",
]


@dataclass(frozen=True)
class RGBA:
    """A colour with red, green, blue and alpha components in 0..1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


class GradientType(enum.Enum):
    """Colour spaces used for interpolation."""

    RGB = 0
    HSV = 1


def signum(x: float) -> int:
    """Return 1 if x > 0, 0 if x == 0 and -1 if x < 0."""
    if math.isnan(x):
        raise ValueError("signum is undefined for NaN")
    if x == 0.0:
        return 0
    return 1 if x > 0 else -1


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return degrees * math.pi / 180.0


def degrees_to_positive(degrees: float) -> float:
    """Convert an angle in degrees to an equivalent positive angle."""
    value = abs(math.fmod(degrees, 360.0))
    if degrees < 0.0:
        value = 360.0 - value
    return value


def _check_lerp_range(value: float, value1: float, value2: float) -> None:
    if not value2 > value1:
        raise ValueError("value2 must be greater than value1")
    if not value1 <= value <= value2:
        raise ValueError("value must lie between value1 and value2")
    if not (0.0 <= value1 <= 1.0 and 0.0 <= value2 <= 1.0):
        raise ValueError("value1 and value2 must lie in 0..1")


def hsv_lerp(value: float, color1: RGBA, value1: float, color2: RGBA, value2: float) -> RGBA:
    """Interpolate linearly between two colours in HSV space."""
    _check_lerp_range(value, value1, value2)
    t = value - value1
    h1, s1, v1 = colorsys.rgb_to_hsv(color1.red, color1.green, color1.blue)
    h2, s2, v2 = colorsys.rgb_to_hsv(color2.red, color2.green, color2.blue)
    h = h1 + t * (h2 - h1)
    s = s1 + t * (s2 - s1)
    v = v1 + t * (v2 - v1)
    alpha = color1.alpha + t * (color2.alpha - color1.alpha)
    red, green, blue = colorsys.hsv_to_rgb(h, s, v)
    return RGBA(red, green, blue, alpha)


def rgb_lerp(value: float, color1: RGBA, value1: float, color2: RGBA, value2: float) -> RGBA:
    """Interpolate linearly between two colours in RGB space."""
    _check_lerp_range(value, value1, value2)
    t = value - value1
    return RGBA(
        color1.red + t * (color2.red - color1.red),
        color1.green + t * (color2.green - color1.green),
        color1.blue + t * (color2.blue - color1.blue),
        color1.alpha + t * (color2.alpha - color1.alpha),
    )


_NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "white": (255, 255, 255),
    "black": (0, 0, 0),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "gray": (190, 190, 190),
    "grey": (190, 190, 190),
    "darkgray": (169, 169, 169),
    "darkgrey": (169, 169, 169),
    "lightgray": (211, 211, 211),
    "lightgrey": (211, 211, 211),
    "orange": (255, 165, 0),
    "pink": (255, 192, 203),
    "brown": (165, 42, 42),
    "gold": (255, 215, 0),
    "navy": (0, 0, 128),
    "navyblue": (0, 0, 128),
    "violet": (238, 130, 238),
    "turquoise": (64, 224, 208),
    "salmon": (250, 128, 114),
    "khaki": (240, 230, 140),
    "tomato": (255, 99, 71),
    "coral": (255, 127, 80),
    "orchid": (218, 112, 214),
    "beige": (245, 245, 220),
    "ivory": (255, 255, 240),
    "lavender": (230, 230, 250),
    "chocolate": (210, 105, 30),
    "tan": (210, 180, 140),
    "aquamarine": (127, 255, 212),
    "darkblue": (0, 0, 139),
    "darkred": (139, 0, 0),
    "darkgreen": (0, 100, 0),
    "lightblue": (173, 216, 230),
    "skyblue": (135, 206, 235),
    "steelblue": (70, 130, 180),
    "firebrick": (178, 34, 34),
    "forestgreen": (34, 139, 34),
}

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_HEX_DIGITS = frozenset(string.hexdigits)
_NUMBER = re.compile(r"\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+))\s*(%?)\s*$")
_FUNCTION = re.compile(r"(rgba?)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def _parse_hex(body: str) -> RGBA | None:
    if not body or not set(body) <= _HEX_DIGITS:
        return None
    length = len(body)
    if length in (3, 6, 9, 12):
        count = 3
    elif length in (4, 8, 16):
        count = 4
    else:
        return None
    width = length // count
    scale = 16**width - 1
    parts = [int(body[start:start + width], 16) / scale for start in range(0, length, width)]
    return RGBA(*parts)


def _parse_channel(text: str) -> float | None:
    match = _NUMBER.match(text)
    if match is None:
        return None
    number = float(match.group(1))
    if match.group(2):
        return _clamp(number / 100.0)
    return _clamp(number / 255.0)


def _parse_function(text: str) -> RGBA | None:
    match = _FUNCTION.match(text)
    if match is None:
        return None
    name = match.group(1).translate(_ASCII_LOWER)
    args = match.group(2).split(",")
    expected = 4 if name == "rgba" else 3
    if len(args) != expected:
        return None
    channels = [_parse_channel(arg) for arg in args[:3]]
    if any(channel is None for channel in channels):
        return None
    alpha = 1.0
    if expected == 4:
        alpha_match = _NUMBER.match(args[3])
        if alpha_match is None or alpha_match.group(2):
            return None
        alpha = _clamp(float(alpha_match.group(1)))
    return RGBA(*channels, alpha)


def parse_color(text: str) -> RGBA:
    """Parse a colour name, ``#hex`` value, ``rgb()`` or ``rgba()`` expression.

    Raises ValueError if the text is not a colour.
    """
    stripped = text.strip()
    if stripped.startswith("#"):
        color = _parse_hex(stripped[1:])
    elif _FUNCTION.match(stripped):
        color = _parse_function(stripped)
    else:
        key = stripped.translate(_ASCII_LOWER).replace(" ", "")
        if key == "transparent":
            color = RGBA(0.0, 0.0, 0.0, 0.0)
        elif key in _NAMED_COLORS:
            red, green, blue = _NAMED_COLORS[key]
            color = RGBA(red / 255.0, green / 255.0, blue / 255.0, 1.0)
        else:
            color = None
    if color is None:
        raise ValueError(f"not a colour: {text!r}")
    return color


def hex_to_rgb(hex_string: str) -> tuple[float, float, float] | None:
    """Return the red, green and blue parts of a colour, or None if it isn't one."""
    try:
        color = parse_color(hex_string)
    except ValueError:
        return None
    return (color.red, color.green, color.blue)


def get_color(desc: str | None) -> RGBA:
    """Return the colour for a description such as "blue"; opaque black otherwise."""
    if desc is not None:
        try:
            return parse_color(desc)
        except ValueError:
            pass
    return RGBA(0.0, 0.0, 0.0, 1.0)