# colors.py
"""
Color module.
Maps a temperature or cloud-cover reading to a hex color by linear
interpolation over a fixed table of control points.
"""

import math
from typing import NamedTuple, Optional, Sequence, Tuple

RGB = Tuple[int, int, int]

# Shown for samples that could not be fetched
MISSING_COLOR = '#888888'


class ColorStop(NamedTuple):
    threshold: float
    rgb: RGB


TEMPERATURE_SCALE = (
    ColorStop(-20, (0, 255, 255)),    # Cyan
    ColorStop(-18, (56, 199, 255)),
    ColorStop(-16, (112, 143, 255)),
    ColorStop(-14, (168, 87, 255)),
    ColorStop(-12, (224, 31, 255)),
    ColorStop(-10, (128, 0, 128)),    # Violet
    ColorStop(-8, (144, 0, 144)),
    ColorStop(-6, (160, 0, 160)),
    ColorStop(-4, (176, 0, 176)),
    ColorStop(-2, (192, 0, 192)),
    ColorStop(0, (0, 0, 139)),        # Dark blue
    ColorStop(2, (0, 47, 175)),
    ColorStop(4, (0, 94, 211)),
    ColorStop(6, (0, 141, 247)),
    ColorStop(8, (0, 188, 255)),
    ColorStop(10, (0, 255, 0)),       # Green
    ColorStop(12, (51, 255, 0)),
    ColorStop(14, (102, 255, 0)),
    ColorStop(16, (153, 255, 0)),
    ColorStop(18, (204, 255, 0)),
    ColorStop(20, (255, 255, 0)),     # Yellow
    ColorStop(22, (255, 204, 0)),
    ColorStop(24, (255, 153, 0)),
    ColorStop(26, (255, 102, 0)),
    ColorStop(28, (255, 51, 0)),
    ColorStop(30, (255, 128, 0)),     # Orange
    ColorStop(32, (255, 96, 0)),
    ColorStop(34, (255, 64, 0)),
    ColorStop(36, (255, 32, 0)),
    ColorStop(38, (255, 0, 0)),
    ColorStop(40, (204, 0, 0)),       # Dark red
    ColorStop(42, (153, 0, 0)),
    ColorStop(44, (102, 0, 0)),
    ColorStop(46, (0, 255, 255)),     # Cyan
)

CLOUD_COVER_SCALE = (
    ColorStop(0, (30, 144, 255)),     # Clear sky
    ColorStop(3, (41, 150, 255)),
    ColorStop(6, (51, 156, 254)),
    ColorStop(9, (62, 163, 254)),
    ColorStop(12, (72, 169, 253)),
    ColorStop(15, (83, 175, 253)),
    ColorStop(18, (93, 181, 252)),
    ColorStop(21, (104, 187, 252)),
    ColorStop(24, (114, 194, 251)),
    ColorStop(27, (125, 200, 251)),
    ColorStop(30, (135, 206, 250)),   # Light sky
    ColorStop(33, (144, 207, 247)),
    ColorStop(36, (152, 209, 244)),
    ColorStop(39, (161, 210, 241)),
    ColorStop(42, (169, 212, 238)),
    ColorStop(45, (178, 213, 235)),
    ColorStop(48, (186, 214, 232)),
    ColorStop(51, (195, 216, 229)),
    ColorStop(54, (203, 217, 226)),
    ColorStop(57, (212, 219, 223)),
    ColorStop(60, (220, 220, 220)),   # Broken clouds
    ColorStop(63, (210, 210, 210)),
    ColorStop(66, (201, 201, 201)),
    ColorStop(69, (191, 191, 191)),
    ColorStop(72, (181, 181, 181)),
    ColorStop(75, (171, 171, 171)),
    ColorStop(78, (162, 162, 162)),
    ColorStop(81, (152, 152, 152)),
    ColorStop(84, (142, 142, 142)),
    ColorStop(87, (132, 132, 132)),
    ColorStop(90, (123, 123, 123)),
    ColorStop(93, (113, 113, 113)),
    ColorStop(96, (103, 103, 103)),
    ColorStop(99, (93, 93, 93)),
    ColorStop(100, (90, 90, 90)),     # Overcast
)


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert a '#rrggbb' string to an RGB tuple."""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Convert an RGB tuple to a lowercase '#rrggbb' string."""
    return '#{:02x}{:02x}{:02x}'.format(*rgb)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def interpolate_color(color1: RGB, color2: RGB, factor: float) -> RGB:
    """
    Linearly interpolate each channel between two colors.
    :param factor: 0 gives color1, 1 gives color2.
    :return: RGB tuple with channels rounded and clamped to 0..255.
    """
    return tuple(
        max(0, min(255, _round_half_up(c1 + factor * (c2 - c1))))
        for c1, c2 in zip(color1, color2)
    )


def color_for_value(value: Optional[float], scale: Sequence[ColorStop]) -> str:
    """
    Map a reading onto a color scale.

    Args:
        value (float or None): Reading; None means the sample is missing.
        scale (sequence of ColorStop): Control points in ascending order.

    Returns:
        str: Hex color string. Missing readings give MISSING_COLOR and
        readings outside the scale take the color of the nearest end.
    """
    if value is None or math.isnan(value):
        return MISSING_COLOR

    first, last = scale[0], scale[-1]
    if value <= first.threshold:
        return rgb_to_hex(first.rgb)
    if value >= last.threshold:
        return rgb_to_hex(last.rgb)

    lower, upper = first, last
    for lo, hi in zip(scale, scale[1:]):
        if lo.threshold <= value <= hi.threshold:
            lower, upper = lo, hi
            break

    span = upper.threshold - lower.threshold
    factor = 0 if span == 0 else (value - lower.threshold) / span
    return rgb_to_hex(interpolate_color(lower.rgb, upper.rgb, factor))


def color_for_temperature(temp: Optional[float]) -> str:
    """Color for a temperature in °C."""
    return color_for_value(temp, TEMPERATURE_SCALE)


def color_for_cloud_cover(cover: Optional[float]) -> str:
    """Color for a cloud-cover percentage."""
    return color_for_value(cover, CLOUD_COVER_SCALE)
