"""Color math for task backgrounds and their text colors.

Every way of choosing a task color (palette button, hue slider, a hue tracked
as its own state) ends up as a ``#rrggbb`` string, and the text drawn on top
of it is always picked by :func:`contrast_text_color`.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from .exceptions import InvalidColorError
from .logger import debug_enabled, get_logger

logger = get_logger()

# Constants for color calculations
HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")
HUE_DEGREES = 360
HUE_SECTOR_DEGREES = 60
CHANNEL_MAX = 255
CONTRAST_MIDPOINT = 0.5  # Luminance above this gets dark text

# Slider hues are always pastel-to-vivid at constant brightness
SLIDER_SATURATION = 100
SLIDER_LIGHTNESS = 80

DARK_TEXT = "#000000"
LIGHT_TEXT = "#FFFFFF"

DEFAULT_PALETTE: tuple[str, ...] = (
    "#ff2637",
    "#8426ff",
    "#2681ff",
    "#26ffe2",
    "#67ff26",
    "#ffa526",
)
DEFAULT_COLOR = "#ff9aa2"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's round() rounds halves to even, which would make 0.5 steps on the
    slider land on different hues than users expect.
    """
    return math.floor(value + 0.5)


def validate_hex(color: str) -> str:
    """Return ``color`` unchanged if it is a ``#RRGGBB`` string.

    Raises:
        InvalidColorError: If the string has the wrong length, is missing the
            leading '#', or contains non-hex characters.
    """
    if not isinstance(color, str) or not HEX_COLOR_PATTERN.match(color):
        raise InvalidColorError(f"Invalid hex color: {color!r} (expected #RRGGBB)")
    return color


def normalize_hex(color: str) -> str:
    """Validate a ``#RRGGBB`` string and return it as lowercase ``#rrggbb``.

    Palette picks, typed colors and slider colors all end up in the same
    casing, so equal colors compare equal.
    """
    return validate_hex(color).lower()


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Convert a ``#RRGGBB`` string to an (r, g, b) tuple of 0-255 ints."""
    h = validate_hex(color)[1:]
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert an HSL color to a lowercase ``#rrggbb`` string.

    Uses the six-sector piecewise-linear formula: chroma and the secondary
    component are placed on R, G, B according to the 60° sector the hue falls
    into, then the lightness offset is added to every channel.

    Args:
        hue: Hue in degrees; taken modulo 360 so 360 is the same as 0
        saturation: Saturation as percentage (0-100)
        lightness: Lightness as percentage (0-100)

    Returns:
        Hex color string like "#ff9999"

    Raises:
        ValueError: If saturation or lightness is outside 0-100
    """
    for name, value in (("saturation", saturation), ("lightness", lightness)):
        if not 0 <= value <= 100:  # noqa: PLR2004
            raise ValueError(f"{name} must be between 0 and 100, got {value}")

    h = hue % HUE_DEGREES
    s = saturation / 100
    lightness_frac = lightness / 100

    chroma = (1 - abs(2 * lightness_frac - 1)) * s
    h_prime = h / HUE_SECTOR_DEGREES
    secondary = chroma * (1 - abs(h_prime % 2 - 1))
    offset = lightness_frac - chroma / 2

    sector = int(h_prime)
    if sector == 0:
        r, g, b = chroma, secondary, 0.0
    elif sector == 1:
        r, g, b = secondary, chroma, 0.0
    elif sector == 2:  # noqa: PLR2004
        r, g, b = 0.0, chroma, secondary
    elif sector == 3:  # noqa: PLR2004
        r, g, b = 0.0, secondary, chroma
    elif sector == 4:  # noqa: PLR2004
        r, g, b = secondary, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, secondary

    channels = [round_half_up((c + offset) * CHANNEL_MAX) for c in (r, g, b)]
    result = "#" + "".join(f"{c:02x}" for c in channels)
    if debug_enabled():
        logger.debug(f"hsl({hue}, {saturation}%, {lightness}%) -> {result}")
    return result


def slider_hue(position: float, slider_max: float) -> int:
    """Map a slider coordinate in [0, slider_max] to a hue in degrees.

    The position is not clamped here; the slider already keeps it in range.
    """
    if slider_max <= 0:
        raise ValueError(f"slider_max must be positive, got {slider_max}")
    return round_half_up(position / slider_max * HUE_DEGREES)


def hue_to_hex(position: float, slider_max: float) -> str:
    """Convert a hue slider position to a ``#rrggbb`` color.

    Saturation and lightness are fixed (100% and 80%), so every color the
    slider can produce has the same brightness.

    Example:
        hue_to_hex(0, 300)    # '#ff9999'
        hue_to_hex(100, 300)  # '#99ff99'
    """
    return hsl_to_hex(slider_hue(position, slider_max), SLIDER_SATURATION, SLIDER_LIGHTNESS)


def luminance(color: str) -> float:
    """Perceptual brightness of a ``#RRGGBB`` color in [0, 1]."""
    r, g, b = hex_to_rgb(color)
    return (0.299 * r + 0.587 * g + 0.114 * b) / CHANNEL_MAX


def contrast_text_color(background: str) -> str:
    """Compute readable text color (black or white) for a background color.

    Args:
        background: Background color like '#FF9AA2'

    Returns:
        '#000000' for light backgrounds, '#FFFFFF' for dark ones

    Raises:
        InvalidColorError: If ``background`` is not a ``#RRGGBB`` string
    """
    return DARK_TEXT if luminance(background) > CONTRAST_MIDPOINT else LIGHT_TEXT


def palette_swatches(palette: Sequence[str] = DEFAULT_PALETTE) -> list[tuple[str, str]]:
    """Pair every palette color with the text color drawn on it."""
    return [(color, contrast_text_color(color)) for color in palette]
