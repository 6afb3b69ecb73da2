"""
Constrained palette generation.

Produces four well-separated corner colors from a color-theory scheme by
rejection sampling, with the contrast threshold raised when the current
zoom or twirl would wash similar hues together. Also holds the hex/HSL
conversions and luma-based classification used around the palette.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ripplefield.core.params import (
    AnchorPalette,
    parse_hex,
    round_half_up,
    to_hex,
)

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10

SCHEMES = ("analogous", "complementary")

DARK_LIGHTNESS_LEVELS = (0.08, 0.18, 0.28, 0.35)
LIGHT_LIGHTNESS_LEVELS = (0.25, 0.45, 0.65, 0.80)

# Red, green, blue weights for the perceptual distance
DISTANCE_WEIGHTS = (2.0, 4.0, 3.0)

DARK_BACKGROUND_LUMA = 0.45
LIGHT_COLOR_LUMA = 0.6
DARK_COLOR_LUMA = 0.3


# --- Conversions --------------------------------------------------------------


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """HSL (hue in degrees, s and l in [0, 1]) to 0-255 integer RGB."""
    h = h / 360.0
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return to_hex(*hsl_to_rgb(h, s, l))


def hex_to_rgb(color: str) -> tuple[float, float, float]:
    """Hex color to floats in [0, 1]."""
    r, g, b = parse_hex(color)
    return r / 255.0, g / 255.0, b / 255.0


def hex_to_hsl(color: str) -> tuple[float, float, float]:
    """Hex color to (hue degrees, saturation, lightness)."""
    r, g, b = hex_to_rgb(color)
    hi = max(r, g, b)
    lo = min(r, g, b)
    l = (hi + lo) / 2

    if hi == lo:
        return 0.0, 0.0, l

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
    if hi == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6 * 360.0, s, l


# --- Contrast -----------------------------------------------------------------


def color_distance(color_a: str, color_b: str) -> float:
    """Weighted RGB distance approximating perceptual difference."""
    a = hex_to_rgb(color_a)
    b = hex_to_rgb(color_b)
    wr, wg, wb = DISTANCE_WEIGHTS
    return float(np.sqrt(
        wr * (a[0] - b[0]) ** 2
        + wg * (a[1] - b[1]) ** 2
        + wb * (a[2] - b[2]) ** 2
    ))


def has_minimum_contrast(colors: Sequence[str], min_distance: float = 0.15) -> bool:
    """True when every pair of colors is at least ``min_distance`` apart."""
    for i in range(len(colors)):
        for j in range(i + 1, len(colors)):
            if color_distance(colors[i], colors[j]) < min_distance:
                return False
    return True


@dataclass(frozen=True)
class ContrastHints:
    """Current distortion settings that raise the required palette contrast."""

    zoom: float = 2.0
    twirl: float = 0.05

    @property
    def zoomed_in(self) -> bool:
        return self.zoom < 2.0

    @property
    def zoomed_out(self) -> bool:
        return self.zoom > 8.0

    @property
    def high_twirl(self) -> bool:
        return self.twirl > 0.12

    @property
    def extreme(self) -> bool:
        return (self.zoomed_out and self.high_twirl) or self.zoom > 10.0 or self.twirl > 0.15

    def _ladder(self, default, zoomed_in, moderate, extreme):
        # Zoomed-in applies first; extreme, then moderate, override it.
        value = zoomed_in if self.zoomed_in else default
        if self.extreme:
            return extreme
        if self.zoomed_out or self.high_twirl:
            return moderate
        return value

    @property
    def min_contrast(self) -> float:
        return self._ladder(0.15, 0.25, 0.28, 0.35)

    @property
    def analogous_spread(self) -> float:
        return self._ladder(25.0, 50.0, 40.0, 70.0)

    @property
    def saturation_variation(self) -> float:
        return self._ladder(0.2, 0.2, 0.25, 0.35)

    @property
    def lightness_variation(self) -> float:
        return self._ladder(0.08, 0.12, 0.10, 0.15)


# --- Generation ---------------------------------------------------------------


def scheme_hues(scheme: str, base_hue: float, hints: ContrastHints) -> list[float]:
    """Four hues for the scheme; anything but "complementary" is analogous."""
    if scheme == "complementary":
        offsets = (0.0, 180.0, 30.0, 210.0)
    else:
        spread = hints.analogous_spread
        offsets = (0.0, spread * 0.7, spread * 1.3, spread * 0.4)
    return [(base_hue + offset) % 360 for offset in offsets]


def _sample_colors(
    hues: Sequence[float],
    base_saturation: float,
    dark: bool,
    hints: ContrastHints,
    rng: np.random.Generator,
) -> list[str]:
    levels = DARK_LIGHTNESS_LEVELS if dark else LIGHT_LIGHTNESS_LEVELS
    s_var = hints.saturation_variation
    l_var = hints.lightness_variation

    colors = []
    for i, hue in enumerate(hues):
        s = float(np.clip(base_saturation + (rng.random() - 0.5) * s_var, 0.15, 0.95))
        l = float(np.clip(levels[i % 4] + (rng.random() - 0.5) * l_var, 0.05, 0.95))
        colors.append(hsl_to_hex(hue, s, l))
    return colors


def generate_palette(
    scheme: str = "analogous",
    dark: bool = False,
    hints: ContrastHints | None = None,
    rng: np.random.Generator | None = None,
) -> list[str]:
    """
    Generate four corner colors.

    Hue and base saturation are drawn once; saturation and lightness
    are re-drawn each attempt until every pair clears the contrast
    threshold or ``MAX_ATTEMPTS`` is reached, in which case the last
    attempt is returned as is.

    Args:
        scheme: "analogous" or "complementary".
        dark: Bias lightness toward 0.08-0.35 instead of 0.25-0.80.
        hints: Current zoom / twirl, see :class:`ContrastHints`.
        rng: Random generator (a fresh default_rng when omitted).

    Returns:
        Four "#rrggbb" strings.
    """
    hints = hints or ContrastHints()
    rng = rng if rng is not None else np.random.default_rng()

    base_hue = float(np.floor(rng.random() * 360))
    base_saturation = float(np.clip(0.55 + rng.random() * 0.25, 0.35, 0.85))
    hues = scheme_hues(scheme, base_hue, hints)

    threshold = hints.min_contrast
    colors: list[str] = []
    for attempt in range(1, MAX_ATTEMPTS + 1):
        colors = _sample_colors(hues, base_saturation, dark, hints, rng)
        if has_minimum_contrast(colors, threshold):
            logger.debug("Palette accepted after %d attempt(s)", attempt)
            return colors

    logger.debug(
        "Palette contrast below %.2f after %d attempts, keeping last", threshold, MAX_ATTEMPTS
    )
    return colors


def generate_anchor_palette(
    scheme: str = "analogous",
    dark: bool = False,
    hints: ContrastHints | None = None,
    rng: np.random.Generator | None = None,
) -> AnchorPalette:
    """Generated corners plus derived edge midpoints."""
    return AnchorPalette.from_corners(generate_palette(scheme, dark, hints, rng))


# --- Luma classification ------------------------------------------------------


def color_luma(color: str) -> float:
    r, g, b = hex_to_rgb(color)
    return 0.299 * r + 0.587 * g + 0.114 * b


def is_light_color(color: str) -> bool:
    return color_luma(color) > LIGHT_COLOR_LUMA


def is_dark_color(color: str) -> bool:
    return color_luma(color) < DARK_COLOR_LUMA


def has_dark_colors(colors: Sequence[str]) -> bool:
    """At least four of the anchors are dark."""
    return sum(1 for c in colors if is_dark_color(c)) >= 4


def average_luma(colors: Sequence[str]) -> float:
    if not colors:
        return 0.0
    return sum(color_luma(c) for c in colors) / len(colors)


def uses_dark_background(colors: Sequence[str]) -> bool:
    """Whether overlays on this palette should use light-on-dark styling."""
    return average_luma(colors) < DARK_BACKGROUND_LUMA

