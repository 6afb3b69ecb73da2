"""
Eight-anchor gradient interpolation.

Maps a clamped sample coordinate to a base color using the four corner
and four edge-midpoint anchors, an optional blend mode between the
top and bottom edge colors, a faint hash texture and a wave-driven
tint toward the palette average.
"""

import numpy as np

from ripplefield.core.noise import hash_dot
from ripplefield.core.params import BlendMode

# Weight of the blend-mode result merged over the averaged gradient.
BLEND_MERGE_WEIGHT = 0.85
TEXTURE_NOISE_AMPLITUDE = 0.02
WAVE_TINT_WEIGHT = 0.08


def mix(a, b, t):
    """Linear interpolation; ``t`` broadcasts over the trailing channel axis."""
    t = np.asarray(t, dtype=np.float64)
    if t.ndim:
        t = t[..., np.newaxis]
    return a + (b - a) * t


def blend_mode_func(a: np.ndarray, b: np.ndarray, mode: int) -> np.ndarray:
    """
    Combine two colors.

    Smooth is a 50% mix, Multiply a*b, Screen 1-(1-a)(1-b), Overlay the
    channel-wise piecewise formula keyed on ``a``. Unknown modes mix 50%.
    """
    if mode == BlendMode.MULTIPLY:
        return a * b
    if mode == BlendMode.SCREEN:
        return 1.0 - (1.0 - a) * (1.0 - b)
    if mode == BlendMode.OVERLAY:
        return np.where(
            a < 0.5,
            2.0 * a * b,
            1.0 - 2.0 * (1.0 - a) * (1.0 - b),
        )
    return mix(a, b, 0.5)


def edge_colors(x, y, anchors: np.ndarray):
    """
    Edge interpolations for each sample.

    Args:
        x, y: Sample coordinates in [0, 1].
        anchors: (8, 3) anchor colors.

    Returns:
        (top, bottom, left, right) arrays of shape x.shape + (3,).
    """
    c1, c2, c3, c4, c5, c6, c7, c8 = anchors

    left_half = np.asarray(np.asarray(x) < 0.5)[..., np.newaxis]
    tx_left = x * 2.0
    tx_right = (x - 0.5) * 2.0
    top = np.where(left_half, mix(c1, c5, tx_left), mix(c5, c2, tx_right))
    bottom = np.where(left_half, mix(c4, c7, tx_left), mix(c7, c3, tx_right))

    top_half = np.asarray(np.asarray(y) < 0.5)[..., np.newaxis]
    ty_top = y * 2.0
    ty_bottom = (y - 0.5) * 2.0
    left = np.where(top_half, mix(c1, c8, ty_top), mix(c8, c4, ty_bottom))
    right = np.where(top_half, mix(c2, c6, ty_top), mix(c6, c3, ty_bottom))

    return top, bottom, left, right


def base_gradient(x, y, anchors: np.ndarray, blend_mode: int):
    """Averaged edge composites, merged with the blend-mode result unless Smooth."""
    top, bottom, left, right = edge_colors(x, y, anchors)

    horizontal = mix(top, bottom, y)
    vertical = mix(left, right, x)
    gradient = mix(horizontal, vertical, 0.5)

    if blend_mode == BlendMode.SMOOTH:
        return gradient

    blended = blend_mode_func(top, bottom, blend_mode)
    return mix(gradient, blended, BLEND_MERGE_WEIGHT)


def texture_noise(x, y):
    return hash_dot(x, y, 12.9898, 78.233) * TEXTURE_NOISE_AMPLITUDE


def interpolate(x, y, wave, anchors: np.ndarray, blend_mode: int) -> np.ndarray:
    """
    Base color for each sample coordinate.

    Args:
        x, y: Clamped sample coordinates.
        wave: Wave scalar from the distortion pipeline.
        anchors: (8, 3) anchor colors in [0, 1].
        blend_mode: BlendMode value.

    Returns:
        Array of shape x.shape + (3,). Not clamped.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    color = base_gradient(x, y, anchors, blend_mode)
    color = color + np.asarray(texture_noise(x, y))[..., np.newaxis]

    average = anchors.mean(axis=0)
    variation = np.asarray(np.sin(np.asarray(wave, dtype=np.float64) * 2.0) * 0.1)
    wave_color = np.clip(average + variation[..., np.newaxis], 0.0, 1.0)

    return mix(color, wave_color, WAVE_TINT_WEIGHT)
