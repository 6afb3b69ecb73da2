"""
Film and HDR tone curves.

Each curve maps an (..., 3) RGB array to [0, 1]. Negative input is
treated as black.
"""

import numpy as np

from ripplefield.core.params import ToneCurve

# Per-channel tints applied before the film curves
WARM_TINT = np.array([1.1, 1.05, 0.95])
COOL_TINT = np.array([0.95, 1.02, 1.15])
VINTAGE_TINT = np.array([1.08, 1.03, 0.92])

UNCHARTED2_WHITE = 11.2


def _rational(x, a: float, b: float, c: float, d: float):
    """x(ax + b) / (x(ax + c) + d)."""
    return (x * (a * x + b)) / (x * (a * x + c) + d)


def aces(x):
    """Narkowicz ACES fit."""
    x = np.maximum(x, 0.0)
    num = x * (2.51 * x + 0.03)
    den = x * (2.43 * x + 0.59) + 0.14
    return np.clip(num / den, 0.0, 1.0)


def reinhard(x):
    x = np.maximum(x, 0.0)
    return np.clip(x / (1.0 + x), 0.0, 1.0)


def _uncharted2_partial(x):
    a, b, c, d, e, f = 0.15, 0.50, 0.10, 0.20, 0.02, 0.30
    return ((x * (a * x + c * b) + d * e) / (x * (a * x + b) + d * f)) - e / f


def uncharted2(x):
    """Hable filmic curve with exposure bias 2 and white point 11.2."""
    x = np.maximum(x, 0.0)
    white_scale = 1.0 / _uncharted2_partial(UNCHARTED2_WHITE)
    return np.clip(_uncharted2_partial(x * 2.0) * white_scale, 0.0, 1.0)


def cinematic(x):
    x = np.maximum(x, 0.0)
    return np.clip(_rational(x, 6.2, 0.5, 1.7, 0.06), 0.0, 1.0)


def warm_film(x):
    x = np.maximum(x, 0.0) * WARM_TINT
    return np.clip(_rational(x, 2.8, 0.15, 0.75, 0.1), 0.0, 1.0)


def cool_film(x):
    x = np.maximum(x, 0.0) * COOL_TINT
    return np.clip(_rational(x, 2.6, 0.2, 0.8, 0.12), 0.0, 1.0)


def high_contrast(x):
    x = np.power(np.maximum(x, 0.0), 0.8)
    return np.clip(_rational(x, 3.2, 0.1, 1.2, 0.08), 0.0, 1.0)


def vintage(x):
    """Gamma 1.2, warm tint, lifted blacks."""
    x = np.power(np.maximum(x, 0.0), 1.2) * VINTAGE_TINT
    return np.clip(_rational(x, 2.2, 0.3, 0.9, 0.15), 0.0, 1.0)


TONE_CURVES = {
    ToneCurve.ACES: aces,
    ToneCurve.REINHARD: reinhard,
    ToneCurve.UNCHARTED2: uncharted2,
    ToneCurve.CINEMATIC: cinematic,
    ToneCurve.WARM_FILM: warm_film,
    ToneCurve.COOL_FILM: cool_film,
    ToneCurve.HIGH_CONTRAST: high_contrast,
    ToneCurve.VINTAGE: vintage,
}


def apply_tone_curve(color, curve: int):
    """Apply the selected curve; unknown indices use ACES."""
    fn = TONE_CURVES.get(curve, aces)
    return fn(np.asarray(color, dtype=np.float64))
