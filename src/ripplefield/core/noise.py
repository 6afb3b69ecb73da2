"""
Deterministic hash and gradient noise primitives.

Vectorized with numpy: every function accepts floats or arrays of any
(matching) shape for the x and y coordinates and returns arrays of that
shape. The sine-based hash is fixed so that the same inputs give the
same field on every platform.
"""

import numpy as np

HASH_SCALE = 43758.5453


def fract(x):
    """Fractional part, GLSL style (always in [0, 1))."""
    return x - np.floor(x)


def hash_scalar(x, k: float):
    """fract(sin(x*k) * 43758.5453)."""
    return fract(np.sin(x * k) * HASH_SCALE)


def hash_dot(x, y, kx: float, ky: float):
    """fract(sin(dot((x, y), (kx, ky))) * 43758.5453)."""
    return fract(np.sin(x * kx + y * ky) * HASH_SCALE)


def hash2(x, y) -> tuple[np.ndarray, np.ndarray]:
    """
    Pseudo-random unit gradient for each lattice point.

    Args:
        x, y: Coordinates (floats or arrays of equal shape).

    Returns:
        (gx, gy) components of a normalized 2D vector.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    a = hash_dot(x, y, 127.1, 311.7) * 2.0 - 1.0
    b = hash_dot(x, y, 269.5, 183.3) * 2.0 - 1.0

    length = np.sqrt(a * a + b * b)
    length = np.maximum(length, 1e-12)
    return a / length, b / length


def fade(t):
    """Quintic smoothing curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lattice_noise(x, y) -> np.ndarray:
    """
    Perlin-style gradient noise over unit cells.

    Returns:
        Noise values, approximately in [-1, 1].
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    xi = np.floor(x)
    yi = np.floor(y)
    xf = x - xi
    yf = y - yi

    g00x, g00y = hash2(xi, yi)
    g10x, g10y = hash2(xi + 1.0, yi)
    g01x, g01y = hash2(xi, yi + 1.0)
    g11x, g11y = hash2(xi + 1.0, yi + 1.0)

    d00 = g00x * xf + g00y * yf
    d10 = g10x * (xf - 1.0) + g10y * yf
    d01 = g01x * xf + g01y * (yf - 1.0)
    d11 = g11x * (xf - 1.0) + g11y * (yf - 1.0)

    ux = fade(xf)
    uy = fade(yf)

    ix0 = d00 + (d10 - d00) * ux
    ix1 = d01 + (d11 - d01) * ux
    return ix0 + (ix1 - ix0) * uy


def fractal_noise(x, y, octaves: int = 4) -> np.ndarray:
    """
    Fractal Brownian motion: octaves of lattice noise at doubling
    frequency and halving amplitude, starting at amplitude 0.5.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    total = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    amplitude = 0.5
    for _ in range(octaves):
        total += amplitude * lattice_noise(x, y)
        x = x * 2.0
        y = y * 2.0
        amplitude *= 0.5
    return total


def smoothstep(edge0: float, edge1: float, x):
    """GLSL smoothstep."""
    t = np.clip((np.asarray(x, dtype=np.float64) - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)
