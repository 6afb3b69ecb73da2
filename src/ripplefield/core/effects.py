"""
Single-slot effect chain.

Exactly one effect is active per frame. Lens distortion and pixelation
only warp the sampling coordinate (see ``core.distortion``); fluted
glass warps the coordinate and also shades the color here. Every other
effect transforms the base color. Unknown effect ids pass the color
through unchanged.

All functions take an (..., 3) color array plus the (...) UV arrays the
color was sampled at.
"""

import numpy as np

from ripplefield.core.distortion import fluted_slice
from ripplefield.core.noise import fractal_noise, hash_dot, smoothstep
from ripplefield.core.params import FilmEffect, ParameterSet
from ripplefield.core.tonemap import apply_tone_curve

FILM_FPS = 24.0
FILM_NOISE_CAP = 0.2
BLOOM_THRESHOLD = 0.2
BLOOM_LUMA = np.array([0.2126, 0.7152, 0.0722])


def _mix(a, b, t):
    return a + (b - a) * t


def _shift(x):
    """Add a trailing channel axis so per-pixel scalars broadcast over RGB."""
    return np.asarray(x)[..., np.newaxis]


def film_noise(color, u, v, time: float, wave_speed: float, intensity: float):
    """
    Film grain quantized to 24 fps of real (unscaled) time.

    Four hashes at decorrelated scales are averaged after a sub-pixel
    jitter so no lattice pattern survives.
    """
    bx = u * 1000.0
    by = v * 1000.0
    real_time = time / max(wave_speed, 0.001)
    k = np.floor(real_time * FILM_FPS)

    jitter1 = hash_dot(bx + k * 0.123, by + k * 0.123, 78.233, 127.1)
    jitter2 = hash_dot(bx + k * 0.456, by + k * 0.456, 183.3, 269.5)
    jx = bx + jitter1 * 2.0
    jy = by + jitter2 * 2.0

    r1 = hash_dot(jx * 1.0 + k * 1.0, jy * 1.0 + k * 1.0, 127.1, 311.7)
    r2 = hash_dot(jx * 1.3 + k * 2.7, jy * 1.3 + k * 2.7, 269.5, 183.3)
    r3 = hash_dot(jx * 0.7 + k * 4.3, jy * 0.7 + k * 4.3, 419.2, 371.9)
    r4 = hash_dot(jx * 1.7 + k * 6.1, jy * 1.7 + k * 6.1, 521.7, 241.3)

    noise = (r1 + r2 + r3 + r4) * 0.25 - 0.5
    noise = noise * (0.8 + jitter1 * 0.4)

    return color + _shift(noise * min(intensity, FILM_NOISE_CAP))


def chromatic_aberration(color, amount: float):
    """Pull red and blue toward 90% of their value, in proportion to ``amount``."""
    scale = 1.0 - 0.1 * amount * 50.0
    out = np.array(color, dtype=np.float64, copy=True)
    out[..., 0] *= scale
    out[..., 2] *= scale
    return out


def compute_bloom(color):
    """Brighten colors whose luminance exceeds the bloom threshold."""
    color = np.asarray(color, dtype=np.float64)
    lum = color @ BLOOM_LUMA
    bright = _shift(np.maximum(lum - BLOOM_THRESHOLD, 0.0))
    return color * (1.0 + bright * 2.0) + color * bright * bright * 4.0


def bloom(color, intensity: float):
    return _mix(color, compute_bloom(color), intensity)


def trail_blur(color, u, v, time: float, intensity: float):
    """Blend toward two time-modulated ghosts of the same color."""
    if intensity <= 0.0:
        return color

    ghost1 = color * _shift(0.8 + 0.2 * np.sin(time + u * 10.0))
    ghost2 = color * _shift(0.9 + 0.1 * np.cos(time * 0.7 + v * 15.0))

    trail = _mix(color, ghost1, intensity * 0.3)
    return _mix(trail, ghost2, intensity * 0.2)


def watercolor(color, u, v, time: float, intensity: float):
    """
    Noise-driven bleeding between RGB channels, paper grain and a
    slowly rotating flow layer.
    """
    if intensity <= 0.0:
        return color

    t = time

    # Bleed layers at three scales
    b1u = u + np.sin(t * 0.3 + v * 4.0) * intensity * 0.03
    b1v = v + np.cos(t * 0.2 + u * 3.0) * intensity * 0.03
    bleed1 = fractal_noise(b1u * 8.0 + t * 0.15, b1v * 8.0 + t * 0.15)

    b2u = u + np.cos(t * 0.5 + u * 6.0) * intensity * 0.02
    b2v = v + np.sin(t * 0.4 + v * 5.0) * intensity * 0.02
    bleed2 = fractal_noise(b2u * 12.0 + t * 0.1, b2v * 12.0 + t * 0.1)

    b3u = u + np.sin(t * 0.7 + u * 8.0) * intensity * 0.015
    b3v = v + np.cos(t * 0.6 + v * 7.0) * intensity * 0.015
    bleed3 = fractal_noise(b3u * 20.0 + t * 0.08, b3v * 20.0 + t * 0.08)

    # Channel bleeding: red, then green, then blue reading the updated red
    shuffled = np.array(color, dtype=np.float64, copy=True)
    shuffled[..., 0] = _mix(shuffled[..., 0], shuffled[..., 1], (bleed1 - 0.5) * intensity * 0.4)
    shuffled[..., 1] = _mix(shuffled[..., 1], shuffled[..., 2], (bleed2 - 0.5) * intensity * 0.3)
    shuffled[..., 2] = _mix(shuffled[..., 2], shuffled[..., 0], (bleed3 - 0.5) * intensity * 0.35)

    offset = np.array(color, dtype=np.float64, copy=True)
    offset[..., 0] += (bleed2 - 0.5) * intensity * 0.25
    offset[..., 1] += (bleed3 - 0.5) * intensity * 0.2
    offset[..., 2] += (bleed1 - 0.5) * intensity * 0.3

    blend1 = smoothstep(0.3, 0.7, bleed1) * intensity
    blend2 = smoothstep(0.4, 0.8, bleed2) * intensity

    out = _mix(color, shuffled, _shift(blend1 * 0.6))
    out = _mix(out, offset, _shift(blend2 * 0.4))

    # Paper grain
    paper = fractal_noise(u * 150.0 + t * 0.05, v * 150.0 + t * 0.05) * 0.03 * intensity
    out = out + _shift(paper * 0.5)

    # Directional flow with an RGB -> GBR rotation
    fx, fy = np.sin(t * 0.1), np.cos(t * 0.08)
    norm = max(float(np.hypot(fx, fy)), 1e-12)
    fu = u + fx / norm * intensity * 0.01
    fv = v + fy / norm * intensity * 0.01
    flow = fractal_noise(fu * 25.0 + t * 0.12, fv * 25.0 + t * 0.12)

    rotated = out[..., [1, 2, 0]]
    flow_color = _mix(out, rotated, _shift((flow - 0.5) * intensity * 0.3))

    return _mix(out, flow_color, _shift(smoothstep(0.4, 0.9, flow) * intensity * 0.5))


def fluted_glass_shading(color, u, v, params: ParameterSet):
    """Soft brightness banding across the flutes; identity at zero intensity."""
    intensity = params.glass_stripes_intensity
    if intensity <= 0.0:
        return color

    progress = fluted_slice(u, v, params)
    band = 1.0 - np.abs(progress - 0.5) * 2.0
    band = smoothstep(0.0, 1.0, band)
    band = smoothstep(0.1, 0.9, band)
    band = smoothstep(0.2, 0.8, band)

    shading = (band - 0.5) * 0.06 * intensity
    out = color * _shift(1.0 + shading)

    highlight = smoothstep(0.3, 0.7, band * 0.015 * intensity)
    return out + _shift(highlight * 0.4)


def apply_effect(color, u, v, time: float, params: ParameterSet):
    """
    Run the active color-space effect.

    Args:
        color: (..., 3) base color.
        u, v: UV the color was sampled at (after coordinate effects).
        time: Animation time.
        params: Parameter snapshot.

    Returns:
        (..., 3) color, unclamped.
    """
    effect = params.film_effect

    if effect == FilmEffect.FILM_NOISE:
        return film_noise(color, u, v, time, params.wave_speed, params.film_noise_intensity)
    if effect == FilmEffect.TONE_MAPPING:
        return apply_tone_curve(color, params.tone_mapping_lut)
    if effect == FilmEffect.CHROMATIC_ABERRATION:
        return chromatic_aberration(color, params.ca_amount)
    if effect == FilmEffect.BLOOM:
        return bloom(color, params.bloom_intensity)
    if effect == FilmEffect.TRAIL_BLUR:
        return trail_blur(color, u, v, time, params.trail_blur)
    if effect == FilmEffect.WATERCOLOR:
        return watercolor(color, u, v, time, params.watercolor)
    if effect == FilmEffect.FLUTED_GLASS:
        return fluted_glass_shading(color, u, v, params)

    # None, lens distortion, pixelation and unknown ids
    return color
