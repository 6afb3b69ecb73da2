"""
Coordinate distortion pipeline.

Takes normalized UV positions through the coordinate-space effects,
zoom, sequential twirl sources, fractal turbulence, noise displacement
and the wave sum, producing the clamped coordinate used for palette
lookup. Every stage is a no-op when its parameter is zero, so with all
distortion parameters at zero the sample coordinate is the input UV.
"""

import math
from typing import NamedTuple

import numpy as np

from ripplefield.core.noise import fract, fractal_noise, hash_scalar, lattice_noise
from ripplefield.core.params import FilmEffect, FlutedDirection, ParameterSet, TwirlLocation

TAU = 6.28318530718
MAX_TWIRL_SOURCES = 6
MAX_WAVES = 12

SAMPLE_MIN = 0.01
SAMPLE_MAX = 0.99


class DistortionResult(NamedTuple):
    """Outputs of :func:`distort`."""

    u: np.ndarray  # UV after coordinate effects, used by color effects
    v: np.ndarray
    sample_u: np.ndarray  # clamped palette lookup coordinate
    sample_v: np.ndarray
    wave: np.ndarray  # summed wave scalar


# --- Coordinate-space effects -----------------------------------------------


def fluted_slice(u, v, params: ParameterSet):
    """Position within the current flute band, in [0, 1)."""
    num_slices = params.glass_stripes_frequency * 0.8
    axis = u if params.glass_stripes_direction == FlutedDirection.VERTICAL else v
    return fract(axis * num_slices)


def fluted_glass_warp(u, v, params: ParameterSet):
    """Sinusoidal displacement along one axis, tapered toward band edges."""
    amplitude = 0.015 * params.glass_stripes_distortion
    progress = fluted_slice(u, v, params)
    offset = amplitude * np.sin(progress * TAU) * (1.0 - 0.5 * np.abs(progress - 0.5))

    if params.glass_stripes_direction == FlutedDirection.VERTICAL:
        return u + offset, v
    return u, v + offset


def lens_warp(u, v, k: float):
    """Barrel (k > 0) or pincushion (k < 0) distortion around the centre."""
    du = u - 0.5
    dv = v - 0.5
    factor = 1.0 + k * (du * du + dv * dv)
    return (
        np.clip(0.5 + du * factor, 0.0, 1.0),
        np.clip(0.5 + dv * factor, 0.0, 1.0),
    )


def pixelate(u, v, pixel_size: float, resolution: tuple[int, int]):
    """Snap UV to a grid of resolution / pixel_size cells."""
    if pixel_size <= 1.0:
        return u, v
    count_u = resolution[0] / pixel_size
    count_v = resolution[1] / pixel_size
    return np.floor(u * count_u) / count_u, np.floor(v * count_v) / count_v


def apply_coordinate_effects(u, v, params: ParameterSet, resolution: tuple[int, int]):
    """Fluted glass, lens distortion or pixelation, whichever effect is selected."""
    effect = params.film_effect
    if effect == FilmEffect.FLUTED_GLASS:
        u, v = fluted_glass_warp(u, v, params)
    elif effect == FilmEffect.LENS_DISTORTION:
        u, v = lens_warp(u, v, params.lens_distortion)
    elif effect == FilmEffect.PIXELATION:
        u, v = pixelate(u, v, params.pixelation_size, resolution)
    return u, v


def to_centered(u, v, aspect: float, zoom: float):
    """UV in [0, 1] to aspect-corrected, zoomed position centred on 0."""
    x = (u * 2.0 - 1.0) * aspect * zoom
    y = (v * 2.0 - 1.0) * zoom
    return x, y


# --- Twirl --------------------------------------------------------------------


def twirl_center(i: int, t: float, params: ParameterSet, aspect: float) -> tuple[float, float]:
    """Centre of twirl source ``i`` at time ``t`` for the current placement mode."""
    fi = float(i)
    location = params.twirl_location

    if location == TwirlLocation.CENTER:
        return (
            math.sin(t * (0.08 + fi * 0.02) + fi * 2.0) * (0.4 + fi * 0.1),
            math.cos(t * (0.06 + fi * 0.03) + fi * 1.5) * (0.5 + fi * 0.1),
        )

    if location == TwirlLocation.CORNERS:
        zoom = params.wave_zoom
        radius = min(aspect * zoom, zoom) * 0.9

        if params.twirl_sources <= 3:
            step = 6.28318 / params.twirl_sources
            angle = fi * step + t * 0.02
            return math.cos(angle) * radius, math.sin(angle) * radius

        base_angle = float(i % 3) * (6.28318 / 3.0) + t * 0.02
        bx = math.cos(base_angle) * radius
        by = math.sin(base_angle) * radius
        if i < 3:
            return bx, by

        companion_angle = base_angle + 1.57 + fi * 0.5
        return (
            bx + math.cos(companion_angle) * 0.3,
            by + math.sin(companion_angle) * 0.3,
        )

    seed_x = params.twirl_seed_x
    seed_y = params.twirl_seed_y
    base_x = math.cos(fi * 2.4 + seed_x + fi) * 1.5
    base_y = math.sin(fi * 1.8 + seed_y + fi) * 1.2
    return (
        base_x + math.sin(t * (0.06 + fi * 0.015) + fi * 3.14 + seed_x) * (0.3 + fi * 0.1),
        base_y + math.cos(t * (0.05 + fi * 0.02) + fi * 2.1 + seed_y) * (0.25 + fi * 0.08),
    )


def twirl_centers(t: float, params: ParameterSet, aspect: float) -> list[tuple[float, float]]:
    n = min(params.twirl_sources, MAX_TWIRL_SOURCES)
    return [twirl_center(i, t, params, aspect) for i in range(n)]


def twirl_strength(i: int, dist, params: ParameterSet):
    """Blend weight of source ``i``: constant in Center mode, distance falloff otherwise."""
    fi = float(i)
    twirl = params.wave_twirl
    location = params.twirl_location

    if location == TwirlLocation.CENTER:
        return twirl * (30.0 / (1.0 + fi * 0.5))
    if location == TwirlLocation.CORNERS:
        falloff = 1.0 / (1.0 + dist * 1.5)
        return twirl * falloff * (25.0 / (1.0 + fi * 0.4))
    falloff = 1.0 / (1.0 + dist * (2.0 + fi * 0.5))
    return twirl * falloff * (20.0 / (1.0 + fi * 0.3))


def apply_twirl(x, y, t: float, params: ParameterSet, aspect: float):
    """
    Rotate the position around the origin once per twirl source.

    Sources compose sequentially: each one acts on the position produced
    by the previous source, in index order.
    """
    if params.wave_twirl <= 0.0 or params.twirl_sources <= 0:
        return x, y

    twirl = params.wave_twirl
    for i, (cx, cy) in enumerate(twirl_centers(t, params, aspect)):
        fi = float(i)
        dist = np.sqrt((x - cx) ** 2 + (y - cy) ** 2)
        strength = twirl_strength(i, dist, params)

        angle = dist * twirl * (1.2 + fi * 0.2) + t * (0.03 + fi * 0.01)
        angle = angle * (0.7 - fi * 0.08)
        cos_a = np.cos(angle)
        sin_a = np.sin(angle)

        rx = x * cos_a - y * sin_a
        ry = x * sin_a + y * cos_a

        x = x + (rx - x) * strength
        y = y + (ry - y) * strength

    return x, y


# --- Noise displacement -------------------------------------------------------


def apply_turbulence(x, y, t: float, intensity: float):
    if intensity <= 0.0:
        return x, y
    px = x * 1.5 + t * 0.05
    py = y * 1.5 + t * 0.05
    tx = fractal_noise(px, py) * intensity
    ty = fractal_noise(px + 100.0, py + 50.0) * intensity
    return x + tx * 0.8, y + ty * 0.6


def apply_noise_displacement(x, y, t: float, amount: float):
    if amount <= 0.0:
        return x, y
    px = x * 3.0 + t * 0.1
    py = y * 3.0 + t * 0.1
    ox = lattice_noise(px, py) * amount
    oy = lattice_noise(px + 100.0, py + 100.0) * amount
    return x + ox, y + oy


# --- Waves --------------------------------------------------------------------


def wave_direction(i: int, t: float, params: ParameterSet) -> tuple[float, float]:
    angle = i * 0.5 * params.wave_frequency
    if params.direction_drift > 0.0:
        angle += math.sin(t * 0.1 + i * 2.0) * params.direction_drift
    return math.cos(angle), math.sin(angle)


def wave_phase(i: int, params: ParameterSet) -> float:
    if params.phase_randomness <= 0.0:
        return 0.0
    return float(hash_scalar(float(i), 12.9898)) * params.phase_randomness


def wave_amplitude_variation(i: int, params: ParameterSet) -> float:
    if params.amplitude_variation <= 0.0:
        return 1.0
    variation = 1.0 + (float(hash_scalar(float(i), 78.233)) - 0.5) * params.amplitude_variation
    return max(0.1, variation)


def accumulate_waves(x, y, t: float, params: ParameterSet) -> np.ndarray:
    """Sum of directional sine waves with harmonic (1 / (i+1)) falloff."""
    wave = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)

    for i in range(min(params.wave_count, MAX_WAVES)):
        dx, dy = wave_direction(i, t, params)
        phase = wave_phase(i, params)
        amp_var = wave_amplitude_variation(i, params)

        dist = x * dx + y * dy + t + i * 0.7 + phase * 6.28
        wave += np.sin(dist) * params.wave_amplitude * amp_var / (i + 1.0)

    return wave


def uv_scale(amplitude: float) -> float:
    """Wave-to-UV scale, attenuated as amplitude grows."""
    return 0.08 / (1.0 + amplitude * 0.3)


def distort(
    u,
    v,
    t: float,
    params: ParameterSet,
    resolution: tuple[int, int],
) -> DistortionResult:
    """
    Run the full coordinate pipeline.

    Args:
        u, v: Normalized query positions in [0, 1].
        t: Animation time.
        params: Current parameter snapshot.
        resolution: (width, height) of the output surface.

    Returns:
        DistortionResult with warped UV, clamped sample coordinate and
        the wave scalar.
    """
    u = np.asarray(u, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    aspect = resolution[0] / resolution[1]

    u, v = apply_coordinate_effects(u, v, params, resolution)

    x, y = to_centered(u, v, aspect, params.wave_zoom)
    x, y = apply_twirl(x, y, t, params, aspect)
    x, y = apply_turbulence(x, y, t, params.turbulence)
    x, y = apply_noise_displacement(x, y, t, params.noise_displacement)

    wave = accumulate_waves(x, y, t, params)

    scale = uv_scale(params.wave_amplitude)
    sample_u = np.clip(u + wave * scale, SAMPLE_MIN, SAMPLE_MAX)
    sample_v = np.clip(v + wave * scale, SAMPLE_MIN, SAMPLE_MAX)

    return DistortionResult(u, v, sample_u, sample_v, wave)
