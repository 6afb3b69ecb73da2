"""
Randomization of the visual state.

Full randomize draws a new palette, new wave and twirl parameters and
fresh twirl seeds, and resets the effect slot. Color-only randomize
keeps every parameter and replaces just the anchors.
"""

import logging
from dataclasses import replace

import numpy as np

from ripplefield.core.palette import ContrastHints, generate_anchor_palette, has_dark_colors
from ripplefield.core.params import AnchorPalette, BlendMode, ParameterSet

logger = logging.getLogger(__name__)

DARK_PALETTE_PROBABILITY = 0.45
MAX_TWIRL_SEED = 10.0

# Effect fields restored to their defaults by a full randomize
_EFFECT_DEFAULTS = {
    name: getattr(ParameterSet(), name)
    for name in (
        "film_effect",
        "film_noise_intensity",
        "bloom_intensity",
        "ca_amount",
        "lens_distortion",
        "pixelation_size",
        "trail_blur",
        "watercolor",
        "glass_stripes_intensity",
        "glass_stripes_frequency",
        "tone_mapping_lut",
    )
}


def _rng(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _uniform(rng: np.random.Generator, low: float, high: float, digits: int) -> float:
    return round(low + rng.random() * (high - low), digits)


def hints_for(params: ParameterSet) -> ContrastHints:
    return ContrastHints(zoom=params.wave_zoom, twirl=params.wave_twirl)


def _random_palette(params: ParameterSet, rng: np.random.Generator) -> AnchorPalette:
    scheme = "analogous" if rng.random() < 0.5 else "complementary"
    dark = rng.random() < DARK_PALETTE_PROBABILITY
    logger.debug("Generating %s%s palette", "dark " if dark else "", scheme)
    return generate_anchor_palette(scheme, dark, hints_for(params), rng)


def randomize_colors_only(
    params: ParameterSet,
    rng: np.random.Generator | None = None,
) -> AnchorPalette:
    """New anchors for the current parameters; nothing else changes."""
    return _random_palette(params, _rng(rng))


def regenerate_twirl_seeds(
    params: ParameterSet,
    rng: np.random.Generator | None = None,
) -> ParameterSet:
    rng = _rng(rng)
    return replace(
        params,
        twirl_seed_x=float(rng.random() * MAX_TWIRL_SEED),
        twirl_seed_y=float(rng.random() * MAX_TWIRL_SEED),
    )


def pick_blend_mode(palette: AnchorPalette, rng: np.random.Generator) -> int:
    """Uniform blend mode, steering dark palettes away from Multiply and Overlay."""
    mode = int(rng.integers(0, 4))
    if mode in (BlendMode.MULTIPLY, BlendMode.OVERLAY) and has_dark_colors(palette.colors):
        mode = int(rng.choice([BlendMode.SMOOTH, BlendMode.SCREEN]))
    return mode


def randomize(
    params: ParameterSet,
    rng: np.random.Generator | None = None,
) -> tuple[ParameterSet, AnchorPalette]:
    """
    Randomize palette, waves, twirl and blend mode.

    Palette contrast hints come from the zoom and twirl in ``params``
    as they were before this call. Turbulence, noise displacement,
    amplitude variation and the final grade carry over unchanged.

    Returns:
        (new_params, new_palette)
    """
    rng = _rng(rng)
    palette = _random_palette(params, rng)

    new_params = replace(
        params,
        wave_count=int(rng.integers(4, 13)),
        wave_amplitude=_uniform(rng, 0.5, 10.0, 2),
        wave_zoom=_uniform(rng, 0.5, 12.0, 1),
        wave_frequency=_uniform(rng, 0.1, 3.0, 1),
        wave_twirl=_uniform(rng, 0.0, 0.2, 3),
        wave_speed=_uniform(rng, 0.2, 3.0, 1),
        phase_randomness=_uniform(rng, 0.0, 3.0, 1),
        direction_drift=_uniform(rng, 0.0, 2.0, 1),
        twirl_sources=int(rng.integers(1, 7)),
        twirl_location=int(rng.integers(0, 3)),
        blend_mode=pick_blend_mode(palette, rng),
        **_EFFECT_DEFAULTS,
    )
    new_params = regenerate_twirl_seeds(new_params, rng)

    return new_params, palette
