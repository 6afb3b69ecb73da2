"""
Parameter set and anchor palette.

Both are frozen dataclasses: a render reads one consistent snapshot and
randomize/preset loading replaces them wholesale.
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

import numpy as np


class TwirlLocation(IntEnum):
    CENTER = 0
    RANDOM = 1
    CORNERS = 2


class BlendMode(IntEnum):
    SMOOTH = 0
    MULTIPLY = 1
    SCREEN = 2
    OVERLAY = 3


class FilmEffect(IntEnum):
    NONE = 0
    FILM_NOISE = 1
    TONE_MAPPING = 2
    CHROMATIC_ABERRATION = 3
    BLOOM = 4
    LENS_DISTORTION = 5
    PIXELATION = 6
    TRAIL_BLUR = 7
    WATERCOLOR = 8
    FLUTED_GLASS = 9


class ToneCurve(IntEnum):
    ACES = 0
    REINHARD = 1
    UNCHARTED2 = 2
    CINEMATIC = 3
    WARM_FILM = 4
    COOL_FILM = 5
    HIGH_CONTRAST = 6
    VINTAGE = 7


class FlutedDirection(IntEnum):
    VERTICAL = 0
    HORIZONTAL = 1


@dataclass(frozen=True)
class ParameterSet:
    """Every numeric and enumerated input to the field evaluator.

    Enumerated values are kept as plain ints so that out-of-range values
    fall back to the documented default variant at evaluation time.
    """

    # Waves
    wave_count: int = 5
    wave_amplitude: float = 1.5
    wave_zoom: float = 4.5
    wave_frequency: float = 1.0
    wave_speed: float = 0.0

    # Twirl
    wave_twirl: float = 0.0
    twirl_sources: int = 1
    twirl_location: int = TwirlLocation.CENTER
    twirl_seed_x: float = 0.0
    twirl_seed_y: float = 0.0

    # Specials
    turbulence: float = 0.0
    noise_displacement: float = 0.0
    phase_randomness: float = 0.0
    amplitude_variation: float = 0.0
    direction_drift: float = 0.0

    # Post-processing
    blend_mode: int = BlendMode.SMOOTH
    film_effect: int = FilmEffect.NONE
    film_noise_intensity: float = 0.0
    bloom_intensity: float = 0.0
    ca_amount: float = 0.0
    lens_distortion: float = 0.0
    pixelation_size: float = 1.0
    trail_blur: float = 0.0
    watercolor: float = 0.0
    tone_mapping_lut: int = ToneCurve.ACES

    # Fluted glass
    glass_stripes_frequency: float = 50.0
    glass_stripes_intensity: float = 0.0
    glass_stripes_direction: int = FlutedDirection.VERTICAL
    glass_stripes_distortion: float = 1.0

    # Final grade
    brightness: float = 0.0
    contrast: float = 1.5
    saturation: float = 1.5


_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?")


def parse_hex(color: str) -> tuple[int, int, int]:
    """
    Parse a hex color into 0-255 integer channels.

    Accepts "#rrggbb", "rrggbb" and "#rrggbbaa" (alpha ignored).
    """
    if not isinstance(color, str):
        raise ValueError(f"Color must be a hex string, got {color!r}")

    s = color.strip()
    if s.startswith("#"):
        s = s[1:]
    if not _HEX_DIGITS.fullmatch(s):
        raise ValueError(f"Invalid hex color: {color!r}")

    return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)


def to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(color: str) -> str:
    """Canonical lowercase #rrggbb form."""
    return to_hex(*parse_hex(color))


def round_half_up(x: float) -> int:
    return int(np.floor(x + 0.5))


def midpoint(color_a: str | None, color_b: str | None) -> str:
    """
    Per-channel average of two hex colors, rounded half up.

    Falls back to mid gray when either color is missing.
    """
    if not color_a or not color_b:
        return "#808080"

    ra, ga, ba = parse_hex(color_a)
    rb, gb, bb = parse_hex(color_b)
    return to_hex(
        round_half_up((ra + rb) / 2),
        round_half_up((ga + gb) / 2),
        round_half_up((ba + bb) / 2),
    )


# (a, b) corner indices feeding each edge midpoint: top, right, bottom, left
EDGE_NEIGHBOURS = ((0, 1), (1, 2), (2, 3), (3, 0))


@dataclass(frozen=True)
class AnchorPalette:
    """
    Eight anchor colors as canonical hex strings.

    Index 0-3: corners (top-left, top-right, bottom-right, bottom-left).
    Index 4-7: edge midpoints (top, right, bottom, left).
    """

    colors: tuple[str, ...]

    def __post_init__(self):
        if len(self.colors) != 8:
            raise ValueError(f"AnchorPalette needs 8 colors, got {len(self.colors)}")
        object.__setattr__(self, "colors", tuple(normalize_hex(c) for c in self.colors))

    @classmethod
    def from_corners(
        cls,
        corners: Sequence[str],
        edges: Sequence[str | None] | None = None,
    ) -> "AnchorPalette":
        """Build a palette, deriving any missing edge midpoint from its corners."""
        if len(corners) != 4:
            raise ValueError(f"Expected 4 corner colors, got {len(corners)}")

        edges = list(edges) if edges is not None else [None] * 4
        derived = []
        for edge, (a, b) in zip(edges, EDGE_NEIGHBOURS):
            derived.append(edge if edge else midpoint(corners[a], corners[b]))
        return cls(tuple(corners) + tuple(derived))

    @property
    def corners(self) -> tuple[str, ...]:
        return self.colors[:4]

    @property
    def edges(self) -> tuple[str, ...]:
        return self.colors[4:]

    def to_array(self) -> np.ndarray:
        """(8, 3) float64 array in [0, 1]."""
        return np.array([parse_hex(c) for c in self.colors], dtype=np.float64) / 255.0


DEFAULT_PALETTE = AnchorPalette.from_corners(("#ff6b6b", "#ff8e53", "#ff8a80", "#ffab40"))
