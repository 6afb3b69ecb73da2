"""
Preset records and the preset library.

A preset record is a flat JSON-compatible dict keyed by camelCase
parameter names plus ``color1``..``color8``. Loading applies defaults
for anything omitted; writing can omit groups that sit at their
defaults so saved presets stay short.
"""

import json
import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import Any

from ripplefield.core.params import (
    AnchorPalette,
    FilmEffect,
    ParameterSet,
    normalize_hex,
)
from ripplefield.io.builtin_presets import BUILTIN_PRESETS, SPECIAL_DISPLAY_NAMES

logger = logging.getLogger(__name__)

FILM_NOISE_CAP = 0.2

# (record key, ParameterSet field, type)
WAVE_FIELDS = (
    ("waveCount", "wave_count", int),
    ("waveAmplitude", "wave_amplitude", float),
    ("waveZoom", "wave_zoom", float),
    ("waveFrequency", "wave_frequency", float),
    ("waveTwirl", "wave_twirl", float),
    ("twirlSources", "twirl_sources", int),
    ("twirlLocation", "twirl_location", int),
    ("waveSpeed", "wave_speed", float),
)

SPECIAL_FIELDS = (
    ("turbulence", "turbulence", float),
    ("noiseDisplacement", "noise_displacement", float),
    ("phaseRandomness", "phase_randomness", float),
    ("amplitudeVariation", "amplitude_variation", float),
    ("directionDrift", "direction_drift", float),
)

FLUTED_FIELDS = (
    ("glassStripesFrequency", "glass_stripes_frequency", float),
    ("glassStripesIntensity", "glass_stripes_intensity", float),
    ("glassStripesDirection", "glass_stripes_direction", int),
    ("glassStripesDistortion", "glass_stripes_distortion", float),
)

POST_FIELDS = (
    ("blendMode", "blend_mode", int),
    ("filmEffect", "film_effect", int),
    ("filmNoiseIntensity", "film_noise_intensity", float),
    ("bloomIntensity", "bloom_intensity", float),
    ("caAmount", "ca_amount", float),
    ("lensDistortion", "lens_distortion", float),
    ("pixelationSize", "pixelation_size", float),
    ("trailBlur", "trail_blur", float),
    ("watercolor", "watercolor", float),
    ("toneMappingLUT", "tone_mapping_lut", int),
)

GRADE_FIELDS = (
    ("brightness", "brightness", float),
    ("contrast", "contrast", float),
    ("saturation", "saturation", float),
)

ALL_FIELDS = WAVE_FIELDS + SPECIAL_FIELDS + FLUTED_FIELDS + POST_FIELDS + GRADE_FIELDS

COLOR_KEYS = tuple(f"color{i}" for i in range(1, 9))

_DEFAULTS = ParameterSet()


def _coerce(key: str, value: Any, kind: type):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Preset value for {key!r} must be a number, got {value!r}")
    return kind(value)


def load_preset(
    record: dict[str, Any],
    base: ParameterSet | None = None,
) -> tuple[ParameterSet, AnchorPalette]:
    """
    Build a parameter set and palette from a preset record.

    Omitted keys take their defaults, omitted edge colors are derived
    from their two corners, and film noise intensity is capped.

    Args:
        record: Flat camelCase preset dict.
        base: Parameter set whose twirl seeds are carried over.

    Returns:
        (params, palette)

    Raises:
        ValueError: On missing corner colors, malformed hex or non-numeric values.
    """
    missing = [k for k in COLOR_KEYS[:4] if not record.get(k)]
    if missing:
        raise ValueError(f"Preset is missing corner colors: {', '.join(missing)}")

    corners = [record[k] for k in COLOR_KEYS[:4]]
    edges = [record.get(k) for k in COLOR_KEYS[4:]]
    palette = AnchorPalette.from_corners(corners, edges)

    values = {}
    for key, attr, kind in ALL_FIELDS:
        if key in record and record[key] is not None:
            values[attr] = _coerce(key, record[key], kind)

    unknown = set(record) - set(COLOR_KEYS) - {k for k, _, _ in ALL_FIELDS}
    if unknown:
        logger.debug("Ignoring unknown preset keys: %s", ", ".join(sorted(unknown)))

    params = replace(_DEFAULTS, **values)
    if params.film_noise_intensity > FILM_NOISE_CAP:
        params = replace(params, film_noise_intensity=FILM_NOISE_CAP)

    if base is not None:
        params = replace(params, twirl_seed_x=base.twirl_seed_x, twirl_seed_y=base.twirl_seed_y)

    return params, palette


def _is_default(params: ParameterSet, fields) -> bool:
    return all(getattr(params, attr) == getattr(_DEFAULTS, attr) for _, attr, _ in fields)


def _write(record: dict[str, Any], params: ParameterSet, fields):
    for key, attr, kind in fields:
        record[key] = kind(getattr(params, attr))


def preset_to_record(
    params: ParameterSet,
    palette: AnchorPalette,
    compact: bool = True,
) -> dict[str, Any]:
    """
    Serialize a parameter set and palette into a preset record.

    In compact mode the specials, post-processing and grade groups are
    written only when they differ from their defaults; inside the
    post-processing group only non-default values follow ``blendMode``,
    and the fluted glass fields appear only with the fluted glass effect
    active. Twirl seeds are never written.
    """
    record: dict[str, Any] = {key: color for key, color in zip(COLOR_KEYS, palette.colors)}
    _write(record, params, WAVE_FIELDS)

    if not compact:
        _write(record, params, SPECIAL_FIELDS + FLUTED_FIELDS + POST_FIELDS + GRADE_FIELDS)
        return record

    if not _is_default(params, SPECIAL_FIELDS):
        _write(record, params, SPECIAL_FIELDS)

    if not _is_default(params, POST_FIELDS):
        record["blendMode"] = int(params.blend_mode)
        if params.film_effect == FilmEffect.FLUTED_GLASS:
            record["filmEffect"] = int(params.film_effect)
            _write(record, params, FLUTED_FIELDS)
        for key, attr, kind in POST_FIELDS[1:]:
            if key in record:
                continue
            value = getattr(params, attr)
            if value != getattr(_DEFAULTS, attr):
                record[key] = kind(value)

    if not _is_default(params, GRADE_FIELDS):
        _write(record, params, GRADE_FIELDS)

    return record


def display_name(key: str) -> str:
    """Preset key to a human-readable name, e.g. "film-noir" -> "Film Noir"."""
    if key in SPECIAL_DISPLAY_NAMES:
        return SPECIAL_DISPLAY_NAMES[key]
    return " ".join(word[:1].upper() + word[1:] for word in key.split("-"))


def preset_key(name: str) -> str:
    """Display name to a lowercase kebab-case key."""
    key = re.sub(r"[^a-z0-9\s-]", "", name.lower())
    key = re.sub(r"\s+", "-", key)
    key = re.sub(r"-+", "-", key)
    return key.strip("-")


class PresetLibrary:
    """
    Named preset records.

    Starts from the built-in collection unless told otherwise; JSON
    files of ``{name: record}`` can be merged in and written back out.
    """

    def __init__(self, include_builtin: bool = True):
        self._records: dict[str, dict[str, Any]] = {}
        if include_builtin:
            for name, record in BUILTIN_PRESETS.items():
                self._records[name] = dict(record)

    def __contains__(self, name: str) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def names(self) -> list[str]:
        """Preset keys sorted by display name."""
        return sorted(self._records, key=lambda k: display_name(k).lower())

    def get(self, name: str) -> dict[str, Any]:
        if name not in self._records:
            raise KeyError(f"Unknown preset: {name!r}")
        return dict(self._records[name])

    def load(
        self,
        name: str,
        base: ParameterSet | None = None,
    ) -> tuple[ParameterSet, AnchorPalette]:
        logger.debug("Loading preset %s", name)
        return load_preset(self.get(name), base=base)

    def add(self, name: str, record: dict[str, Any]):
        """Add or replace a preset after checking it loads."""
        load_preset(record)
        self._records[name] = dict(record)

    def add_state(self, name: str, params: ParameterSet, palette: AnchorPalette) -> str:
        """Store the current state under the kebab-case key of ``name``."""
        key = preset_key(name)
        if not key:
            raise ValueError(f"Cannot derive a preset key from {name!r}")
        self._records[key] = preset_to_record(params, palette)
        return key

    def merge_file(self, path: str | Path):
        """Merge presets from a JSON file, replacing same-named entries."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Preset file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Preset file must hold an object of named presets: {path}")

        for name, record in data.items():
            if not isinstance(record, dict):
                raise ValueError(f"Preset {name!r} in {path} is not an object")
            self.add(name, record)

        logger.debug("Merged %d presets from %s", len(data), path)

    def save(self, path: str | Path, indent: int = 2) -> Path:
        """Write every preset to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        records = {}
        for name, record in self._records.items():
            out = {}
            for k, v in record.items():
                if k in COLOR_KEYS:
                    # Empty edge colors are derived on load
                    if not v:
                        continue
                    v = normalize_hex(v)
                out[k] = v
            records[name] = out

        with open(path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=indent)

        return path

    @classmethod
    def from_file(cls, path: str | Path, include_builtin: bool = False) -> "PresetLibrary":
        library = cls(include_builtin=include_builtin)
        library.merge_file(path)
        return library
