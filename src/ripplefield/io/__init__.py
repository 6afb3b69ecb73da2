"""Preset records, still image export and video encoding."""

from ripplefield.io.encoder import encode_video
from ripplefield.io.exporter import save_png
from ripplefield.io.presets import (
    PresetLibrary,
    display_name,
    load_preset,
    preset_key,
    preset_to_record,
)

__all__ = [
    "PresetLibrary",
    "display_name",
    "encode_video",
    "load_preset",
    "preset_key",
    "preset_to_record",
    "save_png",
]
