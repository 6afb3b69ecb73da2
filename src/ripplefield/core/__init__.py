"""Core field-synthesis modules."""

from ripplefield.core.params import (
    AnchorPalette,
    BlendMode,
    FilmEffect,
    FlutedDirection,
    ParameterSet,
    ToneCurve,
    TwirlLocation,
    midpoint,
)
from ripplefield.core.palette import ContrastHints, generate_palette

__all__ = [
    "AnchorPalette",
    "BlendMode",
    "ContrastHints",
    "FilmEffect",
    "FlutedDirection",
    "ParameterSet",
    "ToneCurve",
    "TwirlLocation",
    "generate_palette",
    "midpoint",
]
