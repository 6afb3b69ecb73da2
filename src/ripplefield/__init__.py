"""Procedural animated gradient renderer driven by wave and twirl distortion."""

from ripplefield.core.params import DEFAULT_PALETTE, AnchorPalette, ParameterSet
from ripplefield.pipeline import evaluate, evaluate_field, render_field
from ripplefield.randomize import randomize, randomize_colors_only
from ripplefield.renderer import FieldRenderer, RenderConfig

__version__ = "0.1.0"
__all__ = [
    "AnchorPalette",
    "DEFAULT_PALETTE",
    "FieldRenderer",
    "ParameterSet",
    "RenderConfig",
    "evaluate",
    "evaluate_field",
    "randomize",
    "randomize_colors_only",
    "render_field",
]
