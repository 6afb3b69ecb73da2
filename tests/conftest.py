"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from dataclasses import replace
from pathlib import Path

import pytest

from ripplefield.core.params import AnchorPalette, ParameterSet
from ripplefield.renderer import RenderConfig


@pytest.fixture
def tmp_dir():
    d = tempfile.mkdtemp(prefix="ripplefield_test_")
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def params() -> ParameterSet:
    """Default parameters."""
    return ParameterSet()


@pytest.fixture
def flat_params() -> ParameterSet:
    """
    No distortion and a neutral final grade.

    The field reduces to the plain eight-anchor gradient plus texture
    noise and the wave tint.
    """
    return replace(ParameterSet(), wave_count=0, contrast=1.0, saturation=1.0)


@pytest.fixture
def palette() -> AnchorPalette:
    """Red, green, blue and white corners with derived edges."""
    return AnchorPalette.from_corners(("#ff0000", "#00ff00", "#0000ff", "#ffffff"))


@pytest.fixture
def small_config() -> RenderConfig:
    return RenderConfig(width=32, height=18, fps=30)
