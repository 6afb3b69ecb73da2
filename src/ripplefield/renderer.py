"""
Frame driver for the ripple field.

Holds the current parameter/palette snapshot, derives animation time
from the frame index and wave speed, and yields finished 8-bit frames
as a generator for memory-efficient piping to the encoder.
"""

import logging
import time as _time
from dataclasses import dataclass
from typing import Callable, Iterator

import numpy as np

from ripplefield.core.colorgrade import to_uint8
from ripplefield.core.params import DEFAULT_PALETTE, AnchorPalette, ParameterSet
from ripplefield.pipeline import render_field

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """Output surface and timing."""

    width: int = 1920
    height: int = 1080
    fps: int = 60

    # Seconds of real time before frame 0
    time_offset: float = 0.0


class FieldRenderer:
    """
    Renders frames of the field for a parameter/palette snapshot.

    The snapshot is replaced as a whole via :meth:`set_state`; a frame in
    progress always sees one consistent pair.
    """

    def __init__(
        self,
        params: ParameterSet | None = None,
        palette: AnchorPalette | None = None,
        config: RenderConfig | None = None,
    ):
        self.cfg = config or RenderConfig()
        self._state = (params or ParameterSet(), palette or DEFAULT_PALETTE)

    @property
    def params(self) -> ParameterSet:
        return self._state[0]

    @property
    def palette(self) -> AnchorPalette:
        return self._state[1]

    def set_state(self, params: ParameterSet, palette: AnchorPalette):
        """Swap in a new snapshot between frames."""
        self._state = (params, palette)

    def frame_time(self, frame_index: int) -> float:
        """Animation time: real seconds scaled by the wave speed."""
        real = self.cfg.time_offset + frame_index / self.cfg.fps
        return real * self.params.wave_speed

    def render_still(self, t: float) -> np.ndarray:
        """
        Render one frame at animation time ``t``.

        Returns:
            (H, W, 3) uint8 RGB numpy array.
        """
        params, palette = self._state
        rgb = render_field(self.cfg.width, self.cfg.height, t, params, palette)
        return to_uint8(rgb)

    def render_frame(self, frame_index: int) -> np.ndarray:
        return self.render_still(self.frame_time(frame_index))

    def render_frames(
        self,
        n_frames: int,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> Iterator[np.ndarray]:
        """
        Render frames 0..n_frames-1 as a generator.

        Args:
            n_frames: Number of frames.
            progress_callback: Optional callback(current, total).

        Yields:
            (H, W, 3) uint8 arrays, one per frame.
        """
        for i in range(n_frames):
            t0 = _time.perf_counter()
            frame = self.render_frame(i)
            logger.debug("Frame %d rendered in %.3fs", i, _time.perf_counter() - t0)
            yield frame

            if progress_callback:
                progress_callback(i + 1, n_frames)
