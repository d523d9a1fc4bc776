"""
Frame Renderer
==============
Orchestrates one animation tick: clear, sample, write, rotate.

Why is this a class?
--------------------
The rotation angles and the pixel buffer are the only mutable state in the
program. Keeping them on one instance (instead of module globals) lets
several renderers coexist and makes every tick reproducible in tests.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, TYPE_CHECKING

import numpy as np

from spinningdonut.config import RenderSettings
from spinningdonut.model.framebuffer import FrameBuffer
from spinningdonut.model.geometry import RotationState
from spinningdonut.model.sampler import SampleBatch, sample_torus, sweep_angles

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class FrameRenderer:
    """
    Owns the frame buffer and the rotation state of the spinning torus.

    Not reentrant: callers must not start a new ``render_frame()`` before the
    previous one (and its display step) has finished.
    """
    def __init__(
        self,
        settings: Optional[RenderSettings] = None,
        rotation: Optional[RotationState] = None,
    ):
        self.settings = settings or RenderSettings()
        self._rotation = rotation or RotationState()
        self._buffer = FrameBuffer(
            self.settings.width,
            self.settings.height,
            background=self.settings.background,
        )
        self._frame_count = 0

        thetas, phis = sweep_angles(self.settings.resolution)
        self._theta_chunks: list[npt.NDArray[np.float64]] = [
            chunk for chunk in np.array_split(thetas, self.settings.workers) if chunk.size
        ]
        logger.info(
            f"Renderer ready: {self.settings.width}x{self.settings.height}, "
            f"{thetas.size}x{phis.size} samples per frame, {len(self._theta_chunks)} worker(s)."
        )

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def rotation(self) -> RotationState:
        return self._rotation

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def render_frame(self) -> None:
        """
        Renders the torus at the current orientation, then advances the
        orientation by one tick.
        """
        rotation = self._rotation
        self._buffer.clear()

        batch = self._sample(rotation)
        written = self._buffer.write(batch)

        self._rotation = rotation.advanced(self.settings.delta_a, self.settings.delta_b)
        self._frame_count += 1
        logger.debug(
            f"Frame {self._frame_count}: A={rotation.a:.3f}, B={rotation.b:.3f}, "
            f"{len(batch)} samples, {written} pixels."
        )

    def get_buffer(self) -> npt.NDArray[np.uint8]:
        """Read-only ``(height, width, 3)`` view of the last completed frame."""
        return self._buffer.view()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _sample(self, rotation: RotationState) -> SampleBatch:
        s = self.settings
        if len(self._theta_chunks) == 1:
            return sample_torus(rotation, s.geometry, s.width, s.height, s.resolution)

        # Chunks are contiguous theta ranges; map() keeps them in sweep order,
        # so concatenation reproduces the serial overwrite order.
        with ThreadPoolExecutor(max_workers=len(self._theta_chunks)) as pool:
            batches = list(pool.map(
                lambda chunk: sample_torus(
                    rotation, s.geometry, s.width, s.height, s.resolution, thetas=chunk
                ),
                self._theta_chunks,
            ))
        return SampleBatch.concatenate(batches)
