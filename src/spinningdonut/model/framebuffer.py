"""
Frame Buffer
Fixed-size RGB pixel grid the renderer draws into.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from spinningdonut.config import BLACK, Color, validate_color
from spinningdonut.model.sampler import SampleBatch

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class FrameBuffer:
    """
    A ``height x width`` grid of 8-bit RGB pixels.

    Writes never blend: when several samples of one batch hit the same pixel,
    the one that comes last in the batch is kept.
    """
    def __init__(self, width: int, height: int, background: Color = BLACK):
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer size must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.background = validate_color(background)
        self._pixels: npt.NDArray[np.uint8] = np.empty((height, width, 3), dtype=np.uint8)
        self.clear()

    @property
    def shape(self) -> tuple[int, int, int]:
        return self.height, self.width, 3

    def clear(self) -> None:
        self._pixels[...] = self.background

    def write(self, batch: SampleBatch) -> int:
        """
        Writes grayscale samples into the buffer.

        Every coordinate is bounds-checked again here; stray samples are
        dropped without error.

        Returns:
            Number of distinct pixels written.
        """
        if len(batch) == 0:
            return 0

        xs, ys = batch.xs, batch.ys
        inside = (xs >= 0) & (xs < self.width) & (ys >= 0) & (ys < self.height)
        flat = (ys[inside] * self.width + xs[inside])[::-1]
        intensities = batch.intensities[inside][::-1]

        # first hit in the reversed batch == last writer in sweep order
        pixels, first = np.unique(flat, return_index=True)
        values = intensities[first]

        self._pixels.reshape(-1, 3)[pixels] = values[:, np.newaxis]
        return int(pixels.shape[0])

    def view(self) -> npt.NDArray[np.uint8]:
        """Read-only view of the pixels, shape ``(height, width, 3)``."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view
