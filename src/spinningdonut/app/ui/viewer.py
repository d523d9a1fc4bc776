from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QTimer
from PySide6.QtGui import QImage, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from spinningdonut.model.renderer import FrameRenderer

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def buffer_to_qimage(pixels: npt.NDArray[np.uint8]) -> QImage:
    """Copies an ``(height, width, 3)`` RGB buffer into a QImage that owns its data."""
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected shape (H, W, 3), got {pixels.shape}.")
    height, width, _ = pixels.shape
    data = np.ascontiguousarray(pixels, dtype=np.uint8).tobytes()
    image = QImage(data, width, height, 3 * width, QImage.Format.Format_RGB888)
    return image.copy()


class DonutView(QWidget):
    """
    Displays the renderer's buffer and drives it from a QTimer.

    Each timeout renders one frame and schedules a repaint. A tick that
    arrives while the previous one is still in flight is skipped.
    """
    def __init__(self, renderer: FrameRenderer, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self.renderer = renderer
        self.setFixedSize(renderer.settings.width, renderer.settings.height)

        self._busy = False
        self._skipped_ticks = 0
        self._image = buffer_to_qimage(renderer.get_buffer())

        self._timer = QTimer(self)
        self._timer.setInterval(renderer.settings.tick_interval_ms)
        self._timer.timeout.connect(self.tick)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def skipped_ticks(self) -> int:
        return self._skipped_ticks

    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def tick(self) -> None:
        if self._busy:
            self._skipped_ticks += 1
            return

        self._busy = True
        try:
            self.renderer.render_frame()
            self._image = buffer_to_qimage(self.renderer.get_buffer())
            self.update()
        except Exception:
            logger.exception("Rendering failed, stopping the animation.")
            self.stop()
        finally:
            self._busy = False

    # ------------------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self._image)
        painter.end()
