from __future__ import annotations

from PySide6.QtGui import QCloseEvent, QShowEvent
from PySide6.QtWidgets import QMainWindow

from spinningdonut.app.ui.viewer import DonutView
from spinningdonut.config import RenderSettings, WINDOW_TITLE
from spinningdonut.model.renderer import FrameRenderer


class MainWindow(QMainWindow):
    """Fixed-size window hosting a single DonutView."""
    def __init__(self, settings: RenderSettings | None = None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.renderer = FrameRenderer(settings or RenderSettings())
        self.view = DonutView(self.renderer, self)
        self.setCentralWidget(self.view)
        self.setFixedSize(self.view.size())

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self.view.start()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.view.stop()
        super().closeEvent(event)
