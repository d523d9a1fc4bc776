"""
Run with: python -m spinningdonut
"""
from __future__ import annotations

import logging
import sys

from spinningdonut.app.application import create_app
from spinningdonut.app.ui.main_window import MainWindow
from spinningdonut.config import RenderSettings
from spinningdonut.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    # Use logging.DEBUG to see every frame
    setup_logging(level=logging.INFO)

    app = create_app()
    win = MainWindow(RenderSettings())
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
