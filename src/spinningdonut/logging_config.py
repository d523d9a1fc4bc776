"""
Logging Configuration
Routes the renderer and viewer loggers to stdout and, optionally, a file.

Per-frame messages are emitted at DEBUG, so INFO keeps the console quiet
while the animation runs.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Attaches handlers to the 'spinningdonut' package logger.

    Every module logs through `logging.getLogger(__name__)`, so configuring
    the package logger covers the model and the Qt viewer alike.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path of a log file, truncated on every start.
    """
    logger = logging.getLogger("spinningdonut")
    logger.setLevel(level)

    # Calling main() twice in one interpreter (tests, IPython) must not double every line
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
