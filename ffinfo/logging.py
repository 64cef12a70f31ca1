"""Logging setup for the ffinfo command"""

import logging
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """Send ffinfo log records to a rich console handler and, if given, a log file"""
    handlers = [RichHandler(show_path=False, rich_tracebacks=True)]
    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    logger = logging.getLogger("ffinfo")
    logger.setLevel(log_level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)

    logging.captureWarnings(True)
