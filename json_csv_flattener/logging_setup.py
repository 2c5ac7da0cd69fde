from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a Rich stderr handler to the package logger once."""
    logger = logging.getLogger("json_csv_flattener")
    if not logger.handlers:
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
        logger.propagate = False
    logger.setLevel(level)
    return logger
