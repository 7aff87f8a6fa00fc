"""Logging setup for hosts that want the emitter's debug trace."""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Configure logging with a console handler and an optional file handler.

    The file handler always records DEBUG so dispatch traces are kept even
    when the console is quieter.

    Args:
        level: Console log level name, falls back to INFO when unknown
        log_file: Optional path of a debug log file
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(funcName)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)
    handlers: list[logging.Handler] = [console_handler]

    if log_file is not None:
        file_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(funcName)s - %(message)s'
        )
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if log_file is not None else log_level,
        handlers=handlers,
        force=True
    )
