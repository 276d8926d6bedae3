"""Logging setup shared by the entry points."""

import logging

from config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (console_ui/main.py)."""
    level = (level or config.logging.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=config.logging.format,
        datefmt=config.logging.datefmt,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
