"""Central logging configuration using loguru."""

from __future__ import annotations

import sys

from loguru import logger

from sttyl.config import SttylSettings

_LOGGER_CONFIGURED = False


def configure_logging(settings: SttylSettings, level: str | None = None) -> None:
    """Route logs to stderr, and optionally a rotating file, only once."""

    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger.remove()
    logger.add(
        sink=lambda msg: print(msg, end="", file=sys.stderr),
        level=level or settings.logging.level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    if settings.logging.to_file:
        settings.paths.ensure()
        logger.add(
            settings.paths.logs_dir / "sttyl.log",
            level="DEBUG",
            rotation="1 week",
            retention=4,
            compression="zip",
            backtrace=True,
            diagnose=True,
        )

    _LOGGER_CONFIGURED = True


def get_logger(name: str | None = None):
    return logger.bind(context=name or "sttyl")
