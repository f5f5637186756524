"""
Diagnostic logger for digestlib.

Records go to the stdlib "digestlib" logger. The [logging] config
section decides its level and whether digestlib attaches its own
stderr and rotating-file handlers; with neither enabled, records
propagate to whatever the host application configured.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

LOGGER_NAME = "digestlib"
LOG_FILE_PATH = Path.home() / ".digestlib" / "digestlib.log"
MAX_FILE_SIZE = 1024 * 1024
BACKUP_COUNT = 2

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
# Marks handlers digestlib attached, so reconfiguring never stacks them
_OWNED = "_digestlib_handler"


class DigestLogger(ILogger):
    """ILogger over a stdlib logger."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @classmethod
    def from_config(
        cls,
        config: LoggingConfig,
        *,
        name: str = LOGGER_NAME,
        log_file: Path | None = None,
    ) -> DigestLogger:
        """
        Configure the named stdlib logger from a [logging] section.

        Handlers attached by an earlier call are replaced.

        Args:
            config: Level and handler switches
            name: Logger to configure
            log_file: Rotating file location (default ~/.digestlib/digestlib.log)
        """
        logger = logging.getLogger(name)
        logger.setLevel(config.level.upper())

        for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
            logger.removeHandler(handler)
            handler.close()

        if config.console:
            _attach(logger, logging.StreamHandler(sys.stderr))
        if config.file:
            path = log_file or LOG_FILE_PATH
            path.parent.mkdir(parents=True, exist_ok=True)
            _attach(
                logger,
                RotatingFileHandler(path, maxBytes=MAX_FILE_SIZE, backupCount=BACKUP_COUNT),
            )
        logger.propagate = not (config.console or config.file)
        return cls(logger)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    setattr(handler, _OWNED, True)
    logger.addHandler(handler)


class NullLogger(ILogger):
    """Discards everything; used until bootstrap() registers a DigestLogger."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass
