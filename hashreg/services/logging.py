"""
Diagnostic logging for hashreg.

The registry and bootstrap report registrations, overwrites and fatal lookups
through ILogger. HashregLogger sends them to the stdlib "hashreg" logger, with
handlers picked by the [logging] settings section.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class HashregLogger(ILogger):
    """
    ILogger over a stdlib logger configured from a LoggingConfig.

    Building a HashregLogger takes over the named logger: handlers left by a
    previous instance are closed and replaced.
    """

    LOG_FILE_PATH = Path.home() / ".hashreg" / "hashreg.log"
    MAX_FILE_SIZE = 1024 * 1024
    BACKUP_COUNT = 2

    def __init__(
        self,
        config: LoggingConfig | None = None,
        name: str = "hashreg",
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            config: The logging section; defaults to warnings, no output
            name: Name of the underlying stdlib logger
            log_file: Where to write when config.file is set
        """
        self.config = config or LoggingConfig()
        self.log_file = log_file or self.LOG_FILE_PATH

        self._logger = logging.getLogger(name)
        self.close()
        self._logger.setLevel(getattr(logging, self.config.level.upper()))
        self._logger.propagate = False

        formatter = logging.Formatter(FORMAT, datefmt=DATE_FORMAT)
        for handler in self._build_handlers():
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def _build_handlers(self) -> list[logging.Handler]:
        handlers: list[logging.Handler] = []
        if self.config.console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if self.config.file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    self.log_file,
                    maxBytes=self.MAX_FILE_SIZE,
                    backupCount=self.BACKUP_COUNT,
                )
            )
        return handlers

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._logger.handlers)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def close(self) -> None:
        """Detach and close every handler on the underlying logger."""
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()


class NullLogger(ILogger):
    """Drops everything. Used when no logger has been bootstrapped."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass
