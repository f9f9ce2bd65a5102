"""
Logging configuration for tilesmith.

Console output is short and optionally coloured; the file log is a
semicolon separated CSV that spreadsheet tools open directly.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_MAX_BYTES = 10 * 1024 * 1024
FILE_BACKUP_COUNT = 5

# Third party loggers that are too chatty at DEBUG
QUIET_LOGGERS = ("PIL", "PIL.PngImagePlugin", "PIL.Image")


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name with ANSI escapes."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return formatted
        return formatted.replace(
            record.levelname, f"{color}{record.levelname}{self.RESET}", 1
        )


class CSVFormatter(logging.Formatter):
    """One CSV row per record: time;level;uptime;logger;line;message."""

    def format(self, record: logging.LogRecord) -> str:
        fields = [
            f'"{self.formatTime(record, self.datefmt)}"',
            record.levelname.ljust(8),
            f'"{int(record.relativeCreated)} ms"',
            f'"{record.name}"',
            f'"{record.lineno}"',
            '"' + record.getMessage().replace('"', '""') + '"',
        ]
        return ";".join(fields)


def _console_handler(settings: "AppSettings") -> logging.Handler:
    if settings.logging.console_use_colors:
        formatter: logging.Formatter = ColoredFormatter(CONSOLE_FORMAT, CONSOLE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT, CONSOLE_DATE_FORMAT)

    handler = logging.StreamHandler()
    level = settings.logging.console_log_level.upper()
    handler.setLevel(getattr(logging, level, logging.INFO))
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_path: Path) -> logging.Handler:
    """Rotating CSV file handler; raises OSError if the file can't be opened."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=FILE_MAX_BYTES,
        backupCount=FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Replace the root logger's handlers with the ones `settings` asks for.

    Args:
        settings: AppSettings providing the logging section
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    logging.getLogger("tilesmith").setLevel(logging.DEBUG)

    if settings.logging.console_logging:
        root_logger.addHandler(_console_handler(settings))

    log_path: Optional[Path] = None
    if settings.logging.file_logging:
        try:
            root_logger.addHandler(_file_handler(Path(settings.logging.log_file_path)))
            log_path = settings.logging.log_file_absolute_path
        except OSError as e:
            root_logger.warning(f"Could not set up file logging: {e}")

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if log_path is not None:
        logger.debug(f"File logging: DEBUG at {log_path}")
