"""Logging configuration for the translation library and its scripts."""

import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime

# Log levels for different components
LOGGING_CONFIG = {
    "colortest": logging.INFO,
    "colortest.core": logging.INFO,
    # Missing-key lookups log at DEBUG; keep them quiet unless asked for
    "colortest.core.i18n": logging.INFO,

    # Reduce noise from libraries
    "dotenv": logging.WARNING,
}

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(component)-12s %(message)s"


class ColoredFormatter(logging.Formatter):
    """Console formatter: colored level, logger name shortened to its component.

    ``colortest.core.i18n`` is shown as ``i18n``; loggers outside the package
    keep their full name.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"
    PREFIXES = ("colortest.core.", "colortest.")

    @classmethod
    def component(cls, name: str) -> str:
        for prefix in cls.PREFIXES:
            if name.startswith(prefix):
                return name[len(prefix):]
        return name

    def format(self, record: logging.LogRecord) -> str:
        record.component = self.component(record.name)
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Color a copy so file handlers see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def setup_logging(log_file: bool = False, debug: bool = False, log_dir: str = "logs") -> None:
    """Configure root logging with a colored console handler and an optional rotating file."""

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_formatter = ColoredFormatter(CONSOLE_FORMAT, datefmt="%H:%M:%S")
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        log_filename = path / f"colortest_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    for logger_name, level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(level)
    if debug:
        logging.getLogger("colortest.core.i18n").setLevel(logging.DEBUG)

    logging.getLogger(__name__).info(
        "Logging configured (console=%s, file=%s)",
        "DEBUG" if debug else "INFO",
        "ENABLED" if log_file else "DISABLED",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
