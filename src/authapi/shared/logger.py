import logging
import re
import sys
from datetime import datetime
from pathlib import Path

from colorama import Fore, Style, init

# Initialize colorama
init()

FORMAT_STRING_CONSOLE = (
    f"{Style.BRIGHT}%(levelname)-10s "
    + f"{Style.DIM}%(name)-20s "
    + "%(module)s.%(funcName)-30s "
    + f"{Style.RESET_ALL}%(message)s"
)
FORMAT_STRING_FILE = re.sub(
    r"\x1b\[[0-9;]*m", "", "%(asctime)s - " + FORMAT_STRING_CONSOLE
)


class ColorFormatter(logging.Formatter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.color_map = {
            logging.DEBUG: Fore.CYAN,
            logging.INFO: Fore.GREEN,
            logging.WARNING: Fore.YELLOW,
            logging.ERROR: Fore.RED,
            logging.CRITICAL: Fore.MAGENTA,
        }

    def format(self, record):
        color = self.color_map.get(record.levelno, Fore.WHITE)
        message = super().format(record)
        return f"{color}{message}{Style.RESET_ALL}"


class Logger:
    """Module logger with a coloured console handler and a dated log file.

    Loggers are usually created at import time, before any configuration is
    loaded. `Logger.configure` later applies the configured level and log
    directory to every logger created so far, and to the ones that follow.
    """

    _loggers: dict[str, logging.Logger] = {}
    _level: int | None = None
    _log_dir: str | None = None

    def __init__(self, name, log_dir=None, level=logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(Logger._level if Logger._level is not None else level)

        if name not in Logger._loggers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(ColorFormatter(FORMAT_STRING_CONSOLE))
            self.logger.addHandler(console_handler)
            Logger._loggers[name] = self.logger

        log_dir = log_dir or Logger._log_dir
        if log_dir:
            _attach_file_handler(self.logger, log_dir)

    def get_logger(self):
        return self.logger

    @classmethod
    def configure(cls, config):
        """Apply the `[logging]` and `[paths]` sections of a loaded config."""
        cls._level = config.logging.level
        cls._log_dir = config.paths.logs

        for logger in cls._loggers.values():
            logger.setLevel(cls._level)
            _attach_file_handler(logger, cls._log_dir)


def _attach_file_handler(logger: logging.Logger, log_dir: str):
    log_file = Path(log_dir) / f"{datetime.now().strftime('%Y-%m-%d')}.log"

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(
            handler.baseFilename
        ) == log_file.absolute():
            return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(logging.Formatter(FORMAT_STRING_FILE))
    logger.addHandler(file_handler)
