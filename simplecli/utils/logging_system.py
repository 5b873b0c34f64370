"""
Default logging setup for the console.

The console accepts any ``logging.Logger``.  When the embedding application
does not provide one, ``setup_log_system`` builds a logger that writes to
standard output with a fixed ``CONSOLE:`` prefix and a date/time stamp.  On a
colour-capable terminal Rich renders the records instead.  The log level and
colour settings are controlled via environment variables.
"""
import logging
import os
import sys

from rich.logging import RichHandler

DEFAULT_FORMAT = "%(prefix)s%(asctime)s %(filename)s:%(lineno)d: %(message)s"
DEFAULT_DATEFMT = "%Y/%m/%d %H:%M:%S"


class _PrefixFormatter(logging.Formatter):
    """Formatter that puts a fixed ``<NAME>: `` prefix in front of every line."""

    def __init__(self, prefix: str, fmt: str = DEFAULT_FORMAT, datefmt: str = DEFAULT_DATEFMT) -> None:
        super().__init__(fmt, datefmt=datefmt)
        self.prefix = prefix

    def format(self, record: logging.LogRecord) -> str:
        record.prefix = self.prefix
        return super().format(record)


def setup_log_system(name: str, *, level: str | None = None) -> logging.Logger:
    """
    Create (or return) a configured logger.

    - Honours LOG_LEVEL env var (default INFO) unless a ``level`` is explicitly passed.
    - Uses RichHandler when stdout is a TTY and NO_COLOR is not set.
    - Avoids duplicate handlers if called multiple times for the same logger.
    """
    level_str = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, level_str, logging.INFO)

    logger = logging.getLogger(name)
    if logger.handlers:
        logger.setLevel(log_level)
        return logger

    no_colour = os.getenv("NO_COLOR") is not None
    is_tty = sys.stdout.isatty()

    handler: logging.Handler
    if not no_colour and is_tty:
        handler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=True,
            markup=False,
        )
        # RichHandler renders time, level and path itself
        handler.setFormatter(logging.Formatter(f"{name}: %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_PrefixFormatter(f"{name}: "))

    logger.addHandler(handler)
    logger.setLevel(log_level)
    # The console prints its own prompt on stdout; a second copy of every
    # record through the root logger would interleave with it.
    logger.propagate = False
    return logger


get_logger = setup_log_system
