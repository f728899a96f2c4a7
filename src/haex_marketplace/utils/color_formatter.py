"""Console logging for the command-line tool."""

import logging
import sys


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        """Initialize formatter; ``use_color=False`` emits plain text for pipes and files."""
        super().__init__("%(levelname)s [%(name)s] %(message)s")
        self.use_color = use_color

    def format(self, record: logging.LogRecord):
        """Format a log record."""
        if self.use_color and record.levelname in self.COLORS:
            # Copy so other handlers still see the plain level name
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        return super().format(record)


def setup_logging(level: int | str = logging.INFO):
    """Log to stderr, colored when it is a terminal, and quiet aiohttp's loggers."""
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(use_color=sys.stderr.isatty()))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
