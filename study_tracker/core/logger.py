"""Logger configuration for the study tracker.

The interactive menu writes to stdout, so the console sink always goes to
stderr. The optional file sink keeps a week of history.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def setup_logger(level: str = "WARNING", log_file: str | Path | None = None) -> None:
    """Replace loguru's handlers with a stderr sink and an optional file sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file, rotated at 1 MB
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        # Session logs carry title/hours through logger.bind; {extra} keeps them in the file
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation="1 MB",
            retention="7 days",
            compression="zip",
            encoding="utf-8",
        )

    logger.debug(f"Logger initialized (level={level}, file={log_file or 'none'})")
