import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.logging import RichHandler

DEFAULT_LOG_RETENTION_SIZE = 5 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 10


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Route snykclose log records to the terminal and, optionally, a rotating file."""
    logger = logging.getLogger('snykclose')
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_time=False, show_path=False, markup=False)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.addHandler(console_handler)

    if log_file:
        directory = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(directory, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=DEFAULT_LOG_RETENTION_SIZE,
            backupCount=DEFAULT_LOG_BACKUP_COUNT,
            encoding='utf-8',
        )
        file_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger
