"""Logging setup for sportsfeed.

Console logging always; rotating file logs when a log directory is configured.
Modules get their logger with logging.getLogger(__name__).
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from sportsfeed.config import Config

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that log every request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore")

_configured = False


def setup_logging(log_level: str | None = None, log_dir: str | None = None) -> None:
    """Configure the root logger once.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR). Defaults to Config.LOG_LEVEL.
        log_dir: Directory for rotating log files. Defaults to Config.LOG_DIR;
                 when unset only console logging is configured.
    """
    global _configured
    if _configured:
        return

    level = getattr(logging, (log_level or Config.LOG_LEVEL).upper(), logging.INFO)
    log_dir = log_dir or Config.LOG_DIR
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "sportsfeed.log"),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            os.path.join(log_dir, "sportsfeed_errors.log"),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=3,
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).info(
        f"Logging configured (level={logging.getLevelName(level)}, dir={log_dir or 'console only'})"
    )
