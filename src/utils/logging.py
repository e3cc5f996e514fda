"""Logging setup for the alias-matching pipeline.

Every stage logs through a module logger from `get_logger(__name__)`; the
command-line script configures the root logger once, from the `logging`
section of the configuration.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

# Set once the root logger has handlers; later calls leave it untouched
_logging_configured = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that report every HTTP connection at DEBUG/INFO
NOISY_LOGGERS = ("urllib3",)


def _attach(handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logging.getLogger().addHandler(handler)


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Send log records to the console and, optionally, a UTF-8 log file.

    Records are formatted as `[YYYY-MM-DD HH:MM:SS] [LEVEL] [module] message`.
    Only the first call has an effect. urllib3 connection logging is never
    more verbose than WARNING.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        log_file: Optional log file path; its directory is created.

    Example:
        >>> setup_logging(log_level="DEBUG", log_file="logs/aliases.log")
    """
    global _logging_configured

    if _logging_configured:
        return

    level = getattr(logging, str(log_level).upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    _attach(logging.StreamHandler(), level, formatter)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _attach(logging.FileHandler(log_file, encoding="utf-8"), level, formatter)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    _logging_configured = True


def setup_logging_from_config(config: Dict[str, Any]) -> None:
    """Configure logging from the `logging: {level, file}` config section.

    A missing or empty section means INFO to the console only.
    """
    logging_config = config.get("logging") or {}
    setup_logging(
        log_level=logging_config.get("level") or "INFO",
        log_file=logging_config.get("file"),
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name`, usually the caller's `__name__`."""
    return logging.getLogger(name)
