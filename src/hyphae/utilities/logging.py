"""Per-module loggers that write to stderr and to one rotating file each.

Files land in ``HYPHAE_LOG_DIR`` (default ``~/.hyphae/logs``) and are named
after the module, so ``hyphae.growth.system`` logs to
``hyphae_growth_system.log``. ``LOG_LEVEL`` applies to every logger.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "HYPHAE_LOG_DIR"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
MAX_LOG_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5


def log_directory() -> Path:
    configured = os.getenv(LOG_DIR_ENV_VAR)
    directory = (
        Path(configured).expanduser()
        if configured
        else Path.home() / ".hyphae" / "logs"
    )
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def log_level() -> int:
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def log_file_for(name: str) -> Path:
    parts = [part for part in name.replace(os.sep, ".").split(".") if part]
    return log_directory() / f"{'_'.join(parts) or 'root'}.log"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    level = log_level()
    logger.setLevel(level)
    if logger.handlers:
        # Someone else (a test, an embedding app) already routed this logger.
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    file_handler = RotatingFileHandler(
        log_file_for(name),
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    for handler in (logging.StreamHandler(), file_handler):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger
