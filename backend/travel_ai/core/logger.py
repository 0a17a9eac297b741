# backend/travel_ai/core/logger.py

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from travel_ai.core.config_loader import settings


# -------------------------------------------------------------------
# FORMATTER
# -------------------------------------------------------------------
LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)

formatter = logging.Formatter(LOG_FORMAT)


# -------------------------------------------------------------------
# HANDLER: CONSOLE
# -------------------------------------------------------------------
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)
console_handler.setLevel(settings.log_level.upper())


def _build_file_handler(log_dir: str) -> RotatingFileHandler:
    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        path / "app.log",
        maxBytes=5 * 1024 * 1024,   # 5 MB
        backupCount=5,              # keep 5 files
        encoding="utf-8"
    )
    handler.setFormatter(formatter)
    handler.setLevel(logging.INFO)
    return handler


# -------------------------------------------------------------------
# GLOBAL LOGGER
# -------------------------------------------------------------------
logger = logging.getLogger("travel_planner")
logger.setLevel(logging.DEBUG)   # allow all levels → handlers filter them

# Prevent duplicate handlers when reloading app
if not logger.handlers:
    logger.addHandler(console_handler)
    if settings.log_dir:
        logger.addHandler(_build_file_handler(settings.log_dir))


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, e.g. ``travel_planner.itinerary_agent``."""
    return logger.getChild(name)
