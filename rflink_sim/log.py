"""Console logging setup for applications embedding the engine.

The engine modules only create loggers; handlers are installed here.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure console logging for ``rflink_sim`` and uvicorn.

    *level* defaults to the ``log_level`` setting.
    """
    if level is None:
        from .config import get_settings

        level = get_settings().log_level
    level = level.upper()

    log_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "rflink_sim": {"handlers": ["console"], "level": level, "propagate": False},
            "app": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
        },
    }
    logging.config.dictConfig(log_config)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)
