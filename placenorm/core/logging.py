"""Logging configuration.

Untokenized-letter diagnostics are emitted by ``placenorm.normalization``
at WARNING level.  Bulk indexing runs can produce many of them, so that
logger gets its own threshold (``DIAGNOSTICS_LOG_LEVEL``) independent of
the root level.
"""
from __future__ import annotations

import logging
import logging.config

from placenorm.core.settings import Settings, get_settings

DIAGNOSTICS_LOGGER = "placenorm.normalization"


def build_logging_config(settings: Settings) -> dict[str, object]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": settings.log_level.upper(),
            },
            DIAGNOSTICS_LOGGER: {
                "level": settings.diagnostics_log_level.upper(),
            },
            "uvicorn.access": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings | None = None) -> None:
    logging.config.dictConfig(build_logging_config(settings or get_settings()))
