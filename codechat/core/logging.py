"""
Logging configuration for CodeChat Reviewer.
"""

import logging
import logging.config
import sys
from typing import Any, Dict

from codechat import config


def get_logging_config() -> Dict[str, Any]:
    """Get logging configuration dictionary."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": config.LOG_LEVEL,
                "formatter": "detailed" if config.DEBUG else "default",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "codechat": {
                "level": config.LOG_LEVEL,
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    }


def setup_logging() -> None:
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config())
    logging.getLogger("codechat").info("Logging configuration initialized")
