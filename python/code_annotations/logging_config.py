"""Logging configuration for code annotations."""

import logging
import os
import sys
from typing import Union

from .config import ANNOTATION_ENV_CONFIG, AnnotationDefaults, AnnotationEnvVars


def parse_level(level: str) -> Union[int, str]:
    """Convert a log level string into something `Logger.setLevel` accepts.

    Numeric strings become ints; names are upper-cased. Unknown names are
    rejected by `setLevel` itself.
    """
    level = level.strip()
    try:
        return int(level)
    except ValueError:
        return level.upper()


def get_logger(name: str = AnnotationDefaults.LOGGER_NAME) -> logging.Logger:
    """Get a configured logger for the package.

    The logger uses CODE_ANNOTATIONS_LOG_LEVEL (or LOG_LEVEL) to determine the
    log level. If not set, defaults to ERROR level, which effectively disables
    most package logging.

    Returns:
        Configured logger instance for the package.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        level = os.getenv(
            AnnotationEnvVars.CODE_ANNOTATIONS_LOG_LEVEL,
            os.getenv(
                AnnotationEnvVars.LOG_LEVEL,
                ANNOTATION_ENV_CONFIG[AnnotationEnvVars.LOG_LEVEL]["default"],
            ),
        )

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "[%(levelname)s] %(name)s - %(filename)s:%(lineno)d: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        logger.setLevel(parse_level(level))

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger


# Package logger instance
logger = get_logger()
