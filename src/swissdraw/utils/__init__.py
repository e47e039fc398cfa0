"""Shared helpers for SwissDraw: logging setup and id generation."""

# SwissDraw
# Copyright (C) 2025  SwissDraw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import uuid
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "SWISSDRAW_LOG_LEVEL"
PACKAGE_LOGGER = "swissdraw"


def _env_level() -> int:
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def _package_logger() -> logging.Logger:
    """The ``swissdraw`` logger every module logger propagates through."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())
        package_logger.setLevel(_env_level())
    return package_logger


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a module logger under the package logger.

    Module loggers carry no handlers of their own; records propagate to the
    ``swissdraw`` logger, whose level defaults to the ``SWISSDRAW_LOG_LEVEL``
    environment variable, falling back to WARNING. Output is left to the
    application, see :func:`configure_console_logging`.

    Args:
        name: Logger name, normally ``__name__`` of the calling module
        level: Explicit level for this logger only

    Returns:
        Configured logger
    """
    _package_logger()
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_console_logging(level: Optional[int] = None) -> logging.Logger:
    """Print package log records to stderr. Safe to call more than once."""
    package_logger = _package_logger()
    if level is not None:
        package_logger.setLevel(level)
    if not any(
        isinstance(handler, logging.StreamHandler)
        for handler in package_logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier, optionally prefixed (e.g. ``match_``)."""
    unique = uuid.uuid4().hex
    return f"{prefix.lower()}_{unique}" if prefix else unique
