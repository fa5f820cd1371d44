# portraitgen/logger.py
# portraitgen: A command-line tool for same-person portrait generation.
# Copyright (C) 2025 Dank A. Saurus

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY;
# without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.


import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from . import config


class ApiKeyRedactingFilter(logging.Filter):
    """Masks the API key wherever it appears in a formatted log message."""

    def filter(self, record: logging.LogRecord) -> bool:
        api_key = os.environ.get(config.API_KEY_ENV_VAR)
        if api_key:
            message = record.getMessage()
            if api_key in message:
                record.msg = message.replace(api_key, "[REDACTED]")
                record.args = None
        return True


def setup_logger():
    """Configures and returns a project-wide logger."""
    logger = logging.getLogger("portraitgen")
    logger.setLevel(logging.INFO)

    # Prevent propagation to the root logger to avoid duplicate messages
    logger.propagate = False
    if not any(isinstance(f, ApiKeyRedactingFilter) for f in logger.filters):
        logger.addFilter(ApiKeyRedactingFilter())

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Console handler for warnings and errors only; stdout belongs to the
    # prompt echo and the model's text parts.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)

    try:
        log_dir = config.ROTATING_LOG_FILE.parent
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # The logger isn't configured yet, so report directly.
        print(
            f"CRITICAL: Could not create log directory {log_dir}: {e}", file=sys.stderr
        )
        if not logger.handlers:
            logger.addHandler(console_handler)
        return logger

    # Rotates when the log reaches 1MB, keeping up to 5 backup logs.
    file_handler = RotatingFileHandler(
        config.ROTATING_LOG_FILE, maxBytes=1024 * 1024, backupCount=5, encoding="utf-8"
    )
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    return logger


def enable_debug() -> None:
    """Lowers the logger and all of its handlers to DEBUG."""
    log.setLevel(logging.DEBUG)
    for handler in log.handlers:
        handler.setLevel(logging.DEBUG)


# Singleton logger instance to be imported by other modules
log = setup_logger()
