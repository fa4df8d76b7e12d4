"""Logging configuration for fpx-trace.

Logs always go to stderr so rendered trace text on stdout can be
piped into an editor buffer untouched.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from datetime import datetime, timezone

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV_VAR = "FPX_TRACE_LOG_LEVEL"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a single JSON line."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(log_level: str | None = None, json_output: bool = False) -> None:
    """Configure the root logger.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ...). Defaults to
            the FPX_TRACE_LOG_LEVEL env var, then WARNING.
        json_output: Emit one JSON object per record instead of the
            rich console format.
    """
    if log_level is None:
        log_level = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)

    if json_output:
        handler = {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stderr",
        }
    else:
        handler = {
            "()": "fpx_trace.logging_config._rich_stderr_handler",
            "formatter": "plain",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": "fpx_trace.logging_config.JSONFormatter"},
                "plain": {"format": "%(name)s: %(message)s"},
            },
            "handlers": {"stderr": handler},
            "root": {
                "level": log_level.upper(),
                "handlers": ["stderr"],
            },
        }
    )


def _rich_stderr_handler() -> logging.Handler:
    from rich.console import Console
    from rich.logging import RichHandler

    return RichHandler(console=Console(stderr=True), show_path=False)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
