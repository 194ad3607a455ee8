"""Configure application logging using the Python standard library.

Log records are rendered as JSON objects with a timestamp, level,
module and message, plus any context passed by callers as
``extra={"extra": {...}}`` (order id, payment method, log path).

The console handler writes to stderr so that structured log output never
interleaves with the prompts and listings the interactive loop prints on
stdout.  A rotating file handler is added only when a log directory is
configured.
"""

import json
import logging
import logging.handlers
import os
from datetime import datetime, timezone
from typing import Optional


class JsonFormatter(logging.Formatter):
    """Format log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        # Merge caller context into the top level (avoid nested 'extra')
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            log_record.update(extra)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def configure_logging(log_dir: Optional[str] = None, level: int = logging.WARNING) -> None:
    """Configure the root logger with JSON formatting.

    Args:
        log_dir: Directory for ``checkout.log``.  When ``None`` only the
            console handler is installed.  The directory is created if it
            does not exist.
        level: Logging level for the root logger and its handlers.
    """
    logger = logging.getLogger()
    logger.setLevel(level)
    # Remove any default handlers (e.g. from basicConfig)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    formatter = JsonFormatter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=os.path.join(log_dir, "checkout.log"),
            maxBytes=5 * 1024 * 1024,  # 5 MB per log file
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
