"""Runtime settings for the checkout demo.

Defaults reproduce the classic behaviour (``orders.txt`` in the working
directory, first order id 1001, warnings only on the console).  Each
value may be overridden through an environment variable.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_ORDER_LOG = "orders.txt"
DEFAULT_FIRST_ORDER_ID = 1001


@dataclass
class Settings:
    order_log_path: str = DEFAULT_ORDER_LOG
    first_order_id: int = DEFAULT_FIRST_ORDER_ID
    # No log file unless a directory is configured
    log_dir: Optional[str] = None
    log_level: str = "WARNING"

    @property
    def level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        value = logging.getLevelName(self.log_level.strip().upper())
        return value if isinstance(value, int) else logging.WARNING

    @classmethod
    def from_env(cls) -> "Settings":
        settings = cls()
        settings.order_log_path = os.environ.get("CHECKOUT_ORDER_LOG", settings.order_log_path)
        settings.log_dir = os.environ.get("CHECKOUT_LOG_DIR") or None
        settings.log_level = os.environ.get("CHECKOUT_LOG_LEVEL", settings.log_level)
        first_id = os.environ.get("CHECKOUT_FIRST_ORDER_ID")
        if first_id:
            try:
                settings.first_order_id = int(first_id)
            except ValueError:
                logging.getLogger(__name__).warning(
                    "Ignoring non-numeric CHECKOUT_FIRST_ORDER_ID",
                    extra={"extra": {"value": first_id}},
                )
        return settings
