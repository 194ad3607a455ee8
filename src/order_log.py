"""Append-only text record of completed orders.

Writing is best-effort: a failure is reported as a warning and never
undoes the payment that preceded it.
"""

from __future__ import annotations

import logging
import os
from typing import List

from config import DEFAULT_ORDER_LOG

logger = logging.getLogger(__name__)


def format_log_line(order_id: int, method_label: str) -> str:
    return (
        f"[LOG] -> Order ID: {order_id} has been successfully checked out "
        f"and paid using {method_label}."
    )


class OrderLog:
    def __init__(self, path: str = DEFAULT_ORDER_LOG) -> None:
        self.path = path

    def record(self, order_id: int, method_label: str) -> bool:
        """Append one line for a completed order.

        Returns True when the line was written, False if the file could
        not be opened or written.
        """
        line = format_log_line(order_id, method_label)
        try:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError as exc:
            logger.warning(
                "Could not record order in log file",
                extra={"extra": {"order_id": order_id, "path": os.fspath(self.path), "error": str(exc)}},
            )
            return False
        return True

    def read_lines(self) -> List[str]:
        try:
            with open(self.path, encoding="utf-8") as fh:
                return [ln.rstrip("\n") for ln in fh]
        except FileNotFoundError:
            return []
