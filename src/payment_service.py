# payment_service.py
"""
Stubbed payment processing for the checkout demo.

- Closed set of payment methods (cash, card, GCash), selected by menu number.
- One strategy per method; each only renders a confirmation.
- Stateless ``process_payment`` dispatcher plus a small service wrapper.

NOTE: This is *mock* code. No money moves and no gateway is called.
"""

from __future__ import annotations

import enum
import logging
from typing import Dict, Optional

from catalog import format_amount
from errors import InvalidChoiceError

logger = logging.getLogger(__name__)


class PaymentMethod(enum.Enum):
    CASH = 1
    CARD = 2
    GCASH = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_choice(cls, choice: object) -> "PaymentMethod":
        """Map a menu selection (``1``, ``"2"``, ...) to a payment method."""
        try:
            return cls(int(str(choice).strip()))
        except ValueError:
            raise InvalidChoiceError(choice) from None


_LABELS = {
    PaymentMethod.CASH: "Cash",
    PaymentMethod.CARD: "Credit/Debit Card",
    PaymentMethod.GCASH: "GCash",
}

PAYMENT_MENU = "Select Payment Method: " + " ".join(
    f"{m.value}. {m.label}" for m in PaymentMethod
)


# ---------- Strategy interfaces ----------

class PaymentStrategy:
    """Abstract base for payment strategies."""
    method: PaymentMethod

    def pay(self, amount: float) -> str:
        return f"Paid {format_amount(amount)} using {self.method.label}."


class CashPaymentStrategy(PaymentStrategy):
    method = PaymentMethod.CASH


class CardPaymentStrategy(PaymentStrategy):
    method = PaymentMethod.CARD


class GCashPaymentStrategy(PaymentStrategy):
    method = PaymentMethod.GCASH


_STRATEGIES: Dict[PaymentMethod, PaymentStrategy] = {
    PaymentMethod.CASH: CashPaymentStrategy(),
    PaymentMethod.CARD: CardPaymentStrategy(),
    PaymentMethod.GCASH: GCashPaymentStrategy(),
}


def process_payment(method: PaymentMethod, amount: float) -> str:
    """Forward ``amount`` to the strategy for ``method`` and return its confirmation."""
    return _STRATEGIES[method].pay(amount)


class PaymentService:
    """
    Default-constructed front for ``process_payment``.

    A strategy may be swapped per method (tests, demos); otherwise the
    module-level strategies are used.  No state is kept between calls.
    """

    def __init__(self, strategies: Optional[Dict[PaymentMethod, PaymentStrategy]] = None) -> None:
        self.strategies: Dict[PaymentMethod, PaymentStrategy] = dict(_STRATEGIES)
        if strategies:
            self.strategies.update(strategies)

    def register_strategy(self, method: PaymentMethod, strategy: PaymentStrategy) -> None:
        self.strategies[method] = strategy

    def process_payment(self, method: PaymentMethod, amount: float) -> str:
        confirmation = self.strategies[method].pay(amount)
        logger.info(
            "Payment processed",
            extra={"extra": {"payment_method": method.label, "amount": amount}},
        )
        return confirmation
