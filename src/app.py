# src/app.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import logging

from cart import Cart, CartLine
from catalog import Catalog, Product
from config import Settings
from errors import InvalidChoiceError, ProductNotFoundError
from order_log import OrderLog
from payment_service import PaymentMethod, PaymentService

logger = logging.getLogger(__name__)

PRODUCT_ADDED = "Product added successfully!"
INVALID_PRODUCT = "Invalid Product ID!"
INVALID_CHOICE = "Invalid choice!"
CART_EMPTY = "Cart is empty!"


@dataclass
class Receipt:
    """Outcome of a successful checkout."""
    order_id: int
    method: PaymentMethod
    amount: float
    confirmation: str
    # False when the order log could not be written
    logged: bool


class CheckoutApp:
    """
    Business logic for the checkout demo. Exposes catalogue browsing, cart
    management and checkout; holds no console I/O.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog: Optional[Catalog] = None,
        payment_service: Optional[PaymentService] = None,
        order_log: Optional[OrderLog] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.catalog = catalog if catalog is not None else Catalog()
        self.payment_service = payment_service or PaymentService()
        self.order_log = order_log or OrderLog(self.settings.order_log_path)
        self.cart = Cart()
        self.next_order_id = self.settings.first_order_id

    # ---- Product catalogue ----

    def list_products(self) -> List[Product]:
        return self.catalog.list_products()

    # ---- Cart operations ----

    def add_to_cart(self, product_id: int) -> Tuple[bool, str]:
        try:
            product = self.catalog.get(product_id)
        except ProductNotFoundError:
            logger.debug("Unknown product id", extra={"extra": {"product_id": product_id}})
            return False, INVALID_PRODUCT
        self.cart.add_product(product)
        return True, PRODUCT_ADDED

    def view_cart(self) -> List[CartLine]:
        return self.cart.lines()

    def cart_total(self) -> float:
        return self.cart.get_total()

    def is_cart_empty(self) -> bool:
        return self.cart.is_empty()

    # ---- Checkout ----

    def checkout(self, choice: object) -> Tuple[bool, Union[Receipt, str]]:
        """Pay for the whole cart with the method selected by ``choice``.

        An empty cart or an invalid selection leaves the cart, the order id
        and the order log untouched.  Once the payment confirmation exists
        the checkout counts as done: the order id advances and the cart is
        emptied even if the log line could not be written.
        """
        if self.cart.is_empty():
            return False, CART_EMPTY
        try:
            method = PaymentMethod.from_choice(choice)
        except InvalidChoiceError:
            logger.info("Checkout aborted: invalid payment choice", extra={"extra": {"choice": str(choice)}})
            return False, INVALID_CHOICE

        total = self.cart.get_total()
        confirmation = self.payment_service.process_payment(method, total)

        order_id = self.next_order_id
        self.next_order_id += 1
        logged = self.order_log.record(order_id, method.label)
        self.cart.clear()

        logger.info(
            "Order checked out",
            extra={"extra": {"order_id": order_id, "payment_method": method.label, "amount": total, "logged": logged}},
        )
        return True, Receipt(
            order_id=order_id,
            method=method,
            amount=total,
            confirmation=confirmation,
            logged=logged,
        )
