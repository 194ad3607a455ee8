"""Error types raised by the checkout demo.

User input errors are always recovered by the caller; none of these
terminate the interactive loop.
"""


class CheckoutError(Exception):
    """Base class for checkout demo errors."""


class ProductNotFoundError(CheckoutError, LookupError):
    """Raised when a product id is not present in the catalog."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class InvalidChoiceError(CheckoutError, ValueError):
    """Raised for a menu or payment selection outside the offered options."""

    def __init__(self, choice: object) -> None:
        super().__init__(f"Invalid choice: {choice!r}")
        self.choice = choice
