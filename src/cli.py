"""
Command-line interface for the checkout demo.

This script wires the ``CheckoutApp`` class into an interactive menu
loop: browse products, add them to the cart, view the cart and check
out with one of the stubbed payment methods.  Separating the CLI from
the business logic keeps the latter testable and free from I/O code.
"""

import logging
import sys
from typing import Optional

from app import CheckoutApp, INVALID_PRODUCT
from catalog import format_amount
from config import Settings
from logging_config import configure_logging
from payment_service import PAYMENT_MENU

logger = logging.getLogger(__name__)

MENU = "\nMENU:\n1. View Products\n2. View Shopping Cart\n3. Exit"


def _is_yes(answer: str) -> bool:
    return answer.strip()[:1] in ("Y", "y")


def browse_products(app: CheckoutApp) -> None:
    """Show the catalogue and add products until the user stops."""
    print("\n" + app.catalog.render())
    while True:
        raw = input("Enter the ID of the product to add to cart: ").strip()
        try:
            product_id = int(raw)
        except ValueError:
            print(INVALID_PRODUCT)
        else:
            _, msg = app.add_to_cart(product_id)
            print(msg)
        if not _is_yes(input("Do you want to add another product? (Y/N): ")):
            return


def view_cart(app: CheckoutApp) -> None:
    """Show the cart and, if confirmed, run the checkout."""
    if app.is_cart_empty():
        print("\nCart is empty!")
        return
    print("\n" + app.cart.render())
    if not _is_yes(input("\nDo you want to check out all the products? (Y/N): ")):
        return

    print(f"Total Amount: {format_amount(app.cart_total())}")
    choice = input(PAYMENT_MENU + "\nChoice: ").strip()
    success, result = app.checkout(choice)
    if not success:
        print(result)
        return
    print(result.confirmation)
    if not result.logged:
        print(f"Warning: order {result.order_id} could not be written to {app.order_log.path}.")
    print("You have successfully checked out the products!")


def interactive_cli(app: Optional[CheckoutApp] = None) -> None:
    """Run the menu loop until the user chooses Exit."""
    app = app or CheckoutApp()
    while True:
        print(MENU)
        try:
            choice = int(input("Enter your choice: ").strip())
        except ValueError:
            continue
        if choice == 1:
            browse_products(app)
        elif choice == 2:
            view_cart(app)
        elif choice == 3:
            return
        # anything else: show the menu again


def main() -> int:
    settings = Settings.from_env()
    configure_logging(settings.log_dir, settings.level)
    try:
        interactive_cli(CheckoutApp(settings))
    except (KeyboardInterrupt, EOFError):
        print("\nExiting.")
    logger.debug("Session ended")
    return 0


if __name__ == "__main__":
    sys.exit(main())
