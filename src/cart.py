"""In-memory shopping cart.

Lines are keyed by product id and keep insertion order.  There is no
capacity limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from catalog import Product, format_amount


@dataclass
class CartLine:
    """A line in the in-memory shopping cart."""
    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


class Cart:
    def __init__(self) -> None:
        self._lines: Dict[int, CartLine] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def add_product(self, product: Product) -> CartLine:
        """Add one unit of ``product``, merging with an existing line."""
        line = self._lines.get(product.id)
        if line is None:
            line = CartLine(product=product, quantity=1)
            self._lines[product.id] = line
        else:
            line.quantity += 1
        return line

    def lines(self) -> List[CartLine]:
        return list(self._lines.values())

    def quantity_of(self, product_id: int) -> int:
        line = self._lines.get(product_id)
        return line.quantity if line else 0

    def get_total(self) -> float:
        return sum((line.line_total for line in self._lines.values()), 0.0)

    def is_empty(self) -> bool:
        return not self._lines

    def clear(self) -> None:
        self._lines.clear()

    def render(self) -> str:
        """Tab-separated listing of the cart: id, name, price, quantity."""
        rows = ["Shopping Cart:", "ID\tName\t\tPrice\tQty"]
        for line in self._lines.values():
            p = line.product
            rows.append(f"{p.id}\t{p.name}\t\t{format_amount(p.price)}\t{line.quantity}")
        return "\n".join(rows)
