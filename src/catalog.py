"""Product catalogue for the checkout demo.

The catalogue is a fixed, read-only list built once at start-up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from errors import ProductNotFoundError


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float


DEFAULT_PRODUCTS = (
    Product(1, "Keyboard", 899.0),
    Product(2, "Mouse", 599.0),
    Product(3, "Monitor", 5999.0),
    Product(4, "USB Cable", 199.0),
    Product(5, "Webcam", 1499.0),
)


def format_amount(amount: float) -> str:
    """Render a price or total with up to six significant digits.

    ``5999.0`` prints as ``5999`` and ``11998.0`` as ``11998``.
    """
    return f"{amount:g}"


class Catalog:
    """Ordered, immutable collection of products keyed by id."""

    def __init__(self, products: Iterable[Product] = DEFAULT_PRODUCTS) -> None:
        self._products: Dict[int, Product] = {}
        for product in products:
            # first definition of an id wins
            self._products.setdefault(product.id, product)

    def __len__(self) -> int:
        return len(self._products)

    def list_products(self) -> List[Product]:
        return list(self._products.values())

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def get(self, product_id: int) -> Product:
        product = self.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def render(self) -> str:
        """Tab-separated listing of every product: id, name, price."""
        rows = ["Products:", "ID\tName\t\tPrice"]
        for p in self._products.values():
            rows.append(f"{p.id}\t{p.name}\t\t{format_amount(p.price)}")
        return "\n".join(rows)
