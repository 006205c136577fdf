"""
Per-user shopping carts.
"""

import logging
from decimal import Decimal
from typing import Optional

from storefront.core.catalog import Catalog, CartLine, Product
from storefront.core.errors import NotInCart
from storefront.core.session.store import MemorySessionStore, SessionStore

logger = logging.getLogger(__name__)


class CartStore:
    """
    Carts keyed by user id.

    A cart is a mapping product_id -> quantity kept in insertion order of
    distinct additions. Quantities are always >= 1; removing an item deletes
    its key.
    """

    def __init__(self, catalog: Catalog, store: Optional[SessionStore[int, dict[str, int]]] = None):
        self.catalog = catalog
        self._store = store if store is not None else MemorySessionStore()

    def add(self, user_id: int, product_id: str, qty: int = 1) -> int:
        """
        Add product to cart.

        Returns:
            Total item count in the user's cart after the addition

        Raises:
            UnknownProduct: product_id is not in the catalog
        """
        if qty < 1:
            raise ValueError("qty must be >= 1")
        self.catalog.get(product_id)

        cart = dict(self._store.get_or_create(user_id, dict))
        cart[product_id] = cart.get(product_id, 0) + qty
        self._store.set(user_id, cart)

        logger.debug(f"User {user_id}: added {qty} x {product_id}")
        return sum(cart.values())

    def remove(self, user_id: int, product_id: str) -> Product:
        """
        Remove product entry from cart.

        Returns:
            Removed product

        Raises:
            NotInCart: product is not in the user's cart
        """
        cart = self._store.get(user_id)
        if not cart or product_id not in cart:
            raise NotInCart(product_id)

        cart = dict(cart)
        del cart[product_id]
        self._store.set(user_id, cart)

        logger.debug(f"User {user_id}: removed {product_id}")
        return self.catalog.get(product_id)

    def snapshot(self, user_id: int) -> list[CartLine]:
        cart = self._store.get(user_id) or {}
        return [
            CartLine(product=self.catalog.get(product_id), quantity=quantity)
            for product_id, quantity in cart.items()
        ]

    def quantity(self, user_id: int, product_id: str) -> int:
        return (self._store.get(user_id) or {}).get(product_id, 0)

    def item_count(self, user_id: int) -> int:
        return sum((self._store.get(user_id) or {}).values())

    def total(self, user_id: int) -> Decimal:
        return sum((line.total_price for line in self.snapshot(user_id)), Decimal("0"))

    def is_empty(self, user_id: int) -> bool:
        return not self._store.get(user_id)

    def clear(self, user_id: int) -> None:
        self._store.delete(user_id)
