"""
Cart module: per-user carts and browse position.
"""

from storefront.core.cart.cursor import BrowseCursor
from storefront.core.cart.store import CartStore

__all__ = ["BrowseCursor", "CartStore"]
