"""
Catalog module: static product reference data.
"""

from storefront.core.catalog.catalog import Catalog, default_catalog, load_catalog
from storefront.core.catalog.models import CartLine, Product, format_price

__all__ = [
    "Catalog",
    "CartLine",
    "Product",
    "default_catalog",
    "format_price",
    "load_catalog",
]
