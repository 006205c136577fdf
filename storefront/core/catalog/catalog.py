"""
Static product catalog.

The catalog is loaded once at startup and shared read-only by every
conversation. Insertion order of the source file defines pagination order.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Optional

from storefront.core.catalog.models import Product
from storefront.core.errors import ImageUnavailable, UnknownProduct

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "catalog.json"


class Catalog:
    """Read-only ordered mapping of product id -> Product."""

    def __init__(self, products: Iterable[Product], images_dir: Optional[Path] = None):
        self._products: dict[str, Product] = {}
        for product in products:
            if product.id in self._products:
                raise ValueError(f"Duplicate product id: {product.id}")
            self._products[product.id] = product
        self._ids = tuple(self._products)
        self.images_dir = Path(images_dir) if images_dir else None

    def get(self, product_id: str) -> Product:
        try:
            return self._products[product_id]
        except KeyError:
            raise UnknownProduct(product_id) from None

    def ids_in_order(self) -> tuple[str, ...]:
        return self._ids

    def count(self) -> int:
        return len(self._ids)

    def product_at(self, index: int) -> Product:
        """Product at pagination index."""
        return self._products[self._ids[index]]

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __len__(self) -> int:
        return len(self._ids)

    def image_for(self, product: Product) -> Path:
        """
        Resolve product image to an existing file.

        Raises:
            ImageUnavailable: no image configured or file is missing
        """
        if not product.image:
            raise ImageUnavailable(product.name)

        path = Path(product.image)
        if not path.is_absolute() and self.images_dir is not None:
            path = self.images_dir / path

        if not path.is_file():
            logger.warning(f"Image for product {product.id} not found: {path}")
            raise ImageUnavailable(product.name)
        return path


def _parse_product(raw: dict) -> Product:
    return Product(
        id=str(raw["id"]),
        name=raw["name"],
        price=Decimal(str(raw["price"])),
        description=raw.get("description", ""),
        category=raw.get("category", ""),
        image=raw.get("image"),
    )


def load_catalog(path: str | Path, images_dir: Optional[Path] = None) -> Catalog:
    """
    Load catalog from a JSON file.

    The file holds a list of product objects::

        [{"id": "p1", "name": "...", "price": 10.00, "image": "product_a.png"}]

    Args:
        path: Path to JSON file
        images_dir: Directory relative image paths are resolved against

    Returns:
        Loaded catalog
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw_products = json.load(f, parse_float=Decimal)

    if not isinstance(raw_products, list):
        raise ValueError(f"{path}: catalog must be a list of products")

    catalog = Catalog((_parse_product(raw) for raw in raw_products), images_dir=images_dir)
    logger.info(f"Loaded {catalog.count()} products from {path}")
    return catalog


def default_catalog(images_dir: Optional[Path] = None) -> Catalog:
    """Load the bundled demo catalog."""
    return load_catalog(DEFAULT_CATALOG_PATH, images_dir=images_dir)
