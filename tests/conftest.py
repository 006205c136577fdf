from decimal import Decimal

import pytest

from storefront.core.cart import BrowseCursor, CartStore
from storefront.core.catalog import Catalog, Product
from storefront.core.orders import CheckoutDialog
from storefront.core.session.orchestrator import SessionOrchestrator

CHAT_ID = 1001
USER_ID = 42


@pytest.fixture
def images_dir(tmp_path):
    path = tmp_path / "images"
    path.mkdir()
    (path / "product_a.png").write_bytes(b"\x89PNG fake")
    (path / "product_b.png").write_bytes(b"\x89PNG fake")
    return path


@pytest.fixture
def catalog(images_dir):
    return Catalog(
        [
            Product("p1", "Dummy Product A", Decimal("10.00"), "A great dummy product.", "Electronics", "product_a.png"),
            Product("p2", "Dummy Product B", Decimal("25.50"), "Another fantastic dummy product.", "Books", "product_b.png"),
            Product("p3", "Dummy Product C", Decimal("5.00"), "Small and useful dummy product.", "Home Goods", "product_c.jpg"),
        ],
        images_dir=images_dir,
    )


@pytest.fixture
def carts(catalog):
    return CartStore(catalog)


@pytest.fixture
def cursor(catalog):
    return BrowseCursor(catalog)


@pytest.fixture
def dialog():
    return CheckoutDialog()


@pytest.fixture
def orchestrator(catalog, carts, cursor, dialog):
    return SessionOrchestrator(catalog, carts=carts, cursor=cursor, dialog=dialog)
