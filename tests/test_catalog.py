import json
from decimal import Decimal

import pytest

from storefront.core.catalog import Catalog, Product, default_catalog, format_price, load_catalog
from storefront.core.errors import ImageUnavailable, UnknownProduct


def test_ids_keep_insertion_order(catalog):
    assert catalog.ids_in_order() == ("p1", "p2", "p3")
    assert catalog.count() == 3
    assert catalog.product_at(1).id == "p2"


def test_get_unknown_product_raises(catalog):
    with pytest.raises(UnknownProduct) as exc_info:
        catalog.get("nope")
    assert exc_info.value.product_id == "nope"
    assert "nope" not in catalog


def test_duplicate_ids_rejected():
    product = Product("p1", "A", Decimal("1"))
    with pytest.raises(ValueError):
        Catalog([product, product])


def test_negative_price_rejected():
    with pytest.raises(ValueError):
        Product("p1", "A", Decimal("-1"))


def test_image_for_resolves_relative_path(catalog, images_dir):
    assert catalog.image_for(catalog.get("p1")) == images_dir / "product_a.png"


def test_image_for_missing_file(catalog):
    with pytest.raises(ImageUnavailable) as exc_info:
        catalog.image_for(catalog.get("p3"))
    assert "Dummy Product C" in exc_info.value.message


def test_load_catalog_parses_decimal_prices(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([
        {"id": "x1", "name": "Mug", "price": 25.50},
        {"id": "x2", "name": "Pen", "price": 0.1},
    ]))

    catalog = load_catalog(path)

    assert catalog.get("x1").price == Decimal("25.50")
    assert catalog.get("x2").price == Decimal("0.1")


def test_load_catalog_rejects_non_list(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"id": "x1"}))
    with pytest.raises(ValueError):
        load_catalog(path)


def test_default_catalog_has_demo_products():
    catalog = default_catalog()
    assert catalog.ids_in_order() == ("p1", "p2", "p3")
    assert catalog.get("p2").price == Decimal("25.50")


def test_format_price():
    assert format_price(Decimal("25")) == "$25.00"
    assert format_price(Decimal("25.5")) == "$25.50"
