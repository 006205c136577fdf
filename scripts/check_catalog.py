"""
Script to check the product catalog and its images.
Run: python -m scripts.check_catalog [catalog.json]
"""

import sys
sys.path.insert(0, '.')

from storefront.config import settings
from storefront.core.catalog import default_catalog, load_catalog
from storefront.core.errors import ImageUnavailable


def main() -> int:
    if len(sys.argv) > 1:
        catalog = load_catalog(sys.argv[1], images_dir=settings.images_path)
    elif settings.catalog_path:
        catalog = load_catalog(settings.catalog_path, images_dir=settings.images_path)
    else:
        catalog = default_catalog(images_dir=settings.images_path)

    print(f"Total products: {catalog.count()}\n")

    missing = 0
    for index, product_id in enumerate(catalog.ids_in_order(), 1):
        product = catalog.get(product_id)
        try:
            image = catalog.image_for(product)
            image_status = f"✅ {image}"
        except ImageUnavailable:
            image_status = "❌ image missing"
            missing += 1
        print(f"{index}. [{product.id}] {product.name} - {product.display_price} ({product.category})")
        print(f"   {image_status}")

    print("-" * 50)
    if missing:
        print(f"{missing} product(s) will be shown without a photo")
        return 1
    print("✅ All product images found")
    return 0


if __name__ == "__main__":
    sys.exit(main())
