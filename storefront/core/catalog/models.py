"""
Catalog models.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from html import escape

CENTS = Decimal("0.01")


def format_price(amount: Decimal) -> str:
    """Format amount as dollars, e.g. ``$25.50``."""
    return f"${amount.quantize(CENTS, rounding=ROUND_HALF_UP)}"


@dataclass(frozen=True)
class Product:
    """Single catalog product."""
    id: str
    name: str
    price: Decimal
    description: str = ""
    category: str = ""
    image: str | None = None      # path relative to images dir, or absolute

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Product {self.id}: price must be >= 0")

    @property
    def display_price(self) -> str:
        return format_price(self.price)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
            "description": self.description,
            "category": self.category,
            "image": self.image,
        }


@dataclass(frozen=True)
class CartLine:
    """Product with quantity, as stored in a cart or order snapshot."""
    product: Product
    quantity: int

    @property
    def total_price(self) -> Decimal:
        return self.product.price * self.quantity

    def format_line(self) -> str:
        return f"- {escape(self.product.name)} (x{self.quantity}) - {format_price(self.total_price)}"
