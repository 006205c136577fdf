"""
Order models.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from html import escape
import uuid

from storefront.core.catalog import CartLine, format_price


def format_order_lines(items: tuple[CartLine, ...]) -> str:
    """Format items as text lines."""
    return "\n".join(line.format_line() for line in items)


def order_total(items: tuple[CartLine, ...]) -> Decimal:
    return sum((line.total_price for line in items), Decimal("0"))


@dataclass(frozen=True)
class PlacedOrder:
    """Confirmed order."""
    chat_id: int
    owner_id: int
    items: tuple[CartLine, ...]
    phone: str
    address: str
    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8].upper())
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def total_price(self) -> Decimal:
        return order_total(self.items)

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.items)

    @property
    def order_number(self) -> str:
        """Human-readable order number."""
        return f"#{self.id}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "order_number": self.order_number,
            "created_at": self.created_at.isoformat(),
            "chat_id": self.chat_id,
            "owner_id": self.owner_id,
            "items": [
                {
                    "product_id": line.product.id,
                    "product_name": line.product.name,
                    "quantity": line.quantity,
                    "price": str(line.product.price),
                    "total_price": str(line.total_price),
                }
                for line in self.items
            ],
            "phone": self.phone,
            "address": self.address,
            "total_price": str(self.total_price),
        }

    def format_summary(self) -> str:
        """Format order for the manager notification."""
        return "\n".join([
            f"📦 <b>Order {self.order_number}</b>",
            f"📅 {self.created_at.strftime('%d.%m.%Y %H:%M')}",
            "",
            format_order_lines(self.items),
            "",
            f"<b>Total:</b> {format_price(self.total_price)}",
            f"📞 {escape(self.phone)}",
            f"📍 {escape(self.address)}",
        ])
