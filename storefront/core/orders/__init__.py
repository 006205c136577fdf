"""
Orders module.
Handles the checkout dialog, input validation and order export.
"""

from storefront.core.orders.dialog import CANCEL, CONFIRM, CheckoutDialog, render_summary
from storefront.core.orders.exporter import OrderExporter
from storefront.core.orders.models import PlacedOrder
from storefront.core.orders.states import (
    AwaitingAddress,
    AwaitingConfirmation,
    AwaitingPhone,
    CheckoutState,
    DialogState,
    Idle,
)
from storefront.core.orders.validators import AddressValidator, PhoneValidator

__all__ = [
    # Dialog
    "CheckoutDialog",
    "CONFIRM",
    "CANCEL",
    "render_summary",
    # States
    "CheckoutState",
    "DialogState",
    "Idle",
    "AwaitingPhone",
    "AwaitingAddress",
    "AwaitingConfirmation",
    # Models
    "PlacedOrder",
    # Validators
    "PhoneValidator",
    "AddressValidator",
    # Exporter
    "OrderExporter",
]
