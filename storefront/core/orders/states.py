"""
Checkout dialog states.

Each state is its own record carrying exactly the draft fields collected so
far, so a phone number cannot be read before it was entered.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from storefront.core.catalog import CartLine


class CheckoutState(Enum):
    """Checkout dialog state of a chat."""
    IDLE = "idle"                                     # No checkout in progress
    AWAITING_PHONE = "awaiting_phone"                 # Waiting for phone number
    AWAITING_ADDRESS = "awaiting_address"             # Waiting for shipping address
    AWAITING_CONFIRMATION = "awaiting_confirmation"   # Summary shown, waiting for buttons


@dataclass(frozen=True)
class Idle:
    state: ClassVar[CheckoutState] = CheckoutState.IDLE


@dataclass(frozen=True)
class AwaitingPhone:
    state: ClassVar[CheckoutState] = CheckoutState.AWAITING_PHONE

    owner_id: int
    items: tuple[CartLine, ...]


@dataclass(frozen=True)
class AwaitingAddress:
    state: ClassVar[CheckoutState] = CheckoutState.AWAITING_ADDRESS

    owner_id: int
    items: tuple[CartLine, ...]
    phone: str


@dataclass(frozen=True)
class AwaitingConfirmation:
    state: ClassVar[CheckoutState] = CheckoutState.AWAITING_CONFIRMATION

    owner_id: int
    items: tuple[CartLine, ...]
    phone: str
    address: str


DialogState = Union[Idle, AwaitingPhone, AwaitingAddress, AwaitingConfirmation]

IDLE = Idle()
