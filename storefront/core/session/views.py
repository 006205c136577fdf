"""
Outbound views and keyboard layouts.

A View describes one outbound message; the messaging gateway decides how to
render it (Telegram inline keyboard, photo with caption, edited message).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from storefront.core.catalog import CartLine
from storefront.core.session.actions import Action, ActionKind

if TYPE_CHECKING:
    from storefront.core.orders.models import PlacedOrder


@dataclass(frozen=True)
class Button:
    text: str
    action: Action

    @property
    def token(self) -> str:
        return self.action.token()


Keyboard = tuple[tuple[Button, ...], ...]


@dataclass(frozen=True)
class View:
    """
    Single outbound message.

    Attributes:
        text: Message text, or photo caption when image is set
        keyboard: Rows of inline buttons
        image: Photo to send with text as caption
        replace: Edit the message the pressed button belongs to
            instead of sending a new one
        fallback: Text sent instead when the image cannot be delivered
    """
    text: str
    keyboard: Keyboard = ()
    image: Optional[Path] = None
    replace: bool = False
    fallback: Optional[str] = None


@dataclass(frozen=True)
class Outcome:
    """Result of handling one inbound event."""
    view: View
    placed_order: Optional["PlacedOrder"] = None


def _button(text: str, kind: ActionKind) -> Button:
    return Button(text, Action.of(kind))


def get_main_menu_keyboard() -> Keyboard:
    return (
        (_button("View Products", ActionKind.BROWSE_START),),
        (_button("View Cart", ActionKind.VIEW_CART),),
        (_button("Checkout", ActionKind.CHECKOUT),),
    )


def get_back_to_menu_keyboard() -> Keyboard:
    return ((_button("Back to Main Menu", ActionKind.MAIN_MENU),),)


def get_product_keyboard(index: int, product_id: str, product_name: str) -> Keyboard:
    return (
        (
            Button("Previous", Action.browse_prev(index)),
            Button("Next", Action.browse_next(index)),
        ),
        (Button(f"Add {product_name}", Action.add_to_cart(product_id)),),
        (_button("Back to Main Menu", ActionKind.MAIN_MENU),),
    )


def get_after_cart_change_keyboard() -> Keyboard:
    """Keyboard after an item was added or removed."""
    return (
        (_button("View Cart", ActionKind.VIEW_CART),),
        (_button("Continue Shopping", ActionKind.BROWSE_START),),
        (_button("Back to Main Menu", ActionKind.MAIN_MENU),),
    )


def get_empty_cart_keyboard() -> Keyboard:
    return (
        (_button("View Products", ActionKind.BROWSE_START),),
        (_button("Back to Main Menu", ActionKind.MAIN_MENU),),
    )


def get_not_in_cart_keyboard() -> Keyboard:
    return (
        (_button("View Cart", ActionKind.VIEW_CART),),
        (_button("Back to Main Menu", ActionKind.MAIN_MENU),),
    )


def get_cart_keyboard(lines: list[CartLine]) -> Keyboard:
    rows = [
        (Button(f"Remove {line.product.name}", Action.remove_from_cart(line.product.id)),)
        for line in lines
    ]
    rows.append((_button("Checkout", ActionKind.CHECKOUT),))
    rows.append((_button("Continue Shopping", ActionKind.BROWSE_START),))
    rows.append((_button("Back to Main Menu", ActionKind.MAIN_MENU),))
    return tuple(rows)


def get_checkout_input_keyboard() -> Keyboard:
    """Escape hatch shown while collecting phone and address."""
    return ((_button("Cancel Order", ActionKind.CANCEL_ORDER),),)


def get_confirmation_keyboard() -> Keyboard:
    return (
        (_button("Confirm Order", ActionKind.CONFIRM_ORDER),),
        (_button("Cancel Order", ActionKind.CANCEL_ORDER),),
    )
