"""
Button action tokens.

Tokens cross the chat boundary as plain strings (Telegram callback data).
They are parsed once into an Action and serialised back with Action.token().
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ActionKind(Enum):
    BROWSE_START = "view_products"
    BROWSE_NEXT = "next_product_"
    BROWSE_PREV = "prev_product_"
    ADD_TO_CART = "add_to_cart_"
    VIEW_CART = "view_cart"
    REMOVE_FROM_CART = "remove_from_cart_"
    CHECKOUT = "checkout"
    CONFIRM_ORDER = "confirm_order"
    CANCEL_ORDER = "cancel_order"
    MAIN_MENU = "main_menu"
    UNKNOWN = ""


_PLAIN = {
    kind.value: kind
    for kind in (
        ActionKind.BROWSE_START,
        ActionKind.VIEW_CART,
        ActionKind.CHECKOUT,
        ActionKind.CONFIRM_ORDER,
        ActionKind.CANCEL_ORDER,
        ActionKind.MAIN_MENU,
    )
}

_WITH_INDEX = (ActionKind.BROWSE_NEXT, ActionKind.BROWSE_PREV)
_WITH_PRODUCT = (ActionKind.ADD_TO_CART, ActionKind.REMOVE_FROM_CART)

_INDEX_RE = re.compile(r"^[0-9]+$")


@dataclass(frozen=True)
class Action:
    """Parsed button action."""
    kind: ActionKind
    product_id: Optional[str] = None
    index: Optional[int] = None
    raw: str = ""

    def token(self) -> str:
        if self.kind in _WITH_INDEX:
            return f"{self.kind.value}{self.index or 0}"
        if self.kind in _WITH_PRODUCT:
            return f"{self.kind.value}{self.product_id}"
        return self.kind.value or self.raw

    @classmethod
    def browse_start(cls) -> "Action":
        return cls(ActionKind.BROWSE_START)

    @classmethod
    def browse_next(cls, index: int) -> "Action":
        return cls(ActionKind.BROWSE_NEXT, index=index)

    @classmethod
    def browse_prev(cls, index: int) -> "Action":
        return cls(ActionKind.BROWSE_PREV, index=index)

    @classmethod
    def add_to_cart(cls, product_id: str) -> "Action":
        return cls(ActionKind.ADD_TO_CART, product_id=product_id)

    @classmethod
    def remove_from_cart(cls, product_id: str) -> "Action":
        return cls(ActionKind.REMOVE_FROM_CART, product_id=product_id)

    @classmethod
    def of(cls, kind: ActionKind) -> "Action":
        return cls(kind)


def parse_action(token: Optional[str]) -> Action:
    """
    Parse callback data into an Action.

    Unrecognised tokens, including an index token with a non-numeric
    index, come back as ActionKind.UNKNOWN.
    """
    token = token or ""

    if token in _PLAIN:
        return Action(_PLAIN[token], raw=token)

    for kind in _WITH_INDEX:
        if token.startswith(kind.value):
            index = token[len(kind.value):]
            if _INDEX_RE.match(index):
                return Action(kind, index=int(index), raw=token)
            return Action(ActionKind.UNKNOWN, raw=token)

    for kind in _WITH_PRODUCT:
        if token.startswith(kind.value):
            product_id = token[len(kind.value):]
            if product_id:
                return Action(kind, product_id=product_id, raw=token)
            return Action(ActionKind.UNKNOWN, raw=token)

    return Action(ActionKind.UNKNOWN, raw=token)
