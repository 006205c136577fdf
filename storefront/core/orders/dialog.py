"""
Checkout dialog state machine.

    IDLE --begin--> AWAITING_PHONE --phone--> AWAITING_ADDRESS
         --address--> AWAITING_CONFIRMATION --confirm/cancel--> IDLE

Dialog state is keyed by chat id. The cart snapshot is frozen when the
checkout begins; later cart changes do not affect the pending order.
"""

import logging
from html import escape
from typing import Iterable, Optional

from storefront.core.catalog import CartLine, format_price
from storefront.core.errors import EmptyCart, InvalidAddress, InvalidPhone, MalformedConfirmation
from storefront.core.orders.models import PlacedOrder, format_order_lines, order_total
from storefront.core.orders.states import (
    IDLE,
    AwaitingAddress,
    AwaitingConfirmation,
    AwaitingPhone,
    CheckoutState,
    DialogState,
)
from storefront.core.orders.validators import AddressValidator, PhoneValidator
from storefront.core.session.store import MemorySessionStore, SessionStore

logger = logging.getLogger(__name__)

CONFIRM = "confirm"
CANCEL = "cancel"


def render_summary(draft: AwaitingConfirmation) -> str:
    """Format order summary shown before confirmation."""
    return (
        "Please confirm your order details:\n\n"
        f"{format_order_lines(draft.items)}\n"
        f"\nTotal: {format_price(order_total(draft.items))}"
        f"\nPhone Number: {escape(draft.phone)}"
        f"\nShipping Address: {escape(draft.address)}"
    )


class CheckoutDialog:
    """Per-chat checkout conversation."""

    def __init__(self, store: Optional[SessionStore[int, DialogState]] = None):
        self._store = store if store is not None else MemorySessionStore()

    def current(self, chat_id: int) -> DialogState:
        return self._store.get(chat_id) or IDLE

    def state(self, chat_id: int) -> CheckoutState:
        return self.current(chat_id).state

    def _set(self, chat_id: int, draft: DialogState) -> None:
        if draft is IDLE:
            self._store.delete(chat_id)
        else:
            self._store.set(chat_id, draft)

    def begin(self, chat_id: int, owner_id: int, lines: Iterable[CartLine]) -> AwaitingPhone:
        """
        Start checkout from the owner's current cart.

        Raises:
            EmptyCart: no lines; state stays IDLE
            RuntimeError: a checkout is already pending in this chat
        """
        items = tuple(lines)
        if not items:
            raise EmptyCart()
        if self.state(chat_id) is not CheckoutState.IDLE:
            raise RuntimeError(f"Chat {chat_id}: checkout already in progress")

        draft = AwaitingPhone(owner_id=owner_id, items=items)
        self._set(chat_id, draft)
        logger.info(f"Chat {chat_id}: checkout started by user {owner_id} ({len(items)} lines)")
        return draft

    def submit_text(self, chat_id: int, text: str) -> Optional[DialogState]:
        """
        Feed free-text input to the dialog.

        Returns:
            New dialog state, or None when no checkout is pending

        Raises:
            InvalidPhone: while AWAITING_PHONE; state unchanged
            InvalidAddress: while AWAITING_ADDRESS; state unchanged
            MalformedConfirmation: while AWAITING_CONFIRMATION; the draft is
                dropped and state resets to IDLE
        """
        draft = self.current(chat_id)

        if isinstance(draft, AwaitingPhone):
            is_valid, phone, error = PhoneValidator.validate(text)
            if not is_valid:
                logger.debug(f"Chat {chat_id}: rejected phone input")
                raise InvalidPhone(error)
            draft = AwaitingAddress(owner_id=draft.owner_id, items=draft.items, phone=phone)
            self._set(chat_id, draft)
            return draft

        if isinstance(draft, AwaitingAddress):
            is_valid, address, error = AddressValidator.validate(text)
            if not is_valid:
                logger.debug(f"Chat {chat_id}: rejected address input")
                raise InvalidAddress(error)
            draft = AwaitingConfirmation(
                owner_id=draft.owner_id,
                items=draft.items,
                phone=draft.phone,
                address=address,
            )
            self._set(chat_id, draft)
            return draft

        if isinstance(draft, AwaitingConfirmation):
            self._set(chat_id, IDLE)
            logger.warning(f"Chat {chat_id}: text received instead of confirm/cancel, checkout reset")
            raise MalformedConfirmation()

        return None

    def resolve(self, chat_id: int, decision: str) -> Optional[PlacedOrder]:
        """
        Apply the confirm/cancel decision. Always ends in IDLE.

        Returns:
            PlacedOrder on confirm, None on cancel. The caller clears the
            owner's live cart.

        Raises:
            MalformedConfirmation: unknown decision or nothing to confirm
        """
        draft = self.current(chat_id)
        self._set(chat_id, IDLE)

        if not isinstance(draft, AwaitingConfirmation):
            logger.warning(f"Chat {chat_id}: {decision!r} received in state {draft.state.value}")
            raise MalformedConfirmation()

        if decision == CONFIRM:
            order = PlacedOrder(
                chat_id=chat_id,
                owner_id=draft.owner_id,
                items=draft.items,
                phone=draft.phone,
                address=draft.address,
            )
            logger.info(f"Chat {chat_id}: order {order.id} confirmed")
            return order

        if decision == CANCEL:
            logger.info(f"Chat {chat_id}: order cancelled at confirmation")
            return None

        logger.warning(f"Chat {chat_id}: malformed confirmation {decision!r}")
        raise MalformedConfirmation()

    def cancel(self, chat_id: int) -> bool:
        """Drop any pending checkout. Returns True if one was pending."""
        pending = self.state(chat_id) is not CheckoutState.IDLE
        self._set(chat_id, IDLE)
        if pending:
            logger.info(f"Chat {chat_id}: checkout cancelled")
        return pending

    def reset(self, chat_id: int) -> None:
        self._set(chat_id, IDLE)
