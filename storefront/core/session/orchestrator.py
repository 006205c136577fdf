"""
Session orchestrator.

Routes inbound events (commands, button presses, free text) to the cart,
browse cursor and checkout dialog, and returns exactly one View per handled
event. Cart and cursor are keyed by the acting user, the dialog by the chat.
"""

import logging
from html import escape
from typing import Callable, Optional

from storefront.core.cart import BrowseCursor, CartStore
from storefront.core.catalog import Catalog, format_price
from storefront.core.errors import (
    EmptyCart,
    ImageUnavailable,
    InvalidAddress,
    InvalidPhone,
    MalformedConfirmation,
    NotInCart,
    StorefrontError,
    UnknownProduct,
)
from storefront.core.orders import (
    CANCEL,
    CONFIRM,
    AwaitingAddress,
    AwaitingConfirmation,
    CheckoutDialog,
    CheckoutState,
    render_summary,
)
from storefront.core.session.actions import Action, ActionKind, parse_action
from storefront.core.session.views import (
    Outcome,
    View,
    get_after_cart_change_keyboard,
    get_back_to_menu_keyboard,
    get_cart_keyboard,
    get_checkout_input_keyboard,
    get_confirmation_keyboard,
    get_empty_cart_keyboard,
    get_main_menu_keyboard,
    get_not_in_cart_keyboard,
    get_product_keyboard,
)

logger = logging.getLogger(__name__)


WELCOME_MESSAGE = "Welcome to the Dummy Store! Please choose an option:"

MAIN_MENU_MESSAGE = "Welcome back to the Main Menu! Please choose an option:"

HELP_MESSAGE = """🤖 <b>How to shop:</b>

• «View Products» — browse the catalog and add items to your cart
• «View Cart» — review or remove items
• «Checkout» — enter phone number and shipping address, then confirm

<b>Commands:</b>
/start — main menu
/cancel — cancel the current checkout
/help — this help"""

CANCELLED_MESSAGE = "Checkout process cancelled. Use /start to return to the main menu."

PHONE_PROMPT = "Please provide your phone number for the order."
ADDRESS_PROMPT = "Please provide your shipping address."


class SessionOrchestrator:
    """Entry point of the storefront core for all inbound events."""

    def __init__(
        self,
        catalog: Catalog,
        carts: Optional[CartStore] = None,
        cursor: Optional[BrowseCursor] = None,
        dialog: Optional[CheckoutDialog] = None,
    ):
        self.catalog = catalog
        self.carts = carts or CartStore(catalog)
        self.cursor = cursor or BrowseCursor(catalog)
        self.dialog = dialog or CheckoutDialog()

        self._action_handlers: dict[ActionKind, Callable[[int, int, Action], Outcome]] = {
            ActionKind.BROWSE_START: self._browse_start,
            ActionKind.BROWSE_NEXT: self._browse_next,
            ActionKind.BROWSE_PREV: self._browse_prev,
            ActionKind.ADD_TO_CART: self._add_to_cart,
            ActionKind.VIEW_CART: self._view_cart,
            ActionKind.REMOVE_FROM_CART: self._remove_from_cart,
            ActionKind.CHECKOUT: self._checkout,
            ActionKind.CONFIRM_ORDER: self._confirm_order,
            ActionKind.CANCEL_ORDER: self._cancel_order,
            ActionKind.MAIN_MENU: self._main_menu,
        }

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def start(self, chat_id: int, user_id: int) -> Outcome:
        """/start: reset the chat's checkout and show the main menu."""
        self.dialog.reset(chat_id)
        return Outcome(View(WELCOME_MESSAGE, get_main_menu_keyboard()))

    def cancel(self, chat_id: int, user_id: int) -> Outcome:
        """/cancel: drop any pending checkout, cart untouched."""
        self.dialog.cancel(chat_id)
        return Outcome(View(CANCELLED_MESSAGE, get_back_to_menu_keyboard()))

    def help(self, chat_id: int, user_id: int) -> Outcome:
        return Outcome(View(HELP_MESSAGE, get_main_menu_keyboard()))

    def handle_command(self, chat_id: int, user_id: int, command: str) -> Outcome:
        handlers = {"start": self.start, "cancel": self.cancel, "help": self.help}
        handler = handlers.get(command.lstrip("/").lower())
        if handler is None:
            logger.warning(f"Chat {chat_id}: unknown command {command!r}")
            return self._main_menu(chat_id, user_id, Action.of(ActionKind.MAIN_MENU))
        return handler(chat_id, user_id)

    # =========================================================================
    # BUTTONS
    # =========================================================================

    def handle_action(self, chat_id: int, user_id: int, token: str | Action) -> Outcome:
        """Handle a button press identified by its action token."""
        action = token if isinstance(token, Action) else parse_action(token)
        handler = self._action_handlers.get(action.kind)

        if handler is None:
            logger.warning(f"Chat {chat_id}: unknown action token {action.raw!r}")
            return self._main_menu(chat_id, user_id, action)

        try:
            return handler(chat_id, user_id, action)
        except StorefrontError as e:
            logger.warning(f"Chat {chat_id}: {type(e).__name__} on {action.kind.name}")
            return Outcome(View(e.message, get_main_menu_keyboard()))

    def _main_menu(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        return Outcome(View(MAIN_MENU_MESSAGE, get_main_menu_keyboard()))

    # --- browsing -------------------------------------------------------------

    def _browse_start(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        return self._product_view(self.cursor.start(user_id))

    def _browse_next(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        return self._product_view(self.cursor.next(user_id))

    def _browse_prev(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        return self._product_view(self.cursor.prev(user_id))

    def _product_view(self, index: int) -> Outcome:
        count = self.catalog.count()
        if count == 0:
            return Outcome(View("No products available yet.", get_back_to_menu_keyboard()))

        product = self.catalog.product_at(index)
        keyboard = get_product_keyboard(index, product.id, product.name)

        caption = (
            f"{escape(product.name)} - {product.display_price}\n"
            f"{escape(product.description)}\n\n"
            f"Product {index + 1}/{count}"
        )
        try:
            image = self.catalog.image_for(product)
        except ImageUnavailable as e:
            return Outcome(View(f"{e.message}\n\n{caption}", keyboard))

        fallback = f"{ImageUnavailable(product.name).message}\n\n{caption}"
        return Outcome(View(caption, keyboard, image=image, fallback=fallback))

    # --- cart -----------------------------------------------------------------

    def _add_to_cart(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        try:
            count = self.carts.add(user_id, action.product_id)
        except UnknownProduct as e:
            logger.warning(f"User {user_id}: add of unknown product {e.product_id!r}")
            return Outcome(View(e.message, get_main_menu_keyboard()))

        product = self.catalog.get(action.product_id)
        return Outcome(View(
            f"{escape(product.name)} added to your cart!\n\nCurrent cart: {count} items.",
            get_after_cart_change_keyboard(),
        ))

    def _view_cart(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        lines = self.carts.snapshot(user_id)
        if not lines:
            return Outcome(View("Your cart is empty!", get_empty_cart_keyboard()))

        text = "Your Cart:\n\n"
        text += "\n".join(line.format_line() for line in lines)
        text += f"\n\nTotal: {format_price(self.carts.total(user_id))}"
        return Outcome(View(text, get_cart_keyboard(lines)))

    def _remove_from_cart(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        try:
            product = self.carts.remove(user_id, action.product_id)
        except NotInCart as e:
            return Outcome(View(e.message, get_not_in_cart_keyboard()))

        return Outcome(View(
            f"{escape(product.name)} removed from your cart.",
            get_after_cart_change_keyboard(),
        ))

    # --- checkout -------------------------------------------------------------

    def _checkout(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        if self.dialog.state(chat_id) is not CheckoutState.IDLE:
            logger.info(f"Chat {chat_id}: checkout restarted")
            self.dialog.cancel(chat_id)

        try:
            self.dialog.begin(chat_id, user_id, self.carts.snapshot(user_id))
        except EmptyCart as e:
            return Outcome(View(e.message, get_empty_cart_keyboard()))

        return Outcome(View(PHONE_PROMPT, get_checkout_input_keyboard()))

    def _confirm_order(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        try:
            order = self.dialog.resolve(chat_id, CONFIRM)
        except MalformedConfirmation as e:
            return Outcome(View(e.message, get_back_to_menu_keyboard(), replace=True))

        self.carts.clear(order.owner_id)
        return Outcome(
            View(
                "Thank you for your order! Your order has been placed successfully.\n\n"
                f"Order number: {order.order_number}",
                get_back_to_menu_keyboard(),
                replace=True,
            ),
            placed_order=order,
        )

    def _cancel_order(self, chat_id: int, user_id: int, action: Action) -> Outcome:
        if self.dialog.state(chat_id) is CheckoutState.AWAITING_CONFIRMATION:
            self.dialog.resolve(chat_id, CANCEL)
        else:
            self.dialog.cancel(chat_id)
        return Outcome(View("Your order has been cancelled.", get_back_to_menu_keyboard(), replace=True))

    # =========================================================================
    # FREE TEXT
    # =========================================================================

    def handle_text(self, chat_id: int, user_id: int, text: str) -> Optional[Outcome]:
        """
        Feed free text to the checkout dialog.

        Returns:
            Outcome, or None when no checkout is pending (text is ignored)
        """
        try:
            draft = self.dialog.submit_text(chat_id, text)
        except (InvalidPhone, InvalidAddress) as e:
            return Outcome(View(e.message, get_checkout_input_keyboard()))
        except MalformedConfirmation as e:
            return Outcome(View(e.message, get_main_menu_keyboard()))

        if isinstance(draft, AwaitingAddress):
            return Outcome(View(ADDRESS_PROMPT, get_checkout_input_keyboard()))

        if isinstance(draft, AwaitingConfirmation):
            return Outcome(View(render_summary(draft), get_confirmation_keyboard()))

        return None
