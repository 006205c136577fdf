from decimal import Decimal

import pytest

from storefront.core.errors import EmptyCart, InvalidAddress, InvalidPhone, MalformedConfirmation
from storefront.core.orders import (
    AwaitingAddress,
    AwaitingConfirmation,
    AwaitingPhone,
    CheckoutState,
    render_summary,
)

CHAT_ID = 1001
USER_ID = 42


@pytest.fixture
def lines(carts):
    carts.add(USER_ID, "p1")
    carts.add(USER_ID, "p1")
    carts.add(USER_ID, "p3")
    return carts.snapshot(USER_ID)


def _to_confirmation(dialog, lines):
    dialog.begin(CHAT_ID, USER_ID, lines)
    dialog.submit_text(CHAT_ID, "+12345678901")
    return dialog.submit_text(CHAT_ID, "123 Main St")


def test_initial_state_is_idle(dialog):
    assert dialog.state(CHAT_ID) is CheckoutState.IDLE


def test_begin_with_empty_cart_stays_idle(dialog):
    with pytest.raises(EmptyCart):
        dialog.begin(CHAT_ID, USER_ID, [])
    assert dialog.state(CHAT_ID) is CheckoutState.IDLE


def test_begin_freezes_cart_snapshot(dialog, carts, lines):
    draft = dialog.begin(CHAT_ID, USER_ID, carts.snapshot(USER_ID))
    carts.add(USER_ID, "p2")
    carts.remove(USER_ID, "p1")

    assert isinstance(draft, AwaitingPhone)
    assert [(line.product.id, line.quantity) for line in dialog.current(CHAT_ID).items] == [("p1", 2), ("p3", 1)]


def test_begin_twice_is_rejected(dialog, lines):
    dialog.begin(CHAT_ID, USER_ID, lines)
    with pytest.raises(RuntimeError):
        dialog.begin(CHAT_ID, USER_ID, lines)


def test_invalid_phone_keeps_state(dialog, lines):
    dialog.begin(CHAT_ID, USER_ID, lines)
    before = dialog.current(CHAT_ID)

    with pytest.raises(InvalidPhone):
        dialog.submit_text(CHAT_ID, "abc")

    assert dialog.state(CHAT_ID) is CheckoutState.AWAITING_PHONE
    assert dialog.current(CHAT_ID) == before


def test_valid_phone_moves_to_address(dialog, lines):
    dialog.begin(CHAT_ID, USER_ID, lines)
    draft = dialog.submit_text(CHAT_ID, "+12345678901")

    assert isinstance(draft, AwaitingAddress)
    assert draft.phone == "+12345678901"
    assert dialog.state(CHAT_ID) is CheckoutState.AWAITING_ADDRESS


def test_short_address_keeps_state(dialog, lines):
    dialog.begin(CHAT_ID, USER_ID, lines)
    dialog.submit_text(CHAT_ID, "+12345678901")

    with pytest.raises(InvalidAddress):
        dialog.submit_text(CHAT_ID, "abc")

    assert dialog.state(CHAT_ID) is CheckoutState.AWAITING_ADDRESS


def test_valid_address_renders_summary(dialog, lines):
    draft = _to_confirmation(dialog, lines)

    assert isinstance(draft, AwaitingConfirmation)
    summary = render_summary(draft)
    assert "- Dummy Product A (x2) - $20.00" in summary
    assert "- Dummy Product C (x1) - $5.00" in summary
    assert "Total: $25.00" in summary
    assert "Phone Number: +12345678901" in summary
    assert "Shipping Address: 123 Main St" in summary


def test_text_while_idle_is_ignored(dialog):
    assert dialog.submit_text(CHAT_ID, "hello") is None
    assert dialog.state(CHAT_ID) is CheckoutState.IDLE


def test_text_while_awaiting_confirmation_resets_to_idle(dialog, lines):
    _to_confirmation(dialog, lines)

    with pytest.raises(MalformedConfirmation):
        dialog.submit_text(CHAT_ID, "maybe")

    assert dialog.state(CHAT_ID) is CheckoutState.IDLE


def test_confirm_returns_order_and_goes_idle(dialog, lines):
    _to_confirmation(dialog, lines)

    order = dialog.resolve(CHAT_ID, "confirm")

    assert order.total_price == Decimal("25.00")
    assert order.owner_id == USER_ID
    assert order.chat_id == CHAT_ID
    assert order.address == "123 Main St"
    assert dialog.state(CHAT_ID) is CheckoutState.IDLE


def test_cancel_decision_goes_idle(dialog, lines):
    _to_confirmation(dialog, lines)
    assert dialog.resolve(CHAT_ID, "cancel") is None
    assert dialog.state(CHAT_ID) is CheckoutState.IDLE


def test_malformed_confirmation_resets(dialog, lines):
    _to_confirmation(dialog, lines)
    with pytest.raises(MalformedConfirmation):
        dialog.resolve(CHAT_ID, "maybe")
    assert dialog.state(CHAT_ID) is CheckoutState.IDLE


def test_confirm_outside_confirmation_state(dialog, lines):
    dialog.begin(CHAT_ID, USER_ID, lines)
    with pytest.raises(MalformedConfirmation):
        dialog.resolve(CHAT_ID, "confirm")
    assert dialog.state(CHAT_ID) is CheckoutState.IDLE


@pytest.mark.parametrize("steps", [0, 1, 2])
def test_cancel_from_any_pending_state(dialog, carts, lines, steps):
    dialog.begin(CHAT_ID, USER_ID, lines)
    inputs = ["+12345678901", "123 Main St"]
    for text in inputs[:steps]:
        dialog.submit_text(CHAT_ID, text)
    cart_before = carts.snapshot(USER_ID)

    assert dialog.cancel(CHAT_ID) is True

    assert dialog.state(CHAT_ID) is CheckoutState.IDLE
    assert carts.snapshot(USER_ID) == cart_before


def test_cancel_when_idle(dialog):
    assert dialog.cancel(CHAT_ID) is False


def test_dialogs_are_per_chat(dialog, lines):
    dialog.begin(CHAT_ID, USER_ID, lines)
    assert dialog.state(CHAT_ID + 1) is CheckoutState.IDLE
