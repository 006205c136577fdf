from unittest.mock import AsyncMock, Mock

import pytest

from storefront.bot.handlers.shop import dispatch_order
from storefront.config import Settings
from storefront.core.orders import OrderExporter, PlacedOrder

CHAT_ID = 1001
USER_ID = 42


@pytest.fixture
def order(carts):
    carts.add(USER_ID, "p1")
    return PlacedOrder(
        chat_id=CHAT_ID,
        owner_id=USER_ID,
        items=tuple(carts.snapshot(USER_ID)),
        phone="+12345678901",
        address="123 Main St",
    )


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.delenv("MANAGER_CHAT_ID", raising=False)
    return Settings(_env_file=None)


async def test_exports_and_notifies_manager(order, settings, tmp_path):
    settings.manager_chat_id = 777
    bot = AsyncMock()

    await dispatch_order(bot, order, settings, OrderExporter(tmp_path))

    assert len(list(tmp_path.glob("order_*.xlsx"))) == 1
    assert bot.send_message.await_args.kwargs["chat_id"] == 777
    assert order.order_number in bot.send_message.await_args.kwargs["text"]
    bot.send_document.assert_awaited_once()


async def test_without_manager_only_exports(order, settings, tmp_path):
    bot = AsyncMock()

    await dispatch_order(bot, order, settings, OrderExporter(tmp_path))

    assert len(list(tmp_path.glob("order_*.xlsx"))) == 1
    bot.send_message.assert_not_awaited()


async def test_export_disabled_sends_text_only(order, settings):
    settings.manager_chat_id = 777
    bot = AsyncMock()

    await dispatch_order(bot, order, settings, None)

    bot.send_message.assert_awaited_once()
    bot.send_document.assert_not_awaited()


async def test_export_failure_still_notifies_manager(order, settings):
    settings.manager_chat_id = 777
    bot = AsyncMock()
    exporter = Mock(spec=OrderExporter)
    exporter.export.side_effect = ValueError("bad cell value")

    await dispatch_order(bot, order, settings, exporter)

    exporter.export.assert_called_once_with(order)
    bot.send_message.assert_awaited_once()
    bot.send_document.assert_not_awaited()
