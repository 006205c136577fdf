"""
Shop handlers: button presses and checkout text input.
"""

import asyncio
import logging
from typing import Optional

from aiogram import Bot, F, Router
from aiogram.exceptions import TelegramAPIError
from aiogram.types import CallbackQuery, FSInputFile, Message

from storefront.bot.gateway import TelegramGateway
from storefront.config import Settings
from storefront.core.orders import OrderExporter, PlacedOrder
from storefront.core.session.orchestrator import SessionOrchestrator

logger = logging.getLogger(__name__)

router = Router(name="shop")


@router.callback_query(F.data)
async def handle_button(
    callback: CallbackQuery,
    bot: Bot,
    orchestrator: SessionOrchestrator,
    gateway: TelegramGateway,
    settings: Settings,
    exporter: Optional[OrderExporter],
) -> None:
    """Handle any inline button press."""
    await gateway.acknowledge(callback.id)

    message = callback.message
    chat_id = message.chat.id if message is not None else callback.from_user.id
    message_id = message.message_id if message is not None else None

    outcome = orchestrator.handle_action(chat_id, callback.from_user.id, callback.data)
    await gateway.render(chat_id, outcome.view, message_id=message_id)

    if outcome.placed_order is not None:
        await dispatch_order(bot, outcome.placed_order, settings, exporter)


@router.message(F.text & ~F.text.startswith("/"))
async def handle_text(message: Message, orchestrator: SessionOrchestrator, gateway: TelegramGateway) -> None:
    """Handle free text: only meaningful during checkout."""
    outcome = orchestrator.handle_text(message.chat.id, message.from_user.id, message.text)
    if outcome is None:
        return
    await gateway.render(message.chat.id, outcome.view)


# =============================================================================
# ORDER DISPATCH
# =============================================================================

async def dispatch_order(
    bot: Bot,
    order: PlacedOrder,
    settings: Settings,
    exporter: Optional[OrderExporter],
) -> None:
    """
    Export a placed order and notify the manager.

    Failures are logged; the customer's session is already settled.
    """
    xlsx_path = None
    if exporter is not None:
        try:
            xlsx_path = await asyncio.to_thread(exporter.export, order)
            logger.info(f"Order {order.id} exported to {xlsx_path}")
        except Exception as e:
            logger.error(f"Failed to export order {order.id}: {e}", exc_info=True)

    manager_id = settings.manager_chat_id
    if not manager_id:
        logger.debug("MANAGER_CHAT_ID not set, skipping manager notification")
        return

    try:
        await bot.send_message(
            chat_id=manager_id,
            text=f"🔔 <b>New order {order.order_number}</b>\n\n{order.format_summary()}",
        )
        if xlsx_path is not None:
            await bot.send_document(
                chat_id=manager_id,
                document=FSInputFile(xlsx_path),
                caption=f"📎 Order {order.order_number} (Excel)",
            )
        logger.info(f"Order {order.id} sent to manager {manager_id}")
    except TelegramAPIError as e:
        logger.error(f"Failed to notify manager {manager_id}: {e}", exc_info=True)
