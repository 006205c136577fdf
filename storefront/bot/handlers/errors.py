"""
Fallback for unexpected errors while handling an update.

Only the chat whose update failed gets a reply; other chats keep working.
"""

import logging
from typing import Optional

from aiogram.exceptions import TelegramAPIError
from aiogram.types import ErrorEvent

from storefront.bot.gateway import TelegramGateway
from storefront.core.session.views import View, get_main_menu_keyboard

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "😔 Something went wrong. Please try again or type /start."


def _chat_id(event: ErrorEvent) -> Optional[int]:
    update = event.update
    if update.message is not None:
        return update.message.chat.id
    if update.callback_query is not None:
        query = update.callback_query
        if query.message is not None:
            return query.message.chat.id
        return query.from_user.id
    return None


async def handle_error(event: ErrorEvent, gateway: TelegramGateway) -> bool:
    """Log the failure and tell the affected chat."""
    logger.error(
        f"Failed to handle update {event.update.update_id}: {event.exception}",
        exc_info=event.exception,
    )

    chat_id = _chat_id(event)
    if chat_id is None:
        return True

    try:
        await gateway.render(chat_id, View(ERROR_MESSAGE, get_main_menu_keyboard()))
    except TelegramAPIError as e:
        logger.error(f"Failed to notify chat {chat_id} about error: {e}")
    return True
