"""
Messaging gateway: renders storefront views through the Telegram Bot API.
"""

import logging
from pathlib import Path
from typing import Optional

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError, TelegramBadRequest
from aiogram.types import FSInputFile, InlineKeyboardMarkup

from storefront.bot.keyboards.inline import build_inline_keyboard
from storefront.core.errors import ImageUnavailable
from storefront.core.session.views import View

logger = logging.getLogger(__name__)


class TelegramGateway:
    """Thin adapter over aiogram Bot."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_text(
        self,
        chat_id: int,
        text: str,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> None:
        await self.bot.send_message(chat_id=chat_id, text=text, reply_markup=reply_markup)

    async def send_image(
        self,
        chat_id: int,
        image: Path,
        caption: str,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> None:
        """
        Send photo with caption.

        Raises:
            ImageUnavailable: file missing or rejected by Telegram
        """
        try:
            await self.bot.send_photo(
                chat_id=chat_id,
                photo=FSInputFile(image),
                caption=caption,
                reply_markup=reply_markup,
            )
        except (TelegramBadRequest, OSError) as e:
            logger.warning(f"Failed to send image {image} to chat {chat_id}: {e}")
            raise ImageUnavailable(Path(image).stem) from e

    async def edit_text(
        self,
        chat_id: int,
        message_id: int,
        text: str,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> None:
        await self.bot.edit_message_text(
            text=text,
            chat_id=chat_id,
            message_id=message_id,
            reply_markup=reply_markup,
        )

    async def acknowledge(self, callback_query_id: str) -> None:
        """Answer callback query so the client stops the loading spinner."""
        try:
            await self.bot.answer_callback_query(callback_query_id=callback_query_id)
        except TelegramAPIError as e:
            # Query may be too old to answer; the update is still handled
            logger.debug(f"Failed to answer callback {callback_query_id}: {e}")

    async def render(self, chat_id: int, view: View, message_id: Optional[int] = None) -> None:
        """
        Deliver a view.

        Photos that cannot be delivered degrade to a text notice with the
        same keyboard. Edits that Telegram rejects fall back to a new message.
        """
        markup = build_inline_keyboard(view.keyboard)

        if view.image is not None:
            try:
                await self.send_image(chat_id, view.image, view.text, markup)
                return
            except ImageUnavailable as e:
                await self.send_text(chat_id, view.fallback or e.message, markup)
                return

        if view.replace and message_id is not None:
            try:
                await self.edit_text(chat_id, message_id, view.text, markup)
                return
            except TelegramBadRequest as e:
                logger.info(f"Edit of message {message_id} in chat {chat_id} failed, sending new: {e}")

        await self.send_text(chat_id, view.text, markup)
