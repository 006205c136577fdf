"""
Inline keyboards for storefront views.
"""

from typing import Optional

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from storefront.core.session.views import Keyboard


def build_inline_keyboard(keyboard: Keyboard) -> Optional[InlineKeyboardMarkup]:
    """Convert view keyboard rows into Telegram inline markup."""
    if not keyboard:
        return None

    builder = InlineKeyboardBuilder()
    for row in keyboard:
        builder.row(
            *(InlineKeyboardButton(text=button.text, callback_data=button.token) for button in row)
        )
    return builder.as_markup()
