"""
Bot handlers registration.
"""

from aiogram import Dispatcher

from storefront.bot.handlers.errors import handle_error
from storefront.bot.handlers.shop import router as shop_router
from storefront.bot.handlers.start import router as start_router


def register_handlers(dp: Dispatcher) -> None:
    """Register all handlers to dispatcher."""
    # Order matters! Commands first, so the shop text handler never sees them
    dp.include_router(start_router)
    dp.include_router(shop_router)
    dp.errors.register(handle_error)
