"""
Storefront Telegram Bot - Main entry point.
"""

import asyncio
import logging
import sys

from storefront.bot.bot import create_bot, create_catalog, create_dispatcher
from storefront.config import settings
from storefront.core.errors import MissingCredential


# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def on_startup() -> None:
    logger.info("Bot started...")


async def on_shutdown() -> None:
    logger.info("Shutting down storefront bot...")


async def main(token: str) -> None:
    """Main function to run the bot."""
    catalog = create_catalog(settings)
    bot = create_bot(token)
    dp = create_dispatcher(bot, settings, catalog)

    dp.startup.register(on_startup)
    dp.shutdown.register(on_shutdown)

    logger.info(f"Bot is starting with {catalog.count()} products...")
    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        await bot.session.close()


def run() -> None:
    """Console entry point."""
    try:
        token = settings.require_token()
    except MissingCredential as e:
        logger.critical(f"{e.message} Set BOT_TOKEN in .env")
        sys.exit(1)

    asyncio.run(main(token))


if __name__ == "__main__":
    run()
