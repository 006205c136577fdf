"""
Telegram bot initialization and configuration.
"""

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from storefront.bot.gateway import TelegramGateway
from storefront.bot.handlers import register_handlers
from storefront.config import Settings
from storefront.core.catalog import Catalog, default_catalog, load_catalog
from storefront.core.orders import OrderExporter
from storefront.core.session.orchestrator import SessionOrchestrator


def create_bot(token: str) -> Bot:
    """Create configured Telegram bot instance."""
    return Bot(
        token=token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )


def create_catalog(settings: Settings) -> Catalog:
    """Load configured catalog or the bundled demo catalog."""
    if settings.catalog_path:
        return load_catalog(settings.catalog_path, images_dir=settings.images_path)
    return default_catalog(images_dir=settings.images_path)


def create_dispatcher(bot: Bot, settings: Settings, catalog: Catalog) -> Dispatcher:
    """
    Create dispatcher with handlers and shared services.

    The orchestrator, gateway, exporter and settings are passed to handlers through
    dispatcher workflow data.
    """
    dp = Dispatcher()
    dp["settings"] = settings
    dp["orchestrator"] = SessionOrchestrator(catalog)
    dp["gateway"] = TelegramGateway(bot)
    dp["exporter"] = OrderExporter(settings.orders_path) if settings.export_orders else None
    register_handlers(dp)
    return dp
