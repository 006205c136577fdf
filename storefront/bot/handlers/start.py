"""
Command handlers: /start, /cancel, /help.
"""

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from storefront.bot.gateway import TelegramGateway
from storefront.core.session.orchestrator import SessionOrchestrator

router = Router(name="start")


@router.message(CommandStart())
async def handle_start(message: Message, orchestrator: SessionOrchestrator, gateway: TelegramGateway) -> None:
    """Handle /start command."""
    outcome = orchestrator.start(message.chat.id, message.from_user.id)
    await gateway.render(message.chat.id, outcome.view)


@router.message(Command("cancel"))
async def handle_cancel(message: Message, orchestrator: SessionOrchestrator, gateway: TelegramGateway) -> None:
    """Handle /cancel command. Works in any checkout step."""
    outcome = orchestrator.cancel(message.chat.id, message.from_user.id)
    await gateway.render(message.chat.id, outcome.view)


@router.message(Command("help"))
async def handle_help(message: Message, orchestrator: SessionOrchestrator, gateway: TelegramGateway) -> None:
    """Handle /help command."""
    outcome = orchestrator.help(message.chat.id, message.from_user.id)
    await gateway.render(message.chat.id, outcome.view)
