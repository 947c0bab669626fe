"""
handlers/router.py
------------------
Routes every inbound update to exactly one handler.

    message without sender -> dropped
    "/<name>" message      -> COMMANDS[name] or the unknown-command reply
    other message          -> shuffled echo
    button callback        -> handle_button

The router holds no mutable state, so concurrent webhook requests can
share one instance.
"""

import random
from typing import Dict, Optional

from telegram import Bot, Update
from telegram.ext import ContextTypes

from handlers.button_handler import handle_button
from handlers.command_handler import COMMANDS, CommandFunc
from handlers.message_handler import handle_text_message, unknown_command
from models.context import BotContext
from models.update import ButtonCallback, IncomingMessage, InboundEvent, parse_update
from services.menu_service import HELP_TEXT, build_first_menu, build_second_menu
from services.telegram_client import TelegramClient
from utils.logger import get_logger

logger = get_logger(__name__)

COMMAND_PREFIX = "/"


class UpdateRouter:
    """Classify inbound updates and dispatch them to the handlers."""

    def __init__(self, ctx: BotContext, commands: Optional[Dict[str, CommandFunc]] = None):
        self.ctx = ctx
        self.commands = dict(COMMANDS if commands is None else commands)

    async def route(self, update: Update) -> None:
        """Route a python-telegram-bot ``Update``."""
        event = parse_update(update)
        if event is None:
            logger.info(f"Received unsupported update: {update.update_id}")
            return
        await self.route_event(event)

    async def route_event(self, event: InboundEvent) -> None:
        if isinstance(event, IncomingMessage):
            await self._route_message(event)
        elif isinstance(event, ButtonCallback):
            await handle_button(self.ctx, event)

    async def handle(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Callback for ``telegram.ext.TypeHandler``."""
        await self.route(update)

    async def _route_message(self, message: IncomingMessage) -> None:
        # Answer only to real users
        if not message.has_sender():
            return

        logger.info(f"{message.sender_name} wrote {message.text}")

        if message.is_command():
            name = message.text[len(COMMAND_PREFIX):]
            handler = self.commands.get(name)
            if handler is None:
                await unknown_command(self.ctx, message)
            else:
                await handler(self.ctx, message.chat_id)
        else:
            await handle_text_message(self.ctx, message)


def create_context(bot: Bot, rng: Optional[random.Random] = None) -> BotContext:
    """Build the per-process context; ``rng`` is seeded from the OS if omitted."""
    return BotContext(
        client=TelegramClient(bot),
        rng=rng or random.Random(),
        help_text=HELP_TEXT,
        first_menu=build_first_menu(),
        second_menu=build_second_menu(),
    )


def create_router(bot: Bot, rng: Optional[random.Random] = None) -> UpdateRouter:
    return UpdateRouter(create_context(bot, rng))
