"""
handlers/command_handler.py
---------------------------
Handles /help and /menu commands.
Each command sends exactly one message and reports whether it went out.
"""

from typing import Awaitable, Callable, Dict

from telegram.error import TelegramError

from models.context import BotContext
from services.menu_service import MENU_PARSE_MODE
from utils.logger import get_logger

logger = get_logger(__name__)

CommandFunc = Callable[[BotContext, int], Awaitable[bool]]


async def help_command(ctx: BotContext, chat_id: int) -> bool:
    """Handle /help command - send the static help text."""
    try:
        await ctx.client.send_message(chat_id, ctx.help_text)
    except TelegramError as e:
        logger.error(f"Can't send help to chat {chat_id}: {e}")
        return False
    return True


async def menu_command(ctx: BotContext, chat_id: int) -> bool:
    """Handle /menu command - send the first menu screen with its keyboard."""
    menu = ctx.first_menu
    try:
        await ctx.client.send_message(
            chat_id,
            menu.text,
            parse_mode=MENU_PARSE_MODE,
            reply_markup=menu.markup,
        )
    except TelegramError as e:
        logger.error(f"Can't send menu to chat {chat_id}: {e}")
        return False
    return True


# Keys are command names without the leading slash, matched exactly
COMMANDS: Dict[str, CommandFunc] = {
    "help": help_command,
    "menu": menu_command,
}
