"""
handlers/button_handler.py
--------------------------
Handles inline keyboard clicks: menu page navigation and the
Tutorial button.
"""

from telegram.error import TelegramError

from handlers.command_handler import help_command
from models.context import BotContext
from models.menu import MenuScreen
from models.update import ButtonCallback
from services.menu_service import (
    BACK_BUTTON,
    MENU_PARSE_MODE,
    NEXT_BUTTON,
    TUTORIAL_BUTTON,
)
from utils.logger import get_logger

logger = get_logger(__name__)


async def _show_screen(ctx: BotContext, callback: ButtonCallback, menu: MenuScreen) -> None:
    """Edit the message carrying the keyboard in place."""
    if callback.chat_id is None or callback.message_id is None:
        logger.warning(f"Callback {callback.callback_id} has no originating message to edit.")
        return
    try:
        await ctx.client.edit_message(
            callback.chat_id,
            callback.message_id,
            menu.text,
            reply_markup=menu.markup,
            parse_mode=MENU_PARSE_MODE,
        )
    except TelegramError as e:
        logger.error(f"Can't edit menu message {callback.message_id}: {e}")


async def handle_button(ctx: BotContext, callback: ButtonCallback) -> None:
    """
    Handle a button click.

    The callback is always acknowledged first, exactly once, so the
    client's loading indicator is cleared whatever happens next.
    """
    try:
        await ctx.client.acknowledge_callback(callback.callback_id)
    except TelegramError as e:
        logger.error(f"Can't acknowledge callback {callback.callback_id}: {e}")

    if callback.data == TUTORIAL_BUTTON:
        if callback.chat_id is None:
            logger.warning(f"Callback {callback.callback_id} has no chat to send help to.")
            return
        await help_command(ctx, callback.chat_id)
    elif callback.data == NEXT_BUTTON:
        await _show_screen(ctx, callback, ctx.second_menu)
    elif callback.data == BACK_BUTTON:
        await _show_screen(ctx, callback, ctx.first_menu)
    else:
        logger.debug(f"Ignoring callback with unknown data {callback.data!r}")
