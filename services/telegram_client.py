"""
services/telegram_client.py
---------------------------
Outbound calls to the Telegram Bot API.

Wraps ``telegram.Bot`` behind the three operations the bot needs.
Failures are not handled here: every method lets
``telegram.error.TelegramError`` propagate to the caller.
"""

from typing import Optional

from telegram import Bot, InlineKeyboardMarkup, Message
from telegram.constants import ParseMode

from utils.logger import get_logger

logger = get_logger(__name__)


class TelegramClient:
    """Send, edit and acknowledge through a python-telegram-bot ``Bot``."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_message(
        self,
        chat_id: int,
        text: str,
        reply_to_message_id: Optional[int] = None,
        parse_mode: Optional[str] = None,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Message:
        """
        Send a text message.

        Args:
            chat_id: Target chat.
            text: Message body.
            reply_to_message_id: Message to quote as the reply target.
            parse_mode: Rich-text mode, e.g. ``ParseMode.HTML``.
            reply_markup: Inline keyboard attached to the message.

        Returns:
            The sent message.
        """
        logger.debug(f"send_message chat_id={chat_id} reply_to={reply_to_message_id}")
        return await self.bot.send_message(
            chat_id=chat_id,
            text=text,
            reply_to_message_id=reply_to_message_id,
            parse_mode=parse_mode,
            reply_markup=reply_markup,
        )

    async def edit_message(
        self,
        chat_id: int,
        message_id: int,
        text: str,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
        parse_mode: Optional[str] = ParseMode.HTML,
    ) -> None:
        """Replace the text and keyboard of a message sent by the bot."""
        logger.debug(f"edit_message chat_id={chat_id} message_id={message_id}")
        await self.bot.edit_message_text(
            text=text,
            chat_id=chat_id,
            message_id=message_id,
            parse_mode=parse_mode,
            reply_markup=reply_markup,
        )

    async def acknowledge_callback(self, callback_id: str) -> None:
        """Answer a callback query so the client stops its loading indicator."""
        await self.bot.answer_callback_query(callback_query_id=callback_id)
