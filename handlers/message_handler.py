"""
handlers/message_handler.py
---------------------------
Handles plain text messages and commands the bot doesn't know.
"""

from telegram.error import TelegramError

from models.context import BotContext
from models.update import IncomingMessage
from services.shuffle_service import shuffle_words
from utils.logger import get_logger

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z %Z"


def format_echo(message: IncomingMessage, text: str) -> str:
    """Prefix ``text`` with the time the original message was received."""
    return f"At {message.date.strftime(TIMESTAMP_FORMAT)}:\n{text}"


async def handle_text_message(ctx: BotContext, message: IncomingMessage) -> bool:
    """
    Handle any plain text message (not a command).
    Replies to it with the same words in shuffled order.
    """
    text = shuffle_words(message.text, ctx.rng)
    try:
        await ctx.client.send_message(
            message.chat_id,
            format_echo(message, text),
            reply_to_message_id=message.message_id,
        )
    except TelegramError as e:
        logger.error(f"Can't handle input message {message.message_id}: {e}")
        return False
    return True


async def unknown_command(ctx: BotContext, message: IncomingMessage) -> bool:
    """Tell the user the command is unknown and show the help text."""
    try:
        await ctx.client.send_message(
            message.chat_id,
            f"Command '{message.text}' is unknown.\n{ctx.help_text}",
        )
    except TelegramError as e:
        logger.error(f"Can't handle input message {message.message_id}: {e}")
        return False
    return True
