"""
models/update.py
----------------
Domain model for inbound Telegram events.

An inbound update is either a text message or an inline-button
callback. ``parse_update`` maps python-telegram-bot's ``Update`` onto
one of the two, or ``None`` for any other kind of update.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from telegram import Update


@dataclass
class IncomingMessage:
    """
    A message written to the bot.

    Attributes:
        message_id: Telegram message ID, used as reply target.
        chat_id: Chat the message was sent in.
        text: Raw message text ('' for messages without text).
        date: When Telegram received the message.
        sender_id: Telegram user ID, None for anonymous/system sends.
        sender_name: First name of the sender, None for anonymous/system sends.
    """
    message_id: int
    chat_id: int
    text: str
    date: datetime
    sender_id: Optional[int] = None
    sender_name: Optional[str] = None

    def has_sender(self) -> bool:
        return self.sender_id is not None

    def is_command(self) -> bool:
        return self.text.startswith("/")


@dataclass
class ButtonCallback:
    """
    A click on an inline keyboard button.

    Attributes:
        callback_id: ID that must be acknowledged back to Telegram.
        chat_id: Chat of the message carrying the keyboard.
        message_id: Message carrying the keyboard (None for inline-mode messages).
        data: The ``callback_data`` string the bot put on the button.
    """
    callback_id: str
    chat_id: Optional[int]
    message_id: Optional[int]
    data: str = ""


InboundEvent = Union[IncomingMessage, ButtonCallback]


def parse_update(update: Update) -> Optional[InboundEvent]:
    """Classify a Telegram update as a message, a button callback, or neither."""
    message = update.message
    if message is not None:
        user = message.from_user
        return IncomingMessage(
            message_id=message.message_id,
            chat_id=message.chat.id,
            text=message.text or "",
            date=message.date,
            sender_id=user.id if user else None,
            sender_name=user.first_name if user else None,
        )

    query = update.callback_query
    if query is not None:
        origin = query.message
        return ButtonCallback(
            callback_id=query.id,
            chat_id=origin.chat.id if origin else None,
            message_id=origin.message_id if origin else None,
            data=query.data or "",
        )

    return None
