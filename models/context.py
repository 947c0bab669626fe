"""
models/context.py
-----------------
Per-process bot context, created once at startup and handed to the
router. Everything in it is read-only after construction.
"""

import random
from dataclasses import dataclass

from models.menu import MenuScreen
from services.telegram_client import TelegramClient


@dataclass
class BotContext:
    """
    Collaborators and static content shared by all handlers.

    Attributes:
        client: Outbound Telegram calls (see services.telegram_client).
        rng: Random source used for word shuffling.
        help_text: Static help message.
        first_menu: Screen sent by /menu and restored by the Back button.
        second_menu: Screen shown by the Next button.
    """
    client: TelegramClient
    rng: random.Random
    help_text: str
    first_menu: MenuScreen
    second_menu: MenuScreen
