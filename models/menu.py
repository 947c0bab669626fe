"""
models/menu.py
--------------
Domain model for a single inline menu screen.
"""

from dataclasses import dataclass

from telegram import InlineKeyboardMarkup


@dataclass(frozen=True)
class MenuScreen:
    """
    A menu page: HTML text plus the inline keyboard shown under it.

    Menu navigation is stateless; the screen to show next is decided by
    the ``callback_data`` of the clicked button only.
    """
    text: str
    markup: InlineKeyboardMarkup
