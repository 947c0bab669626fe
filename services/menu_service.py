"""
services/menu_service.py
------------------------
Static content: the help text and the two inline menu screens.

Button ``callback_data`` values double as navigation markers: the
router decides what to show next from the clicked marker alone.
"""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from telegram.constants import ParseMode

from models.menu import MenuScreen

HELP_TEXT = """Hi. Bot supports following commands:
/help - prints this help.
/menu - shows menu.
Also it rephrases any string you sent to it.
"""

MENU_PARSE_MODE = ParseMode.HTML

# Button texts; also used as callback data
NEXT_BUTTON = "Next"
BACK_BUTTON = "Back"
TUTORIAL_BUTTON = "Tutorial"
SITE_BUTTON = "Site"
SITE_URL = "https://core.telegram.org/bots/api"

FIRST_MENU_TEXT = "<b>Menu 1</b>\n\nA beautiful menu with a shiny inline button."
SECOND_MENU_TEXT = "<b>Menu 2</b>\n\nA better menu with even more shiny inline buttons."


def build_first_menu() -> MenuScreen:
    markup = InlineKeyboardMarkup(
        [[InlineKeyboardButton(NEXT_BUTTON, callback_data=NEXT_BUTTON)]]
    )
    return MenuScreen(text=FIRST_MENU_TEXT, markup=markup)


def build_second_menu() -> MenuScreen:
    markup = InlineKeyboardMarkup(
        [
            [InlineKeyboardButton(BACK_BUTTON, callback_data=BACK_BUTTON)],
            [
                InlineKeyboardButton(SITE_BUTTON, url=SITE_URL),
                InlineKeyboardButton(TUTORIAL_BUTTON, callback_data=TUTORIAL_BUTTON),
            ],
        ]
    )
    return MenuScreen(text=SECOND_MENU_TEXT, markup=markup)
