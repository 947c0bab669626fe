"""
main.py
-------
Entry point for the bot in long-polling mode.

Responsibilities:
    - Load settings and configure logging.
    - Build the Telegram application with the update router.
    - Poll for updates until Enter is pressed, then stop cleanly.
"""

import asyncio
import sys
import threading
from typing import Awaitable, Callable

from telegram import Update
from telegram.ext import Application, ContextTypes, TypeHandler

from config import ConfigError, Settings, load_settings
from handlers.router import create_router
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

ALLOWED_UPDATES = [Update.MESSAGE, Update.CALLBACK_QUERY]
POLL_TIMEOUT_SECONDS = 30


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors raised while processing an update without stopping the bot."""
    logger.error(f"Error while handling update {update}: {context.error}", exc_info=context.error)


def build_application(settings: Settings) -> Application:
    """
    Create the Telegram application and register the router.

    Updates are processed one at a time, in arrival order.
    """
    application = (
        Application.builder()
        .token(settings.telegram_token)
        .concurrent_updates(False)
        .build()
    )
    router = create_router(application.bot)
    application.add_handler(TypeHandler(Update, router.handle))
    application.add_error_handler(error_handler)
    logger.info("Initialized Telegram application.")
    return application


async def wait_for_enter() -> None:
    """
    Wait until a line is read from stdin, without blocking the event loop.

    The read happens on a daemon thread so an interrupted wait does not
    keep the process alive until Enter is pressed.
    """
    loop = asyncio.get_running_loop()
    entered = loop.create_future()

    def _read_line() -> None:
        sys.stdin.readline()
        loop.call_soon_threadsafe(lambda: entered.done() or entered.set_result(None))

    threading.Thread(target=_read_line, name="stdin-reader", daemon=True).start()
    await entered


async def run_polling(application: Application, wait_for_stop: Callable[[], Awaitable[None]]) -> None:
    """
    Poll for updates until ``wait_for_stop`` returns.

    The updater is stopped first so no new updates are fetched, then the
    application is stopped, which lets the update in flight finish. Both
    happen even when the wait is interrupted.
    """
    async with application:
        await application.start()
        try:
            await application.updater.start_polling(
                timeout=POLL_TIMEOUT_SECONDS,
                allowed_updates=ALLOWED_UPDATES,
            )
            logger.info("Start listening for updates. Press Enter key to stop.")

            await wait_for_stop()
        finally:
            if application.updater.running:
                await application.updater.stop()
            if application.running:
                await application.stop()
    logger.info("Bot stopped.")


def main() -> None:
    """Initialize and run the bot."""
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    configure_logging(settings.debug, [settings.telegram_token])
    application = build_application(settings)

    try:
        asyncio.run(run_polling(application, wait_for_enter))
    except KeyboardInterrupt:
        logger.info("Bot interrupted.")


if __name__ == "__main__":
    main()
