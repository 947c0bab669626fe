"""
webhook.py
----------
Entry point for the bot in webhook mode (Cloud Run / Cloud Functions
style deployments). Telegram POSTs each update to ``WEBHOOK_PATH``;
the update is routed before the request returns.
"""

import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from telegram import Update
from telegram.error import TelegramError
from telegram.ext import Application

from config import ConfigError, Settings, load_settings
from main import build_application
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


async def report_last_webhook_error(application: Application) -> None:
    """Log deliveries Telegram failed while the bot was down."""
    try:
        info = await application.bot.get_webhook_info()
    except TelegramError as e:
        logger.warning(f"Failed to fetch current webhook info: {e}")
        return
    if info.last_error_date:
        logger.warning(
            f"Telegram last fail on delivering webhook at {info.last_error_date}: "
            f"{info.last_error_message}"
        )


def create_app(settings: Settings, application: Optional[Application] = None) -> FastAPI:
    """
    Build the FastAPI app serving the webhook.

    Args:
        settings: Loaded process settings.
        application: Pre-built Telegram application; built from
            ``settings`` when omitted.
    """
    application = application or build_application(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        await application.initialize()
        await application.start()
        await report_last_webhook_error(application)
        logger.info("Initialization is completed.")
        try:
            yield
        finally:
            await application.stop()
            await application.shutdown()

    app = FastAPI(lifespan=lifespan)

    @app.post(settings.webhook_path)
    async def telegram_webhook(request: Request) -> JSONResponse:
        try:
            data = await request.json()
        except ValueError as e:
            logger.error(f"Could not decode incoming update: {e}")
            return JSONResponse({"ok": False})
        # Updates are always JSON objects
        if not isinstance(data, dict):
            logger.error(f"Could not decode incoming update: expected an object, got {type(data).__name__}")
            return JSONResponse({"ok": False})
        try:
            update = Update.de_json(data, application.bot)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.error(f"Could not decode incoming update: {e}")
            return JSONResponse({"ok": False})
        if update is None:
            logger.error("Could not decode incoming update: empty object")
            return JSONResponse({"ok": False})

        await application.process_update(update)
        return JSONResponse({"ok": True})

    @app.get("/healthz")
    async def healthz() -> dict:
        return {"status": "ok"}

    return app


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    configure_logging(settings.debug, [settings.telegram_token])
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
