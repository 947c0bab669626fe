"""Shared fixtures: a fake Telegram client and a ready bot context."""

import random
import sys
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.context import BotContext
from models.update import IncomingMessage
from services.menu_service import HELP_TEXT, build_first_menu, build_second_menu


class FakeClient:
    """Records outbound calls instead of talking to Telegram."""

    def __init__(self) -> None:
        self.send_message = AsyncMock(return_value=SimpleNamespace(message_id=100))
        self.edit_message = AsyncMock(return_value=None)
        self.acknowledge_callback = AsyncMock(return_value=None)

    def call_count(self) -> int:
        return (
            self.send_message.await_count
            + self.edit_message.await_count
            + self.acknowledge_callback.await_count
        )


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def ctx(client: FakeClient) -> BotContext:
    return BotContext(
        client=client,
        rng=random.Random(1234),
        help_text=HELP_TEXT,
        first_menu=build_first_menu(),
        second_menu=build_second_menu(),
    )


def make_message(text: str, sender: bool = True, message_id: int = 42, chat_id: int = 7) -> IncomingMessage:
    return IncomingMessage(
        message_id=message_id,
        chat_id=chat_id,
        text=text,
        date=datetime(2024, 5, 1, 12, 30, 15, tzinfo=timezone.utc),
        sender_id=99 if sender else None,
        sender_name="Ann" if sender else None,
    )
