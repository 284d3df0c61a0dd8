import asyncio
import re
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from config.settings import DEFAULT_MESSAGES_PATH, load_messages
from handlers.onboarding import OnboardingHandler
from services.session_store import SessionStore
from services.sheets_service import SheetsProfileRepository


class FakeWorksheet:
    """Лист в памяти: значения хранятся строками, как их отдает Sheets API"""

    def __init__(self, rows=None, fail_on=None):
        self.rows = [list(r) for r in (rows or [])]
        self.fail_on = fail_on or set()
        self.calls = []

    def _check(self, name):
        self.calls.append(name)
        if name in self.fail_on:
            raise RuntimeError(f"{name} failed")

    def get_values(self, range_name=None):
        self._check("get_values")
        return [[str(v) for v in row] for row in self.rows]

    def update(self, values=None, range_name=None, value_input_option=None):
        self._check("update")
        row_number = int(re.match(r"A(\d+):", range_name).group(1))
        while len(self.rows) < row_number:
            self.rows.append([])
        self.rows[row_number - 1] = list(values[0])

    def append_row(self, values, value_input_option=None, table_range=None):
        self._check("append_row")
        self.rows.append(list(values))


class FakeApplication:
    def __init__(self):
        self.tasks = []

    def create_task(self, coroutine, update=None, **kwargs):
        task = asyncio.ensure_future(coroutine)
        self.tasks.append(task)
        return task

    async def drain(self):
        if self.tasks:
            await asyncio.gather(*self.tasks)


@pytest.fixture
def messages():
    return load_messages(DEFAULT_MESSAGES_PATH)


@pytest.fixture
def worksheet():
    return FakeWorksheet(rows=[["user_id", "chat_id", "niche", "keywords", "country", "created_at", "updated_at"]])


@pytest.fixture
def repository(worksheet):
    return SheetsProfileRepository(worksheet=worksheet)


@pytest.fixture
def session_store():
    return SessionStore()


@pytest.fixture
def trigger():
    fake = MagicMock()
    fake.notify = AsyncMock()
    return fake


@pytest.fixture
def onboarding(session_store, repository, trigger, messages):
    return OnboardingHandler(
        session_store=session_store,
        profile_repository=repository,
        first_post_trigger=trigger,
        messages=messages,
    )


@pytest.fixture
def context():
    ctx = MagicMock()
    ctx.bot.send_message = AsyncMock()
    ctx.application = FakeApplication()
    return ctx


def make_update(chat_id=1001, user_id=42, text=None, callback_data=None):
    """Минимальный Update для обработчиков"""
    message = MagicMock()
    message.text = text
    message.reply_text = AsyncMock()

    query = None
    if callback_data is not None:
        query = MagicMock()
        query.data = callback_data
        query.answer = AsyncMock()
        query.from_user = SimpleNamespace(id=user_id)

    return SimpleNamespace(
        effective_chat=SimpleNamespace(id=chat_id),
        effective_user=SimpleNamespace(id=user_id),
        effective_message=message,
        callback_query=query,
    )


def sent_texts(context):
    return [c.kwargs["text"] for c in context.bot.send_message.await_args_list]
