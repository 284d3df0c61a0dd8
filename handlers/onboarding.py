"""
Обработчик диалога настройки: ниша, ключевые слова, страна.
Апдейты превращаются в события core.dialogue, эффекты исполняются здесь.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from telegram import Update
from telegram.constants import ParseMode
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from core.dialogue import (
    AskQuestion,
    Effect,
    EndDialogue,
    ResetAnswers,
    SaveProfile,
    SendNotice,
    ShowSummary,
    StoreAnswer,
    TriggerFirstPost,
    transition,
)
from models.enums import CallbackAction, DialogueEvent
from models.session import OnboardingSession
from services.automation_service import FirstPostTrigger
from services.session_store import SessionStore
from services.sheets_service import SheetsProfileRepository
from utils.formatters import create_confirm_keyboard, format_summary

logger = logging.getLogger(__name__)

_CALLBACK_EVENTS = {
    CallbackAction.CONFIRM.value: DialogueEvent.CONFIRM,
    CallbackAction.RESTART.value: DialogueEvent.RESTART,
}


class OnboardingHandler:
    """
    Диалог настройки: превращает апдейты Telegram в события машины
    состояний и исполняет полученные эффекты.
    """

    def __init__(
        self,
        session_store: SessionStore,
        profile_repository: SheetsProfileRepository,
        first_post_trigger: FirstPostTrigger,
        messages: Dict[str, Any],
    ):
        self.session_store = session_store
        self.profile_repository = profile_repository
        self.first_post_trigger = first_post_trigger
        self.messages = messages

    # -------------------------------------------------
    # Entry point
    # -------------------------------------------------
    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        chat_id = update.effective_chat.id
        user_id = update.effective_user.id if update.effective_user else None

        session = self.session_store.start(chat_id, user_id)
        logger.info(f"▶️ Старт настройки chat_id={chat_id} user_id={user_id}")

        await self._dispatch(context, session, DialogueEvent.START)

    # -------------------------------------------------
    # Text answers
    # -------------------------------------------------
    async def handle_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        chat_id = update.effective_chat.id
        session = self.session_store.get(chat_id)

        if not session or not session.is_active:
            logger.debug(f"Сообщение вне диалога chat_id={chat_id} проигнорировано")
            return

        await self._dispatch(context, session, DialogueEvent.TEXT, update.effective_message.text)

    # -------------------------------------------------
    # Confirm / restart buttons
    # -------------------------------------------------
    async def handle_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        query = update.callback_query
        await query.answer()

        event = _CALLBACK_EVENTS.get(query.data)
        session = self.session_store.get(update.effective_chat.id)

        if event is None or not session or not session.is_active:
            logger.debug(f"Кнопка {query.data} вне диалога проигнорирована")
            return

        # Профиль сохраняется на того, кто нажал кнопку
        session.user_id = query.from_user.id
        await self._dispatch(context, session, event)

    # -------------------------------------------------
    # State machine driver
    # -------------------------------------------------
    async def _dispatch(
        self,
        context: ContextTypes.DEFAULT_TYPE,
        session: OnboardingSession,
        event: DialogueEvent,
        text: Optional[str] = None,
    ):
        previous = session.state
        result = transition(session.state, event, text)
        session.state = result.state

        if result.effects:
            logger.debug(f"chat_id={session.chat_id}: {previous} --{event.value}--> {result.state}")

        try:
            for effect in result.effects:
                await self._apply(context, session, effect)
        except TelegramError:
            if ShowSummary() in result.effects:
                # Сводка с кнопками не дошла: ждем ответ на прежний вопрос
                session.state = previous
                logger.warning(f"⚠️ Сводка не отправлена chat_id={session.chat_id}, шаг {previous}")
            raise
        finally:
            if EndDialogue() in result.effects and self.session_store.get(session.chat_id) is session:
                self.session_store.delete(session.chat_id)

    async def _apply(
        self,
        context: ContextTypes.DEFAULT_TYPE,
        session: OnboardingSession,
        effect: Effect,
    ):
        if isinstance(effect, ResetAnswers):
            session.reset()

        elif isinstance(effect, StoreAnswer):
            session.store_answer(effect.field, effect.value)

        elif isinstance(effect, AskQuestion):
            await self._send(context, session.chat_id, self.messages['questions'][effect.step.value])

        elif isinstance(effect, ShowSummary):
            await self._send(
                context,
                session.chat_id,
                format_summary(self.messages['summary'], session),
                reply_markup=create_confirm_keyboard(self.messages['buttons']),
            )

        elif isinstance(effect, SaveProfile):
            saved = await self.profile_repository.save(session.to_profile())
            follow_up = DialogueEvent.SAVE_SUCCEEDED if saved else DialogueEvent.SAVE_FAILED
            await self._dispatch(context, session, follow_up)

        elif isinstance(effect, SendNotice):
            await self._send(context, session.chat_id, self.messages['notices'][effect.key])

        elif isinstance(effect, TriggerFirstPost):
            # Не ждем: результат только логируется внутри notify()
            context.application.create_task(
                self.first_post_trigger.notify(session.chat_id)
            )

        elif isinstance(effect, EndDialogue):
            self.session_store.delete(session.chat_id)
            logger.info(f"⏹ Диалог завершен chat_id={session.chat_id}")

    async def _send(self, context: ContextTypes.DEFAULT_TYPE, chat_id: int, text: str, **kwargs):
        await context.bot.send_message(
            chat_id=chat_id,
            text=text,
            parse_mode=ParseMode.MARKDOWN,
            **kwargs
        )
