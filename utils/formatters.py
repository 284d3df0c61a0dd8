#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Утилиты для форматирования текста и клавиатур
"""

from typing import Any, Dict

from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from telegram.helpers import escape_markdown

from models.enums import CallbackAction
from models.session import OnboardingSession

# Лимит Telegram 4096 символов; экранирование может удвоить ответ
SUMMARY_VALUE_LIMIT = 600


def format_summary(template: str, session: OnboardingSession) -> str:
    """
    Сводка ответов для подтверждения.
    Ответы пользователя обрезаются и экранируются, чтобы не ломать Markdown.
    """
    return template.format(
        niche=_echo(session.niche),
        keywords=_echo(session.keywords),
        country=_echo(session.country),
    )


def _echo(value) -> str:
    value = value or ""
    if len(value) > SUMMARY_VALUE_LIMIT:
        value = value[:SUMMARY_VALUE_LIMIT - 1] + "…"
    return escape_markdown(value)


def create_confirm_keyboard(buttons: Dict[str, Any]) -> InlineKeyboardMarkup:
    """Две кнопки в одном ряду: подтвердить / исправить"""
    keyboard = [[
        InlineKeyboardButton(buttons['confirm'], callback_data=CallbackAction.CONFIRM.value),
        InlineKeyboardButton(buttons['restart'], callback_data=CallbackAction.RESTART.value),
    ]]
    return InlineKeyboardMarkup(keyboard)
