"""
Обработчики команд бота
"""
import logging
from typing import Any, Dict

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from handlers.onboarding import OnboardingHandler

logger = logging.getLogger(__name__)


class CommandHandlers:
    """Обработчики команд"""

    def __init__(self, onboarding: OnboardingHandler, messages: Dict[str, Any]):
        self.onboarding = onboarding
        self.messages = messages

    async def start_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Обработчик команды /start - всегда начинает настройку заново"""
        await self.onboarding.start(update, context)

    async def help_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Обработчик команды /help"""
        await update.effective_message.reply_text(self.messages['help'], parse_mode=ParseMode.MARKDOWN)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Логирует ошибки"""
    logger.error(f"❌ Update {update} вызвал ошибку: {context.error}", exc_info=context.error)
