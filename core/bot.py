#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Основной класс бота онбординга
"""

import logging
import signal
from typing import Optional

from telegram import Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
    MessageHandler,
    filters,
)

from config.settings import BotConfig
from core.update_processor import PerChatUpdateProcessor
from handlers.commands import CommandHandlers, error_handler
from handlers.onboarding import OnboardingHandler
from models.enums import CallbackAction
from services.automation_service import FirstPostTrigger
from services.health_check import HealthCheckServer
from services.session_store import SessionStore
from services.sheets_service import SheetsProfileRepository

logger = logging.getLogger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)

CALLBACK_PATTERN = f"^({CallbackAction.CONFIRM.value}|{CallbackAction.RESTART.value})$"


class OnboardingBot:
    """Бот настройки ниши, ключевых слов и страны"""

    def __init__(self, config: BotConfig):
        """
        Инициализация бота

        Args:
            config: Объект конфигурации BotConfig
        """
        self.config = config
        self.application: Optional[Application] = None

        self.session_store = SessionStore()
        self.profile_repository = SheetsProfileRepository(
            sheet_id=config.google_sheet_id,
            credentials_json=config.google_service_account_json,
            worksheet_title=config.worksheet_title,
        )
        self.first_post_trigger = FirstPostTrigger(config.n8n_webhook_url)
        self.health_server: Optional[HealthCheckServer] = None

        self.onboarding = OnboardingHandler(
            session_store=self.session_store,
            profile_repository=self.profile_repository,
            first_post_trigger=self.first_post_trigger,
            messages=config.messages,
        )
        self.commands = CommandHandlers(self.onboarding, config.messages)

        logger.info(f"🤖 Бот инициализирован. Режим: {'webhook' if config.is_production else 'polling'}")

    def build_application(self) -> Application:
        """Создать Application и зарегистрировать обработчики"""
        self.application = Application.builder() \
            .token(self.config.telegram_token) \
            .post_init(self._post_init) \
            .post_shutdown(self._post_shutdown) \
            .concurrent_updates(PerChatUpdateProcessor()) \
            .build()

        self._setup_handlers()
        return self.application

    def _setup_handlers(self):
        """Настройка обработчиков команд и сообщений"""
        self.application.add_handler(CommandHandler("start", self.commands.start_command))
        self.application.add_handler(CommandHandler("help", self.commands.help_command))

        # Кнопки подтверждения
        self.application.add_handler(CallbackQueryHandler(
            self.onboarding.handle_callback,
            pattern=CALLBACK_PATTERN
        ))

        # Текстовые ответы (только когда идет диалог)
        self.application.add_handler(MessageHandler(
            filters.TEXT & ~filters.COMMAND,
            self.onboarding.handle_text
        ))

        self.application.add_error_handler(error_handler)

        logger.info("✅ Обработчики зарегистрированы")

    def run(self):
        """Запуск бота: webhook в production, иначе polling"""
        if self.application is None:
            self.build_application()

        if self.config.is_production:
            logger.info(f"🌐 Запуск бота с webhook на порту {self.config.port}")
            self.application.run_webhook(
                listen=self.config.host,
                port=self.config.port,
                url_path=self.config.webhook_path,
                webhook_url=self.config.webhook_url,
                secret_token=self.config.webhook_secret or None,
                allowed_updates=Update.ALL_TYPES,
                stop_signals=STOP_SIGNALS,
            )
        else:
            logger.info("🔄 Запуск бота в режиме polling...")
            self.application.run_polling(
                allowed_updates=Update.ALL_TYPES,
                drop_pending_updates=True,
                stop_signals=STOP_SIGNALS,
            )

    async def _post_init(self, application: Application):
        """Вызывается после инициализации бота"""
        if not self.config.is_production:
            self.health_server = HealthCheckServer(
                self.session_store,
                host=self.config.host,
                port=self.config.port,
            )
            await self.health_server.start()

        logger.info("✅ Бот инициализирован и готов к работе")

    async def _post_shutdown(self, application: Application):
        """Вызывается перед выключением бота"""
        logger.info("🛑 Бот выключается...")

        if self.health_server is not None:
            await self.health_server.stop()

        await self.first_post_trigger.close()

        unfinished = self.session_store.get_session_count()
        if unfinished:
            logger.info(f"🗑️ Незавершенных диалогов потеряно: {unfinished}")
