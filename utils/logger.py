#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Настройка логирования
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Union


class BotLogger:
    """Класс для настройки логирования бота"""

    def __init__(self, log_dir: str = "logs", log_level: int = logging.INFO):
        self.log_dir = Path(log_dir)
        self.log_level = log_level
        self._setup_done = False

    def setup(self, bot_name: str = "onboarding_bot"):
        """Настройка логирования"""
        if self._setup_done:
            return

        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d")
        log_file = self.log_dir / f"{bot_name}_{timestamp}.log"

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(self.log_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(self.log_level)

        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)
        root_logger.handlers.clear()
        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        # Сторонние библиотеки - только предупреждения
        for noisy in ('telegram', 'httpx', 'gspread', 'aiohttp', 'asyncio'):
            logging.getLogger(noisy).setLevel(logging.WARNING)

        self._setup_done = True

        logging.info("=" * 60)
        logging.info(f"🚀 Бот запущен: {bot_name}")
        logging.info(f"📁 Логи сохраняются в: {log_file}")
        logging.info(f"📊 Уровень логирования: {logging.getLevelName(self.log_level)}")
        logging.info("=" * 60)

    def log_startup_info(self, config_info: dict):
        """Записать информацию о конфигурации при запуске"""
        logger = logging.getLogger(__name__)
        logger.info("📋 КОНФИГУРАЦИЯ БОТА:")
        for key, value in config_info.items():
            logger.info(f"  {key}: {mask_secret(key, value)}")
        logger.info("=" * 60)


def mask_secret(key: str, value) -> str:
    """Токены и ключи выводятся только последними 4 символами"""
    lowered = key.lower()
    if lowered.endswith('key') or lowered.endswith('token') or lowered.endswith('secret'):
        return '***' + str(value)[-4:] if value else 'НЕ УСТАНОВЛЕН'
    return str(value)


# Глобальный экземпляр логгера
bot_logger = BotLogger()


def setup_logging(log_level: Union[int, str] = logging.INFO,
                  bot_name: str = "onboarding_bot",
                  log_dir: str = "logs") -> BotLogger:
    """Функция для быстрой настройки логирования"""
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
    bot_logger.log_level = log_level
    bot_logger.log_dir = Path(log_dir)
    bot_logger.setup(bot_name)
    return bot_logger
