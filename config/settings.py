#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Конфигурационные настройки бота
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent
DEFAULT_MESSAGES_PATH = CONFIG_DIR / 'messages.yaml'

REQUIRED_MESSAGES = {
    'questions': ['niche', 'keywords', 'country'],
    'buttons': ['confirm', 'restart'],
    'notices': ['saved', 'done', 'save_failed', 'restart'],
}


def load_messages(path: Path) -> Dict[str, Any]:
    """Загрузить тексты бота из YAML"""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    logger.debug(f"📄 Тексты загружены из {path}")
    return data


@dataclass
class BotConfig:
    """Конфигурация бота"""

    # Токены и ключи
    telegram_token: str = field(
        default_factory=lambda: os.getenv('TELEGRAM_BOT_TOKEN') or os.getenv('BOT_TOKEN', '')
    )
    google_sheet_id: str = field(default_factory=lambda: os.getenv('GOOGLE_SHEET_ID', ''))
    google_service_account_json: str = field(
        default_factory=lambda: os.getenv('GOOGLE_SERVICE_ACCOUNT_JSON', '')
    )
    worksheet_title: str = field(default_factory=lambda: os.getenv('GOOGLE_WORKSHEET', 'users'))
    n8n_webhook_url: str = field(default_factory=lambda: os.getenv('N8N_WEBHOOK_URL', ''))

    # Настройки сервера
    host: str = field(default_factory=lambda: os.getenv('HOST', '0.0.0.0'))
    port: int = field(default_factory=lambda: int(os.getenv('PORT', '3000')))
    environment: str = field(
        default_factory=lambda: os.getenv('ENVIRONMENT') or os.getenv('NODE_ENV', 'development')
    )
    webhook_base_url: str = field(
        default_factory=lambda: os.getenv('RENDER_EXTERNAL_URL') or os.getenv('WEBHOOK_BASE_URL', '')
    )
    webhook_path: str = 'webhook'
    webhook_secret: str = field(default_factory=lambda: os.getenv('WEBHOOK_SECRET', ''))

    # Логирование
    log_level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    log_dir: str = field(default_factory=lambda: os.getenv('LOG_DIR', 'logs'))

    # Тексты
    messages_path: Path = field(
        default_factory=lambda: Path(os.getenv('MESSAGES_PATH', str(DEFAULT_MESSAGES_PATH)))
    )
    messages: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Загрузка текстов после инициализации"""
        if not self.messages:
            self.messages = load_messages(self.messages_path)

    @property
    def is_production(self) -> bool:
        """production -> webhook, иначе polling"""
        return self.environment.lower() == 'production'

    @property
    def webhook_url(self) -> str:
        return f"{self.webhook_base_url.rstrip('/')}/{self.webhook_path}"

    def validate(self) -> List[str]:
        """Проверка корректности конфигурации, возвращает список ошибок"""
        errors = []

        if not self.telegram_token:
            errors.append("TELEGRAM_BOT_TOKEN не установлен")
        if not self.google_sheet_id:
            errors.append("GOOGLE_SHEET_ID не установлен")

        if not self.google_service_account_json:
            errors.append("GOOGLE_SERVICE_ACCOUNT_JSON не установлен")
        else:
            try:
                json.loads(self.google_service_account_json)
            except json.JSONDecodeError as e:
                errors.append(f"GOOGLE_SERVICE_ACCOUNT_JSON не является JSON: {e}")

        if self.is_production and not self.webhook_base_url:
            errors.append("RENDER_EXTERNAL_URL/WEBHOOK_BASE_URL нужен в режиме production")

        for section, keys in REQUIRED_MESSAGES.items():
            values = self.messages.get(section) or {}
            for key in keys:
                if key not in values:
                    errors.append(f"В текстах нет {section}.{key}")
        for key in ('summary', 'help'):
            if key not in self.messages:
                errors.append(f"В текстах нет {key}")

        if not self.n8n_webhook_url:
            logger.warning("⚠️ N8N_WEBHOOK_URL не задан, первый пост запрашиваться не будет")

        return errors

    def startup_info(self) -> Dict[str, Any]:
        """Сводка для лога при запуске"""
        return {
            'mode': 'webhook' if self.is_production else 'polling',
            'telegram_token': self.telegram_token,
            'google_sheet_id': self.google_sheet_id,
            'worksheet': self.worksheet_title,
            'n8n_webhook_url': self.n8n_webhook_url or 'НЕ УСТАНОВЛЕН',
            'host': self.host,
            'port': self.port,
            'webhook_url': self.webhook_url if self.is_production else '-',
        }


def load_config() -> BotConfig:
    """Создать конфигурацию из окружения"""
    return BotConfig()
