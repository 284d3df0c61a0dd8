#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Точка входа: конфигурация, логирование, запуск бота
"""

import logging

from dotenv import load_dotenv

from config.settings import load_config
from core.bot import OnboardingBot
from utils.logger import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Запускает бота."""
    load_dotenv()

    config = load_config()
    bot_logger = setup_logging(config.log_level, log_dir=config.log_dir)
    bot_logger.log_startup_info(config.startup_info())

    errors = config.validate()
    if errors:
        for error in errors:
            logger.critical(f"❌ {error}")
        raise ValueError("Конфигурация некорректна: " + "; ".join(errors))

    bot = OnboardingBot(config)
    bot.run()


if __name__ == '__main__':
    main()
