"""Конфигурация"""
from .settings import BotConfig, load_config, load_messages

__all__ = ['BotConfig', 'load_config', 'load_messages']
