"""Утилиты"""
from .logger import setup_logging, mask_secret
from .formatters import format_summary, create_confirm_keyboard

__all__ = [
    'setup_logging',
    'mask_secret',
    'format_summary',
    'create_confirm_keyboard',
]
