"""Обработчики команд и сообщений"""
from .commands import CommandHandlers, error_handler
from .onboarding import OnboardingHandler

__all__ = [
    "CommandHandlers",
    "OnboardingHandler",
    "error_handler",
]
