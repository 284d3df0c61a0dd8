"""Ядро бота"""
from .dialogue import transition, Transition

__all__ = ['transition', 'Transition']
