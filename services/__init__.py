"""Сервисы бота"""
from .session_store import SessionStore
from .sheets_service import SheetsProfileRepository
from .automation_service import FirstPostTrigger
from .health_check import HealthCheckServer

__all__ = ['SessionStore', 'SheetsProfileRepository', 'FirstPostTrigger', 'HealthCheckServer']
