"""
Хранилище сессий онбординга (в памяти процесса)
"""
import logging
from typing import Dict, Optional

from models.session import OnboardingSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Сессии по chat_id. Перезапуск процесса теряет незавершенные диалоги."""

    def __init__(self):
        self._sessions: Dict[int, OnboardingSession] = {}

    def get(self, chat_id: int) -> Optional[OnboardingSession]:
        """Получить сессию чата"""
        return self._sessions.get(chat_id)

    def start(self, chat_id: int, user_id: Optional[int] = None) -> OnboardingSession:
        """Начать новую сессию, старая (если была) отбрасывается"""
        if chat_id in self._sessions:
            logger.debug(f"Сессия чата {chat_id} сброшена повторным /start")
        session = OnboardingSession(chat_id=chat_id, user_id=user_id)
        self._sessions[chat_id] = session
        return session

    def delete(self, chat_id: int) -> None:
        """Удалить сессию"""
        self._sessions.pop(chat_id, None)

    def get_session_count(self) -> int:
        return len(self._sessions)
