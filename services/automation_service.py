"""
Вызов n8n webhook для подготовки первого поста
"""
import logging
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)


class FirstPostTrigger:
    """Одноразовое уведомление автоматизации после сохранения настроек.

    Ошибки логируются и не пробрасываются: пользователь получает
    "Готово" независимо от результата.
    """

    def __init__(self, webhook_url: str, session: Optional[aiohttp.ClientSession] = None):
        self.webhook_url = webhook_url
        self._session = session

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def notify(self, chat_id: int) -> None:
        if not self.webhook_url:
            logger.warning(f"⚠️ N8N_WEBHOOK_URL не задан, первый пост для chat_id {chat_id} не запрошен")
            return

        try:
            session = self._get_session()
            async with session.post(self.webhook_url, json={'chat_id': chat_id}) as response:
                response.raise_for_status()
            logger.info(f"🚀 Первый пост запрошен для chat_id {chat_id}")
        except Exception as e:
            logger.error(f"❌ Ошибка вызова n8n для chat_id {chat_id}: {e}")

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
