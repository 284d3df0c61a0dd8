"""
Health check сервер для Render (режим polling)
"""
import logging
from typing import Optional

from aiohttp import web

from services.session_store import SessionStore

logger = logging.getLogger(__name__)

SESSION_STORE_KEY = web.AppKey('session_store', SessionStore)


async def health_check_handler(request):
    """Обработчик health check"""
    return web.Response(
        text="OK",
        headers={'Content-Type': 'text/plain'}
    )


async def status_handler(request):
    """Статус с количеством незавершенных диалогов"""
    store = request.app[SESSION_STORE_KEY]
    info = (
        "Бот онбординга\n\n"
        "Статус: ✅ Работает\n"
        "Режим: Polling\n"
        f"Активных диалогов: {store.get_session_count()}\n"
    )
    return web.Response(
        text=info,
        headers={'Content-Type': 'text/plain'}
    )


def create_health_app(session_store: SessionStore) -> web.Application:
    app = web.Application()
    app[SESSION_STORE_KEY] = session_store
    app.router.add_get('/health', health_check_handler)
    app.router.add_get('/status', status_handler)
    app.router.add_get('/', health_check_handler)
    return app


class HealthCheckServer:
    """aiohttp сервер, который живет вместе с Application"""

    def __init__(self, session_store: SessionStore, host: str = '0.0.0.0', port: int = 3000):
        self.session_store = session_store
        self.host = host
        self.port = port
        self._runner: Optional[web.AppRunner] = None

    async def start(self) -> None:
        try:
            self._runner = web.AppRunner(create_health_app(self.session_store))
            await self._runner.setup()
            site = web.TCPSite(self._runner, self.host, self.port)
            await site.start()
        except OSError as e:
            # Порт занят - бот продолжает работать без health check
            logger.warning(f"⚠️ Health check сервер не запущен на {self.host}:{self.port}: {e}")
            await self.stop()
            return

        logger.info(f"🌐 Health check сервер запущен на {self.host}:{self.port}")
        logger.info(f"✅ Доступен по: http://{self.host}:{self.port}/health")

    async def stop(self) -> None:
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
            logger.info("🔄 Health check сервер остановлен")
