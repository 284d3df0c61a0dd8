#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Параллельная обработка апдейтов с очередью внутри чата.

Разные чаты обрабатываются одновременно, поэтому медленное сохранение
в таблицу задерживает только свой чат. Апдейты одного чата идут строго
по очереди, иначе ответы могли бы перепутать шаги диалога.
"""

import asyncio
import logging
from typing import Any, Awaitable, Dict, Hashable

from telegram.ext import BaseUpdateProcessor

logger = logging.getLogger(__name__)

MAX_CONCURRENT_UPDATES = 256


class PerChatUpdateProcessor(BaseUpdateProcessor):
    """Одна блокировка asyncio.Lock на каждый chat_id"""

    def __init__(self, max_concurrent_updates: int = MAX_CONCURRENT_UPDATES):
        super().__init__(max_concurrent_updates)
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._waiters: Dict[Hashable, int] = {}

    @staticmethod
    def chat_key(update: object):
        chat = getattr(update, 'effective_chat', None)
        return chat.id if chat is not None else None

    async def do_process_update(self, update: object, coroutine: Awaitable[Any]) -> None:
        key = self.chat_key(update)
        if key is None:
            # Апдейты без чата (например, inline-запросы) не упорядочиваются
            await coroutine
            return

        lock = self._locks.setdefault(key, asyncio.Lock())
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                await coroutine
        finally:
            self._waiters[key] -= 1
            if not self._waiters[key]:
                del self._waiters[key]
                del self._locks[key]

    async def initialize(self) -> None:
        pass

    async def shutdown(self) -> None:
        if self._locks:
            logger.warning(f"⚠️ Остановка при {len(self._locks)} чатах в обработке")
