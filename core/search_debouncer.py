# -*- coding: utf-8 -*-
"""
Поиск города с задержкой (debounce) и отменой устаревших запросов.

Одна «ячейка» поиска, не больше одного запроса за раз:

    IDLE → PENDING_DELAY(query) → IN_FLIGHT(query) → IDLE

Каждый новый ввод отменяет задачу предыдущего запроса (ожидание или сам
запрос). Дополнительно каждая задача несёт номер поколения: результат,
который пришёл после того, как его поколение сменилось, выбрасывается.
"""

import asyncio
import logging
from enum import Enum
from typing import List, Optional

from core import events
from core import status_texts
from core.errors import GatewayError
from core.event_bus import EventBus, default_bus
from core.models.suggestion import Suggestion

logger = logging.getLogger("search_debouncer")

DEBOUNCE_SEC = 0.35


class SearchState(str, Enum):
    IDLE = "idle"
    PENDING_DELAY = "pending_delay"
    IN_FLIGHT = "in_flight"


class SearchDebouncer:

    def __init__(self, search_client, bus: EventBus = None, delay: float = DEBOUNCE_SEC):
        self.search_client = search_client
        self.bus = bus or default_bus
        self.delay = delay
        self.state = SearchState.IDLE
        self.query: Optional[str] = None
        self.suggestions: List[Suggestion] = []
        self.status_text: Optional[str] = status_texts.SEARCH_START_TYPING
        self._task: Optional[asyncio.Task] = None
        self._generation = 0

    async def on_input(self, text: str) -> None:
        """Реакция на каждое изменение текста в поле поиска."""
        self._cancel_pending()
        query = (text or "").strip()

        if not query:
            self.state = SearchState.IDLE
            self.query = None
            await self._render(None, [], status_texts.SEARCH_START_TYPING)
            return

        self.state = SearchState.PENDING_DELAY
        self.query = query
        self._task = asyncio.create_task(self._run(query, self._generation))

    async def _run(self, query: str, generation: int) -> None:
        await asyncio.sleep(self.delay)
        if generation != self._generation:
            return

        self.state = SearchState.IN_FLIGHT
        await self._set_status(query, status_texts.SEARCH_SEARCHING)

        try:
            suggestions = await self.search_client.search(query)
        except Exception as e:
            if generation != self._generation:
                return
            if not isinstance(e, GatewayError):
                e = GatewayError(str(e), e)
            logger.error(f"🔴 Поиск «{query}» не удался: {e}")
            self.state = SearchState.IDLE
            await self._render(query, [], status_texts.SEARCH_FAILED)
            return

        if generation != self._generation:
            logger.debug("Ответ для устаревшего запроса «%s» отброшен", query)
            return

        self.state = SearchState.IDLE
        text = status_texts.SEARCH_NO_RESULTS if not suggestions else None
        await self._render(query, list(suggestions), text)

    async def select(self, index: int) -> Optional[str]:
        """
        Выбор варианта завершает поиск: возвращает название города
        и сбрасывает ячейку в IDLE.
        """
        if not 0 <= index < len(self.suggestions):
            return None
        suggestion = self.suggestions[index]
        self._cancel_pending()
        self.state = SearchState.IDLE
        self.query = None
        self.suggestions = []
        logger.info(f"✅ Выбран город: {suggestion.display_name}")
        await self.bus.emit(events.LOCATION_SELECTED, {"name": suggestion.name, "suggestion": suggestion})
        return suggestion.name

    async def wait_idle(self) -> None:
        """Ждёт завершения текущей задачи поиска (если она есть)."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    def cancel(self) -> None:
        """Отменяет текущий поиск без отрисовки результатов."""
        self._cancel_pending()
        self.state = SearchState.IDLE
        self.query = None

    # === ВНУТРЕННЕЕ ===
    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _set_status(self, query: Optional[str], text: Optional[str]) -> None:
        self.status_text = text
        await self.bus.emit(events.SEARCH_STATUS, {"query": query, "text": text})

    async def _render(self, query: Optional[str], suggestions: List[Suggestion], text: Optional[str]) -> None:
        self.suggestions = suggestions
        await self.bus.emit(events.SEARCH_RESULTS, {"query": query, "suggestions": list(suggestions)})
        await self._set_status(query, text)
