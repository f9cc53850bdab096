# -*- coding: utf-8 -*-
"""
Шина событий (Event Bus): узкая поверхность уведомлений ядра.

Архитектурный принцип:
- Производители (оркестратор обновлений, поиск) → публикуют события
- Потребители (интерфейс, тесты) → подписываются на события
- event_bus.py НЕ импортирует ни интерфейс, ни оркестратор, зависимости только в одну сторону

Использование:

from core.event_bus import subscribe_async
from core import events

async def on_weather(event):
    render(event["snapshot"], event["last_updated"])

subscribe_async(events.WEATHER_UPDATED, on_weather)

Обработчики вызываются по очереди, в порядке подписки; emit_event
возвращается только после того, как отработали все. На этом держится
порядок «загрузка началась → ... → загрузка закончилась → погода обновлена».
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List

logger = logging.getLogger("event_bus")

# Типы обработчиков
SyncHandler = Callable[[Dict[str, Any]], None]
AsyncHandler = Callable[[Dict[str, Any]], Awaitable[None]]


class EventBus:
    """Реестр обработчиков. Ошибки в обработчиках логируются, но не прерывают выполнение."""

    def __init__(self, name: str = "default"):
        self.name = name
        self._sync_handlers: Dict[str, List[SyncHandler]] = {}
        self._async_handlers: Dict[str, List[AsyncHandler]] = {}

    def subscribe(self, event_type: str, handler: SyncHandler) -> None:
        """
        Подписка на событие с синхронным обработчиком.

        Args:
            event_type (str): Тип события (например, "weather_updated")
            handler (callable): Функция, принимающая dict с данными события
        """
        if handler is None:
            logger.warning(f"⚠️ Попытка подписаться на событие {event_type} с handler=None. Игнорируем.")
            return
        self._sync_handlers.setdefault(event_type, []).append(handler)
        logger.debug("Зарегистрирован синхронный обработчик для события: %s", event_type)

    def subscribe_async(self, event_type: str, handler: AsyncHandler) -> None:
        """
        Подписка на событие с асинхронным обработчиком.

        Args:
            event_type (str): Тип события (например, "search_results")
            handler (callable): Асинхронная функция, принимающая dict с данными события
        """
        if handler is None:
            logger.warning(f"⚠️ Попытка подписаться на событие {event_type} с handler=None. Игнорируем.")
            return
        self._async_handlers.setdefault(event_type, []).append(handler)
        logger.debug("Зарегистрирован асинхронный обработчик для события: %s", event_type)

    def unsubscribe(self, event_type: str, handler) -> None:
        """Отписка от события (синхронного или асинхронного)."""
        for registry in (self._sync_handlers, self._async_handlers):
            handlers = registry.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)
                logger.debug("Обработчик удалён для события: %s", event_type)
                return
        logger.warning("Обработчик не найден для события: %s", event_type)

    async def emit(self, event_type: str, event_data: Dict[str, Any]) -> None:
        """
        Асинхронная публикация события.

        Синхронные обработчики вызываются прямо в event loop: они должны быть
        быстрыми (обновить состояние, положить в очередь).
        """
        logger.debug("Публикация события: %s, данные: %s", event_type, event_data)

        for handler in list(self._sync_handlers.get(event_type, [])):
            try:
                handler(event_data)
            except Exception as e:
                logger.error("Ошибка в синхронном обработчике события %s: %s", event_type, e, exc_info=True)

        for handler in list(self._async_handlers.get(event_type, [])):
            try:
                await handler(event_data)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error("Ошибка в асинхронном обработчике события %s: %s", event_type, e, exc_info=True)

    def emit_sync(self, event_type: str, event_data: Dict[str, Any]) -> None:
        """
        Синхронная публикация события.

        ⚠️ ВАЖНО: асинхронные обработчики здесь НЕ вызываются.
        Используется там, где нет event loop (например, в тестах).
        """
        logger.debug("Синхронная публикация события: %s", event_type)
        handlers = self._sync_handlers.get(event_type)
        if not handlers:
            logger.warning("Нет синхронных обработчиков для события: %s", event_type)
            return
        for handler in list(handlers):
            try:
                handler(event_data)
            except Exception as e:
                logger.error("Ошибка в синхронном обработчике (sync): %s", e, exc_info=True)

    def clear(self) -> None:
        """Очищает все зарегистрированные обработчики. Используется в тестах."""
        self._sync_handlers.clear()
        self._async_handlers.clear()
        logger.info("Все обработчики событий очищены.")


# Общая шина приложения
default_bus = EventBus()


def subscribe(event_type: str, handler: SyncHandler) -> None:
    default_bus.subscribe(event_type, handler)


def subscribe_async(event_type: str, handler: AsyncHandler) -> None:
    default_bus.subscribe_async(event_type, handler)


def unsubscribe_async(event_type: str, handler: AsyncHandler) -> None:
    default_bus.unsubscribe(event_type, handler)


async def emit_event(event_type: str, event_data: Dict[str, Any]) -> None:
    await default_bus.emit(event_type, event_data)


def emit_event_sync(event_type: str, event_data: Dict[str, Any]) -> None:
    default_bus.emit_sync(event_type, event_data)


def clear_all_handlers() -> None:
    default_bus.clear()
