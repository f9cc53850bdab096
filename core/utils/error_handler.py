# -*- coding: utf-8 -*-
"""
Единое логирование ошибок ядра.

Ошибки самого ядра (WeatherCoreError) ожидаемы: пишем одну строку,
трейсбек только на уровне DEBUG. Всё остальное пишем с трейсбеком.
"""

import logging
from typing import Optional

from core.errors import WeatherCoreError

logger = logging.getLogger("error_handler")


def _describe(message: str, exception: BaseException, context: Optional[dict]) -> str:
    parts = [message]
    if context:
        parts.append(", ".join(f"{key}={value!r}" for key, value in context.items()))
    parts.append(f"{type(exception).__name__}: {exception}")
    return " | ".join(parts)


def log_exception(exception: BaseException, message: str = "Необработанное исключение", context: Optional[dict] = None):
    """
    Логирует исключение и продолжает работу.

    Args:
        exception: Пойманное исключение
        message (str): Что делали в этот момент
        context (dict): Название локации, индекс и т.п.
    """
    text = _describe(message, exception, context)
    if isinstance(exception, WeatherCoreError):
        logger.error(text)
        logger.debug("Трейсбек:", exc_info=exception)
    else:
        logger.error(text, exc_info=exception)


def log_and_raise(message: str, exception: BaseException, context: Optional[dict] = None):
    """Логирует исключение и выбрасывает его дальше."""
    log_exception(exception, message, context)
    raise exception
