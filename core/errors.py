# -*- coding: utf-8 -*-
"""
Иерархия ошибок ядра.

- InvalidInputError: пустое название/запрос, до шлюза не доходит
- GatewayError: сеть, HTTP-статус, разбор ответа (исходная причина сохраняется)
- StoreError: ошибка долговременного хранилища
"""

from typing import Optional


class WeatherCoreError(Exception):
    """Базовая ошибка ядра."""


class InvalidInputError(WeatherCoreError):
    """Пустой или некорректный ввод пользователя."""


class GatewayError(WeatherCoreError):
    """Ошибка внешнего шлюза (погода или поиск)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class StoreError(WeatherCoreError):
    """Ошибка чтения/записи в БД локаций."""
