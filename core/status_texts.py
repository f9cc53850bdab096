# -*- coding: utf-8 -*-
"""
Тексты статусов и уведомлений, которые видит пользователь.
"""

# === ПОИСК ===
SEARCH_START_TYPING = "Начните вводить название города..."
SEARCH_SEARCHING = "🔎 Поиск…"
SEARCH_NO_RESULTS = "Ничего не найдено.\nПопробуйте другое написание."
SEARCH_FAILED = "❌ Что-то пошло не так.\nПопробуйте ещё раз."

# === ПОГОДА ===
WEATHER_UPDATING = "🔄 Обновляем погоду…"
WEATHER_UPDATE_FAILED = "Последнее обновление не удалось"
PICK_LOCATION_FIRST = "Сначала выберите локацию из списка."
NO_LOCATION_TITLE = "Нужна локация"
NO_LOCATION_MESSAGE = "Пожалуйста, сначала выберите локацию."
WEATHER_ERROR_TITLE = "Ошибка погоды"


def first_time_message(name: str) -> str:
    """Текст для локации, по которой ещё нет ни одного снимка."""
    return f"🌍 {name}: потяните вниз, чтобы загрузить погоду."


def weather_error_message(name: str, error: Exception) -> str:
    """Текст уведомления, когда не удалось загрузить погоду для новой локации."""
    return f"Не удалось загрузить погоду для «{name}».\n{error}"
