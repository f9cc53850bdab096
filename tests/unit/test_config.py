# -*- coding: utf-8 -*-
"""
Тесты для config/app_config.py и утилит логирования.
"""
import logging
from pathlib import Path

import pytest

from config.app_config import DEFAULT_SEARCH_DEBOUNCE_SEC, AppConfig
from core.errors import StoreError
from core.utils.error_handler import log_and_raise, log_exception
from core.utils.log_filter import EmojiFilter


def test_load_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "abc123")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SEARCH_DEBOUNCE_SEC", "0.5")
    monkeypatch.setenv("LOCATIONS_DB_PATH", str(tmp_path / "x.db"))

    config = AppConfig.load()

    assert config.weather_api_key == "abc123"
    assert config.log_level == "DEBUG"
    assert config.search_debounce_sec == 0.5
    assert config.db_path == Path(tmp_path / "x.db")


def test_load_defaults(monkeypatch):
    for key in ["OPENWEATHER_API_KEY", "SEARCH_DEBOUNCE_SEC", "API_TIMEOUT_SEC", "WEATHER_UNITS"]:
        monkeypatch.delenv(key, raising=False)

    config = AppConfig.load()

    assert config.weather_api_key == ""
    assert config.units == "metric"
    assert config.search_debounce_sec == DEFAULT_SEARCH_DEBOUNCE_SEC


def test_emoji_filter_keeps_cyrillic():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "✅ Погода для «Paris» обновлена 🌍", None, None)

    assert EmojiFilter().filter(record) is True
    assert record.msg == "Погода для «Paris» обновлена"


def test_log_exception_for_core_error_has_no_traceback(caplog):
    with caplog.at_level(logging.INFO, logger="error_handler"):
        log_exception(StoreError("disk full"), "❌ Ошибка записи", {"name": "Paris"})

    record = caplog.records[-1]
    assert "name='Paris'" in record.getMessage()
    assert "StoreError: disk full" in record.getMessage()
    assert record.exc_info is None


def test_log_and_raise_reraises():
    with pytest.raises(ValueError):
        log_and_raise("❌ Нет ключа", ValueError("missing"))
