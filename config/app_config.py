# -*- coding: utf-8 -*-
"""
Конфигурация приложения.
Значения читаются из окружения (.env подхватывается через python-dotenv).
"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from config.db_config import LOCATIONS_DB_PATH

load_dotenv()

# === ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ ===
DEFAULT_SEARCH_DEBOUNCE_SEC = 0.35
DEFAULT_API_TIMEOUT_SEC = 10.0


@dataclass
class AppConfig:
    weather_api_key: str
    log_level: str = "INFO"
    units: str = "metric"
    search_debounce_sec: float = DEFAULT_SEARCH_DEBOUNCE_SEC
    api_timeout_sec: float = DEFAULT_API_TIMEOUT_SEC
    db_path: Path = LOCATIONS_DB_PATH

    @classmethod
    def load(cls):
        return cls(
            weather_api_key=os.getenv("OPENWEATHER_API_KEY", ""),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            units=os.getenv("WEATHER_UNITS", "metric"),
            search_debounce_sec=float(os.getenv("SEARCH_DEBOUNCE_SEC", DEFAULT_SEARCH_DEBOUNCE_SEC)),
            api_timeout_sec=float(os.getenv("API_TIMEOUT_SEC", DEFAULT_API_TIMEOUT_SEC)),
            db_path=Path(os.getenv("LOCATIONS_DB_PATH", str(LOCATIONS_DB_PATH)))
        )
