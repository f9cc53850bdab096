# app_context.py
# -*- coding: utf-8 -*-
"""
Глобальный координатор зависимостей.
Инициализирует все сервисы один раз и предоставляет к ним доступ.
"""

import logging
from typing import Optional

import httpx

from config.app_config import AppConfig
from config.logging_config import setup_logging
from core.db.location_repository import LocationRepository
from core.db.location_store import LocationStore
from core.event_bus import EventBus, default_bus
from core.refresh_orchestrator import RefreshOrchestrator
from core.search_debouncer import SearchDebouncer
from core.utils.api_client import OpenWeatherClient
from core.utils.city_search import CitySearchClient
from core.utils.error_handler import log_and_raise
from core.weather_session import WeatherSession

logger = logging.getLogger("app_context")


class AppContext:
    """
    Единый контекст приложения. Все зависимости инициализируются здесь.
    """

    def __init__(self, bus: EventBus = None):
        self._initialized = False
        self.bus = bus or default_bus
        # Конфигурация
        self.config: Optional[AppConfig] = None
        # Хранилище
        self.store: Optional[LocationStore] = None
        self.repository: Optional[LocationRepository] = None
        # Шлюзы
        self.http: Optional[httpx.AsyncClient] = None
        self.weather_client: Optional[OpenWeatherClient] = None
        self.search_client: Optional[CitySearchClient] = None
        # Оркестрация
        self.orchestrator: Optional[RefreshOrchestrator] = None
        self.debouncer: Optional[SearchDebouncer] = None

    async def initialize(self, config: AppConfig = None, weather_client=None, search_client=None,
                         configure_logging: bool = True):
        """Асинхронная инициализация всех компонентов."""
        if self._initialized:
            return

        # 1. Загрузка конфигурации
        self.config = config or AppConfig.load()
        if configure_logging:
            setup_logging(self.config.log_level)

        # 2. Хранилище локаций (ошибка чтения → пустой список, старт не блокируем)
        self.store = LocationStore(db_path=self.config.db_path)
        self.repository = LocationRepository(self.store)
        await self.repository.load()
        logger.info(f"📂 Загружено локаций: {len(self.repository)}")

        # 3. HTTP-шлюзы (общий клиент httpx)
        if weather_client is None and not self.config.weather_api_key:
            log_and_raise("❌ OPENWEATHER_API_KEY не задан", ValueError("OPENWEATHER_API_KEY не задан в .env!"))
        if weather_client is None or search_client is None:
            self.http = httpx.AsyncClient(timeout=self.config.api_timeout_sec)
        if weather_client is None:
            weather_client = OpenWeatherClient(
                api_key=self.config.weather_api_key,
                units=self.config.units,
                timeout=self.config.api_timeout_sec,
                http_client=self.http
            )
        if search_client is None:
            search_client = CitySearchClient(timeout=self.config.api_timeout_sec, http_client=self.http)
        self.weather_client = weather_client
        self.search_client = search_client

        # 4. Оркестратор обновлений и поиск
        self.orchestrator = RefreshOrchestrator(self.repository, self.weather_client, bus=self.bus)
        self.debouncer = SearchDebouncer(self.search_client, bus=self.bus, delay=self.config.search_debounce_sec)

        self._initialized = True
        logger.info("✅ AppContext: initialized")

    def open_session(self, index: int) -> WeatherSession:
        """Сессия экрана погоды для локации из списка."""
        location = self.repository.list()[index]
        return WeatherSession.from_location(location, orchestrator=self.orchestrator, bus=self.bus)

    async def shutdown(self):
        """Асинхронное завершение (закрытие ресурсов)."""
        if not self._initialized:
            return

        self.debouncer.cancel()
        if self.http is not None:
            await self.http.aclose()
            self.http = None
        self._initialized = False
        logger.info("🛑 AppContext: shut down")


# Глобальный экземпляр: точка доступа для всех модулей
app_context = AppContext()
