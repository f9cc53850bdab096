# -*- coding: utf-8 -*-
"""
Подставные шлюзы и хранилища для тестов.
"""
import asyncio
from typing import Dict, List, Optional, Union

from core import events
from core.db.location_store import LocationStore
from core.errors import GatewayError, StoreError
from core.event_bus import EventBus
from core.models.suggestion import Suggestion
from core.models.weather_snapshot import WeatherSnapshot

ALL_EVENTS = [
    events.LOADING_STATE,
    events.WEATHER_UPDATED,
    events.STATUS_TEXT,
    events.SHOW_MESSAGE,
    events.FIRST_TIME_MESSAGE,
    events.REFRESH_ALL_COMPLETE,
    events.SEARCH_RESULTS,
    events.SEARCH_STATUS,
    events.LOCATION_SELECTED,
]


def make_snapshot(name: str, temp: float = 20.0, description: str = "clear sky") -> WeatherSnapshot:
    return WeatherSnapshot.model_validate({
        "name": name,
        "main": {"temp": temp, "feels_like": temp - 1, "temp_min": temp - 2, "temp_max": temp + 2, "humidity": 60, "pressure": 1013},
        "weather": [{"id": 800, "main": "Clear", "description": description, "icon": "01d"}],
        "wind": {"speed": 3.5, "deg": 180},
        "sys": {"country": "FR", "sunrise": 1700000000, "sunset": 1700040000},
        "timezone": 3600,
        "dt": 1700020000
    })


class EventRecorder:
    """Записывает все события шины в порядке публикации."""

    def __init__(self, bus: EventBus):
        self.events = []
        for event_type in ALL_EVENTS:
            bus.subscribe(event_type, self._make_handler(event_type))

    def _make_handler(self, event_type):
        def handler(event):
            self.events.append((event_type, event))
        return handler

    def of(self, event_type: str) -> List[dict]:
        return [data for kind, data in self.events if kind == event_type]

    def kinds(self) -> List[str]:
        return [kind for kind, _ in self.events]


class FakeWeatherClient:
    """
    Шлюз погоды: ответы по названию (без учёта регистра).
    Значение: снимок или исключение; отсутствующее название → GatewayError.
    """

    def __init__(self, responses: Dict[str, Union[WeatherSnapshot, Exception]] = None,
                 delays: Dict[str, float] = None):
        self.responses = {k.lower(): v for k, v in (responses or {}).items()}
        self.delays = {k.lower(): v for k, v in (delays or {}).items()}
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, name: str) -> WeatherSnapshot:
        self.calls.append(name)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(name.lower(), 0))
            result = self.responses.get(name.lower())
            if result is None:
                raise GatewayError(f"Город «{name}» не найден")
            if isinstance(result, Exception):
                raise result
            return result
        finally:
            self.in_flight -= 1


class FakeSearchClient:
    """Шлюз поиска: ответы по запросу, задержка имитирует сеть."""

    def __init__(self, responses: Dict[str, Union[List[Suggestion], Exception]] = None, delay: float = 0.0):
        self.responses = responses or {}
        self.delay = delay
        self.calls: List[str] = []

    async def search(self, query: str) -> List[Suggestion]:
        self.calls.append(query)
        await asyncio.sleep(self.delay)
        result = self.responses.get(query, [])
        if isinstance(result, Exception):
            raise result
        return result


class FlakyLocationStore(LocationStore):
    """Настоящая БД, но отдельные операции можно «сломать»."""

    def __init__(self, db_path, fail_on: Optional[set] = None):
        super().__init__(db_path)
        self.fail_on = fail_on or set()

    def _check(self, op: str):
        if op in self.fail_on:
            raise StoreError(f"сбой операции {op}")

    async def init_db(self):
        self._check("init_db")
        await super().init_db()

    async def insert(self, name):
        self._check("insert")
        return await super().insert(name)

    async def upsert_snapshot(self, name, snapshot, updated_at):
        self._check("upsert_snapshot")
        await super().upsert_snapshot(name, snapshot, updated_at)

    async def delete(self, name):
        self._check("delete")
        return await super().delete(name)

    async def list_all(self):
        self._check("list_all")
        return await super().list_all()
