# -*- coding: utf-8 -*-
"""
Репозиторий локаций: единственный источник правды для списка.

Правила:
- не больше одной локации на название без учёта регистра
- список всегда отсортирован по названию
- каждая запись в БД сопровождается перечиткой (persist → reload),
  других путей изменить список в памяти нет
- записи сериализованы одним asyncio.Lock
- ошибки БД логируются и наружу не выбрасываются
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional, Tuple

from core.db.location_store import LocationStore
from core.errors import StoreError
from core.models.location import Location
from core.models.weather_snapshot import WeatherSnapshot
from core.utils.error_handler import log_exception

logger = logging.getLogger("location_repository")


class LocationRepository:

    def __init__(self, store: LocationStore, clock: Callable[[], datetime] = datetime.now):
        self._store = store
        self._clock = clock
        self._lock = asyncio.Lock()
        self._locations: Tuple[Location, ...] = ()

    # === ЧТЕНИЕ ===
    def list(self) -> Tuple[Location, ...]:
        """Локации из последней успешной перечитки, по названию."""
        return self._locations

    def get(self, name: str) -> Optional[Location]:
        for location in self._locations:
            if location.matches(name):
                return location
        return None

    def __len__(self) -> int:
        return len(self._locations)

    async def load(self) -> None:
        """
        Первичная загрузка при старте.
        Если БД не читается, стартуем с пустым списком.
        """
        async with self._lock:
            try:
                await self._store.init_db()
            except StoreError as e:
                logger.error(f"❌ {e}")
                self._locations = ()
                return
            if not await self._reload():
                self._locations = ()

    # === ИЗМЕНЕНИЯ ===
    async def add(self, name: str) -> None:
        """
        Добавляет локацию без снимка.
        Пустое название или дубль (без учёта регистра): ничего не делаем.
        """
        name = name.strip()
        if not name:
            return

        async with self._lock:
            if self.get(name) is not None:
                logger.debug("Локация «%s» уже есть, пропускаем", name)
                return
            try:
                await self._store.insert(name)
                logger.info(f"📍 Локация «{name}» добавлена")
            except StoreError as e:
                log_exception(e, "❌ Ошибка записи в БД локаций", {"name": name})
            await self._reload()

    async def update_snapshot(self, name: str, snapshot: WeatherSnapshot) -> None:
        """
        Сохраняет свежий снимок и ставит отметку времени.
        Если локации нет (обновление обогнало добавление), создаёт её.
        """
        name = name.strip()
        if not name:
            return

        async with self._lock:
            existing = self.get(name)
            stored_name = existing.name if existing else name
            try:
                await self._store.upsert_snapshot(stored_name, snapshot, self._clock())
                logger.info(f"💾 Погода для «{stored_name}» сохранена")
            except StoreError as e:
                log_exception(e, "❌ Ошибка записи в БД локаций", {"name": stored_name})
            await self._reload()

    async def delete(self, index: int) -> None:
        """Удаляет локацию по позиции в текущем списке. Неверный индекс: ничего не делаем."""
        async with self._lock:
            if not 0 <= index < len(self._locations):
                logger.debug("Индекс %s вне списка из %d локаций", index, len(self._locations))
                return
            location = self._locations[index]
            try:
                await self._store.delete(location.name)
                logger.info(f"🗑️ Локация «{location.name}» удалена")
            except StoreError as e:
                log_exception(e, "❌ Ошибка удаления из БД локаций", {"index": index, "name": location.name})
            await self._reload()

    # === ВНУТРЕННЕЕ ===
    async def _reload(self) -> bool:
        """Перечитывает список из БД. При ошибке оставляет прежний."""
        try:
            locations = await self._store.list_all()
        except StoreError as e:
            logger.error(f"❌ {e}, оставляем последний успешно загруженный список")
            return False
        self._locations = tuple(locations)
        return True
