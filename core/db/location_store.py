# -*- coding: utf-8 -*-
"""
База данных локаций (SQLite, асинхронно через aiosqlite).

Таблица:
- locations: название (уникально без учёта регистра) + последний снимок погоды

Все ошибки драйвера заворачиваются в StoreError, решение о том,
что с ними делать, принимает репозиторий.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import aiosqlite
from pydantic import ValidationError

from config.db_config import DB_CONNECTION_TIMEOUT, LOCATIONS_DB_PATH, ensure_data_dir
from core.errors import StoreError
from core.models.location import Location
from core.models.weather_snapshot import WeatherSnapshot

logger = logging.getLogger("location_store")

# === SQL ЗАПРОСЫ ===
CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS locations (
    name TEXT PRIMARY KEY COLLATE NOCASE,
    snapshot_json TEXT,
    last_updated TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class LocationStore:
    """
    Долговременное хранилище локаций.
    Соединение открывается на каждую операцию, как и в остальных БД проекта.
    """

    def __init__(self, db_path: Path = None):
        self.db_path = Path(db_path or LOCATIONS_DB_PATH)

    def _connect(self):
        return aiosqlite.connect(self.db_path, timeout=DB_CONNECTION_TIMEOUT)

    async def init_db(self) -> None:
        """Создаёт таблицу при первом запуске."""
        try:
            ensure_data_dir(self.db_path)
            async with self._connect() as conn:
                await conn.executescript(CREATE_TABLES_SQL)
                await conn.commit()
            logger.info("БД локаций инициализирована: %s", self.db_path)
        except (aiosqlite.Error, OSError) as e:
            raise StoreError(f"Не удалось инициализировать БД локаций: {e}") from e

    async def insert(self, name: str) -> bool:
        """Добавляет локацию без снимка. Возвращает False, если такая уже есть."""
        try:
            async with self._connect() as conn:
                cursor = await conn.execute(
                    "INSERT OR IGNORE INTO locations (name) VALUES (?)",
                    (name,)
                )
                await conn.commit()
                return cursor.rowcount > 0
        except aiosqlite.Error as e:
            raise StoreError(f"Ошибка добавления локации «{name}»: {e}") from e

    async def upsert_snapshot(self, name: str, snapshot: WeatherSnapshot, updated_at: datetime) -> None:
        """
        Записывает снимок и время обновления одной командой.
        Если локации нет, создаёт её (поиск без учёта регистра через COLLATE NOCASE).
        """
        try:
            async with self._connect() as conn:
                await conn.execute(
                    """
                    INSERT INTO locations (name, snapshot_json, last_updated)
                    VALUES (?, ?, ?)
                    ON CONFLICT(name) DO UPDATE SET
                        snapshot_json = excluded.snapshot_json,
                        last_updated = excluded.last_updated
                    """,
                    (name, snapshot.to_json(), updated_at.isoformat())
                )
                await conn.commit()
        except aiosqlite.Error as e:
            raise StoreError(f"Ошибка сохранения погоды для «{name}»: {e}") from e

    async def delete(self, name: str) -> int:
        """Удаляет локацию. Возвращает количество удалённых строк."""
        try:
            async with self._connect() as conn:
                cursor = await conn.execute(
                    "DELETE FROM locations WHERE name = ?",
                    (name,)
                )
                await conn.commit()
                return cursor.rowcount
        except aiosqlite.Error as e:
            raise StoreError(f"Ошибка удаления локации «{name}»: {e}") from e

    async def list_all(self) -> List[Location]:
        """Возвращает все локации, отсортированные по названию."""
        try:
            async with self._connect() as conn:
                conn.row_factory = aiosqlite.Row
                async with conn.execute(
                    """
                    SELECT name, snapshot_json, last_updated
                    FROM locations
                    ORDER BY name COLLATE NOCASE ASC, name ASC
                    """
                ) as cursor:
                    rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise StoreError(f"Ошибка чтения локаций: {e}") from e

        return [self._row_to_location(row) for row in rows]

    @staticmethod
    def _row_to_location(row) -> Location:
        snapshot: Optional[WeatherSnapshot] = None
        if row["snapshot_json"]:
            try:
                snapshot = WeatherSnapshot.from_json(row["snapshot_json"])
            except ValidationError as e:
                logger.warning(f"⚠️ Снимок погоды для «{row['name']}» не читается, пропускаем: {e}")

        last_updated = None
        if row["last_updated"]:
            last_updated = datetime.fromisoformat(row["last_updated"])

        return Location(name=row["name"], snapshot=snapshot, last_updated=last_updated)
