# -*- coding: utf-8 -*-
"""
Конфигурация путей к базе данных локаций.
Используется асинхронно (aiosqlite).
"""

from pathlib import Path

# === Корень проекта ===
PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# === Папка данных ===
DATA_DIR = PROJECT_ROOT / "data"

# === БАЗА ЛОКАЦИЙ: названия + последний снимок погоды ===
LOCATIONS_DB_PATH = DATA_DIR / "locations.db"

# === ПАРАМЕТРЫ ПОДКЛЮЧЕНИЯ ===
DB_CONNECTION_TIMEOUT = 30  # секунд


def ensure_data_dir(db_path: Path) -> None:
    """Создаёт папку для файла БД, если её ещё нет."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
