# config/logging_config.py
# -*- coding: utf-8 -*-
"""
Логирование приложения: файл с ротацией + консоль.
"""
import logging
import logging.handlers
from pathlib import Path

LOGS_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "weather_core.log"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-20s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Библиотеки, которые пишут каждый запрос
NOISY_LOGGERS = ("httpx", "httpcore", "aiosqlite")


def setup_logging(log_level: str = "INFO", log_dir: Path = None, strip_emoji: bool = False) -> None:
    """
    Настраивает root-логгер. Повторный вызов обработчики не дублирует.

    Args:
        log_level (str): Уровень для root-логгера ("DEBUG", "INFO", ...)
        log_dir (Path): Папка для логов (по умолчанию logs/ в корне проекта)
        strip_emoji (bool): Убирать эмодзи из вывода в консоль
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if not root.handlers:
        log_dir = log_dir or LOGS_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        if strip_emoji:
            from core.utils.log_filter import EmojiFilter
            console_handler.addFilter(EmojiFilter())
        root.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("logging_config").info("🔧 Логирование инициализировано")
