# -*- coding: utf-8 -*-
"""
Форматирование для интерфейса: «обновлено N минут назад».
"""

from datetime import datetime
from typing import Optional

MINUTE = 60
HOUR = 60 * MINUTE


def relative_time(since: datetime, now: Optional[datetime] = None) -> str:
    """
    Возвращает, сколько прошло с момента обновления.

    >>> relative_time(datetime(2025, 1, 1, 12, 0), datetime(2025, 1, 1, 12, 5))
    '5 мин назад'
    """
    now = now or datetime.now()
    seconds = int((now - since).total_seconds())

    if seconds < MINUTE:
        return "только что"
    if seconds < HOUR:
        return f"{seconds // MINUTE} мин назад"
    return f"{seconds // HOUR} ч назад"
