# -*- coding: utf-8 -*-
"""
Результаты обновления погоды: одной локации и всех сразу.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from core.errors import GatewayError
from .weather_snapshot import WeatherSnapshot


class RefreshStatus(str, Enum):
    UPDATED = "updated"    # свежий снимок получен и сохранён
    STALE = "stale"        # ошибка, показан прежний снимок из кэша
    FAILED = "failed"      # ошибка, кэша нет, только статус
    INVALID = "invalid"    # пустое название, запроса не было


@dataclass(frozen=True)
class RefreshOutcome:
    name: str
    status: RefreshStatus
    snapshot: Optional[WeatherSnapshot] = None
    last_updated: Optional[datetime] = None
    error: Optional[GatewayError] = None


@dataclass
class BulkRefreshReport:
    total: int = 0
    succeeded: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
