# -*- coding: utf-8 -*-
"""
Локация: название + последний снимок погоды.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .weather_snapshot import WeatherSnapshot


def normalize_name(name: str) -> str:
    """Ключ для сравнения: без пробелов по краям, без учёта регистра."""
    return name.strip().casefold()


@dataclass(frozen=True)
class Location:
    name: str  # регистр, введённый пользователем
    snapshot: Optional[WeatherSnapshot] = None
    last_updated: Optional[datetime] = None  # только после успешного обновления

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    def matches(self, name: str) -> bool:
        return self.key == normalize_name(name)
