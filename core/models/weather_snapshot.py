# -*- coding: utf-8 -*-
"""
Снимок погоды в формате ответа OpenWeather (current weather).

Ядро не интерпретирует поля: снимок копируется в локацию целиком
и сохраняется в БД как JSON.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    # Неизвестные поля API сохраняем как есть
    model_config = ConfigDict(frozen=True, extra="allow")


class MainInfo(_Frozen):
    temp: float
    feels_like: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    humidity: Optional[int] = None
    pressure: Optional[int] = None


class ConditionInfo(_Frozen):
    id: Optional[int] = None
    main: str = ""
    description: str = ""
    icon: Optional[str] = None


class WindInfo(_Frozen):
    speed: Optional[float] = None
    deg: Optional[int] = None


class SysInfo(_Frozen):
    country: Optional[str] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


class WeatherSnapshot(_Frozen):
    """Последний успешно полученный ответ о погоде."""

    name: str = ""
    main: MainInfo
    weather: List[ConditionInfo] = Field(default_factory=list)
    wind: WindInfo = Field(default_factory=WindInfo)
    sys: SysInfo = Field(default_factory=SysInfo)
    timezone: int = 0  # смещение от UTC, секунды
    dt: Optional[int] = None

    @property
    def condition(self) -> Optional[ConditionInfo]:
        return self.weather[0] if self.weather else None

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, raw: str) -> "WeatherSnapshot":
        return cls.model_validate_json(raw)
