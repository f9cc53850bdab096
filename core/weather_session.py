# -*- coding: utf-8 -*-
"""
Состояние экрана погоды одной локации: название и последний снимок.
"""

import logging
from datetime import datetime
from typing import Optional

from core import events
from core import status_texts
from core.event_bus import EventBus, default_bus
from core.models.location import Location
from core.models.weather_snapshot import WeatherSnapshot

logger = logging.getLogger("weather_session")


class WeatherSession:

    def __init__(
        self,
        name: Optional[str] = None,
        cached_snapshot: Optional[WeatherSnapshot] = None,
        last_updated: Optional[datetime] = None,
        orchestrator=None,
        bus: EventBus = None
    ):
        self.name = name
        self.cached_snapshot = cached_snapshot
        self.last_updated = last_updated
        self.orchestrator = orchestrator
        self.bus = bus or default_bus

    @classmethod
    def from_location(cls, location: Location, orchestrator=None, bus: EventBus = None) -> "WeatherSession":
        return cls(
            name=location.name,
            cached_snapshot=location.snapshot,
            last_updated=location.last_updated,
            orchestrator=orchestrator,
            bus=bus
        )

    async def handle_initial_state(self) -> None:
        """Что показать до первого запроса: кэш, приглашение обновить или просьбу выбрать локацию."""
        if self.cached_snapshot is not None:
            await self.bus.emit(events.WEATHER_UPDATED, {
                "name": self.name,
                "snapshot": self.cached_snapshot,
                "last_updated": self.last_updated,
                "stale": False
            })
        elif self.name:
            await self.bus.emit(events.FIRST_TIME_MESSAGE, {
                "name": self.name,
                "text": status_texts.first_time_message(self.name)
            })
        else:
            await self.bus.emit(events.STATUS_TEXT, {"name": None, "text": status_texts.PICK_LOCATION_FIRST})

    async def refresh(self, typed_name: Optional[str] = None):
        """Обновляет погоду; название сессии важнее введённого вручную."""
        if self.orchestrator is None:
            raise RuntimeError("WeatherSession без оркестратора не умеет обновляться")
        chosen = self.name or typed_name or ""
        return await self.orchestrator.refresh_one(chosen, session=self)
