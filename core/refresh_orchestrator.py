# -*- coding: utf-8 -*-
"""
Оркестратор обновления погоды.

- refresh_one(name) : одна локация, при ошибке показываем прежний снимок
- refresh_all()     : все локации параллельно, одно событие по завершении всех
- add_and_fetch(name): добавить локацию и сразу загрузить погоду

Ошибки шлюза при обновлении экрана не превращаются в диалог: либо прежний
снимок, либо строка статуса. Диалог (show_message) только при добавлении
новой локации.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from core import events
from core import status_texts
from core.db.location_repository import LocationRepository
from core.errors import GatewayError, InvalidInputError
from core.event_bus import EventBus, default_bus
from core.models.location import Location
from core.models.refresh import BulkRefreshReport, RefreshOutcome, RefreshStatus
from core.weather_session import WeatherSession

logger = logging.getLogger("refresh_orchestrator")


class RefreshOrchestrator:

    def __init__(
        self,
        repository: LocationRepository,
        weather_client,
        bus: EventBus = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.repository = repository
        self.weather_client = weather_client
        self.bus = bus or default_bus
        self._clock = clock

    # === ОДНА ЛОКАЦИЯ ===
    async def refresh_one(self, name: str, session: Optional[WeatherSession] = None) -> RefreshOutcome:
        """
        Обновляет погоду для одной локации.

        Args:
            name (str): Название локации
            session (WeatherSession): Кэш экрана; если не передан,
                берётся из сохранённой локации

        Returns:
            RefreshOutcome: updated / stale / failed / invalid
        """
        city = (name or "").strip()
        if not city:
            logger.warning("⚠️ Обновление без выбранной локации")
            await self.bus.emit(events.SHOW_MESSAGE, {
                "name": None,
                "title": status_texts.NO_LOCATION_TITLE,
                "message": status_texts.NO_LOCATION_MESSAGE
            })
            return RefreshOutcome(name="", status=RefreshStatus.INVALID)

        if session is None:
            session = WeatherSession.from_location(self.repository.get(city) or Location(name=city))
        session.name = city

        await self.bus.emit(events.LOADING_STATE, {"name": city, "loading": True})
        await self.bus.emit(events.STATUS_TEXT, {"name": city, "text": status_texts.WEATHER_UPDATING})

        try:
            snapshot = await self.weather_client.fetch(city)
        except Exception as e:
            return await self._handle_refresh_failure(city, session, e)

        session.cached_snapshot = snapshot
        session.last_updated = self._clock()
        await self.repository.update_snapshot(city, snapshot)

        await self.bus.emit(events.LOADING_STATE, {"name": city, "loading": False})
        await self.bus.emit(events.WEATHER_UPDATED, {
            "name": city,
            "snapshot": snapshot,
            "last_updated": session.last_updated,
            "stale": False
        })
        logger.info(f"✅ Погода для «{city}» обновлена")
        return RefreshOutcome(
            name=city,
            status=RefreshStatus.UPDATED,
            snapshot=snapshot,
            last_updated=session.last_updated
        )

    async def _handle_refresh_failure(self, city: str, session: WeatherSession, error) -> RefreshOutcome:
        if not isinstance(error, GatewayError):
            error = GatewayError(str(error), error)
        logger.warning(f"⚠️ Не удалось обновить погоду для «{city}»: {error}")

        await self.bus.emit(events.LOADING_STATE, {"name": city, "loading": False})

        if session.cached_snapshot is not None:
            await self.bus.emit(events.WEATHER_UPDATED, {
                "name": city,
                "snapshot": session.cached_snapshot,
                "last_updated": session.last_updated,
                "stale": True
            })
            return RefreshOutcome(
                name=city,
                status=RefreshStatus.STALE,
                snapshot=session.cached_snapshot,
                last_updated=session.last_updated,
                error=error
            )

        await self.bus.emit(events.STATUS_TEXT, {"name": city, "text": status_texts.WEATHER_UPDATE_FAILED})
        return RefreshOutcome(name=city, status=RefreshStatus.FAILED, error=error)

    # === ВСЕ ЛОКАЦИИ ===
    async def refresh_all(self) -> BulkRefreshReport:
        """
        Обновляет все локации параллельно.

        Список фиксируется в момент вызова. Ошибка одной локации логируется
        и на остальные не влияет. Успешные снимки сохраняются по мере
        поступления. Событие refresh_all_complete ровно одно, после всех.
        """
        batch = self.repository.list()
        report = BulkRefreshReport(total=len(batch))

        if batch:
            logger.info(f"🌐 Обновляем погоду для {len(batch)} локаций")
            results = await asyncio.gather(
                *(self._refresh_item(location.name, report) for location in batch),
                return_exceptions=True
            )
            for location, result in zip(batch, results):
                if isinstance(result, Exception):
                    logger.error(f"❌ Неожиданная ошибка при обновлении «{location.name}»: {result!r}")
                    report.failed.append(location.name)
        else:
            logger.info("Список локаций пуст, обновлять нечего")

        logger.info(f"🏁 Обновление завершено: успешно {len(report.succeeded)}, ошибок {len(report.failed)}")
        await self.bus.emit(events.REFRESH_ALL_COMPLETE, {
            "total": report.total,
            "succeeded": list(report.succeeded),
            "failed": list(report.failed)
        })
        return report

    async def _refresh_item(self, name: str, report: BulkRefreshReport) -> None:
        try:
            snapshot = await self.weather_client.fetch(name)
        except (GatewayError, InvalidInputError) as e:
            logger.error(f"❌ Не удалось обновить погоду для «{name}»: {e}")
            report.failed.append(name)
            return
        await self.repository.update_snapshot(name, snapshot)
        report.succeeded.append(name)

    # === ДОБАВЛЕНИЕ ===
    async def add_and_fetch(self, name: str) -> Optional[GatewayError]:
        """
        Добавляет локацию (она сразу появляется в списке) и загружает погоду.

        При ошибке загрузки локация остаётся, а пользователь получает
        уведомление show_message, которое можно просто закрыть.

        Returns:
            Optional[GatewayError]: Ошибка загрузки или None
        """
        city = (name or "").strip()
        if not city:
            return None

        await self.repository.add(city)

        try:
            snapshot = await self.weather_client.fetch(city)
        except Exception as e:
            error = e if isinstance(e, GatewayError) else GatewayError(str(e), e)
            logger.warning(f"⚠️ Локация «{city}» добавлена, но погода не загружена: {error}")
            await self.bus.emit(events.SHOW_MESSAGE, {
                "name": city,
                "title": status_texts.WEATHER_ERROR_TITLE,
                "message": status_texts.weather_error_message(city, error)
            })
            return error

        await self.repository.update_snapshot(city, snapshot)
        return None
