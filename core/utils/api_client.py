# -*- coding: utf-8 -*-
"""
Клиент OpenWeather (текущая погода по названию города).

Один запрос, один ответ: без повторов и без собственного кэша,
кэш живёт в репозитории локаций. Любая неудача (сеть, таймаут,
HTTP-статус, разбор JSON) превращается в GatewayError.
"""
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from core.errors import GatewayError, InvalidInputError
from core.models.weather_snapshot import WeatherSnapshot

logger = logging.getLogger("api_client")

# === КОНФИГУРАЦИЯ API ===
OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
API_TIMEOUT = 10  # секунд


class OpenWeatherClient:
    """Шлюз погоды: fetch(name) -> WeatherSnapshot."""

    def __init__(
        self,
        api_key: str,
        units: str = "metric",
        timeout: float = API_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.api_key = api_key
        self.units = units
        self.timeout = timeout
        self._http = http_client
        self._owns_http = http_client is None

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self.timeout)
        return self._http

    async def fetch(self, name: str) -> WeatherSnapshot:
        """
        Получает текущую погоду для города.

        Args:
            name (str): Название города (например, "Paris")

        Returns:
            WeatherSnapshot: Снимок погоды

        Raises:
            InvalidInputError: Пустое название
            GatewayError: Любая ошибка запроса или разбора ответа
        """
        city = name.strip()
        if not city:
            raise InvalidInputError("Пустое название города")

        params = {
            "q": city,
            "appid": self.api_key,
            "units": self.units
        }

        logger.info(f"➡️ OpenWeather: запрос погоды для «{city}»")
        try:
            response = await self._client().get(OPENWEATHER_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
            snapshot = WeatherSnapshot.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.warning(f"⚠️ OpenWeather: город «{city}» не найден")
                raise GatewayError(f"Город «{city}» не найден", e) from e
            logger.error(f"❌ OpenWeather: HTTP {e.response.status_code} для «{city}»")
            raise GatewayError(f"Сервис погоды вернул HTTP {e.response.status_code}", e) from e
        except httpx.TimeoutException as e:
            logger.error(f"❌ OpenWeather: таймаут для «{city}»")
            raise GatewayError("Таймаут запроса погоды", e) from e
        except httpx.HTTPError as e:
            logger.error(f"❌ OpenWeather: ошибка сети: {e}")
            raise GatewayError("Ошибка сети при запросе погоды", e) from e
        except (ValueError, ValidationError) as e:
            logger.error(f"❌ OpenWeather: не удалось разобрать ответ: {e}")
            raise GatewayError("Некорректный ответ сервиса погоды", e) from e

        logger.info(f"✅ OpenWeather: погода получена для «{city}»")
        return snapshot

    async def aclose(self) -> None:
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None
