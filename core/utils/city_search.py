# -*- coding: utf-8 -*-
"""
Поиск городов по названию через Open-Meteo Geocoding API.

Использование:
>>> client = CitySearchClient()
>>> suggestions = await client.search("Del")
>>> suggestions[0].display_name
'Delhi, Delhi, India'
"""

import logging
from typing import List, Optional

import httpx

from core.errors import GatewayError
from core.models.suggestion import Suggestion

logger = logging.getLogger("city_search")

# === КОНФИГУРАЦИЯ ===
GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
REQUEST_TIMEOUT = 10  # секунд
MAX_RESULTS = 100


class CitySearchClient:
    """Шлюз поиска: search(query) -> List[Suggestion]."""

    def __init__(
        self,
        timeout: float = REQUEST_TIMEOUT,
        language: str = "en",
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.timeout = timeout
        self.language = language
        self._http = http_client
        self._owns_http = http_client is None

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self.timeout)
        return self._http

    async def search(self, query: str) -> List[Suggestion]:
        """
        Возвращает варианты городов по началу названия.

        Args:
            query (str): Текст из поля поиска

        Returns:
            List[Suggestion]: Варианты (пустой список, если ничего не найдено)

        Raises:
            GatewayError: Ошибка сети или разбора ответа
        """
        trimmed = query.strip()
        if not trimmed:
            return []

        params = {
            "name": trimmed,
            "count": MAX_RESULTS,
            "language": self.language,
            "format": "json"
        }

        logger.info(f"🌍 Поиск городов: «{trimmed}»")
        try:
            response = await self._client().get(GEOCODING_URL, params=params, timeout=self.timeout)
            logger.debug("🌍 Поиск городов: HTTP %s", response.status_code)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"🔴 Поиск городов: HTTP {e.response.status_code}")
            raise GatewayError(f"Сервис поиска вернул HTTP {e.response.status_code}", e) from e
        except httpx.HTTPError as e:
            logger.error(f"🔴 Поиск городов: ошибка запроса: {e}")
            raise GatewayError("Ошибка сети при поиске города", e) from e
        except ValueError as e:
            logger.error(f"🔴 Поиск городов: ошибка разбора JSON: {e}")
            raise GatewayError("Некорректный ответ сервиса поиска", e) from e

        try:
            suggestions = [self._parse_item(item) for item in (data.get("results") or [])]
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(f"🔴 Поиск городов: неожиданный формат ответа: {e}")
            raise GatewayError("Некорректный ответ сервиса поиска", e) from e

        logger.info(f"✅ Поиск городов: {len(suggestions)} вариантов для «{trimmed}»")
        return suggestions

    @staticmethod
    def _parse_item(item: dict) -> Suggestion:
        return Suggestion(
            name=item["name"],
            country=item.get("country", ""),
            state=item.get("admin1"),
            lat=item.get("latitude"),
            lon=item.get("longitude")
        )

    async def aclose(self) -> None:
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None
