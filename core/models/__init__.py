# -*- coding: utf-8 -*-
"""
Модели данных.
"""

from .location import Location
from .refresh import BulkRefreshReport, RefreshOutcome, RefreshStatus
from .suggestion import Suggestion
from .weather_snapshot import WeatherSnapshot

__all__ = [
    "Location",
    "Suggestion",
    "WeatherSnapshot",
    "RefreshOutcome",
    "RefreshStatus",
    "BulkRefreshReport",
]
