# -*- coding: utf-8 -*-
"""
Вариант из поиска по названию. В БД не сохраняется.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Suggestion:
    name: str               # "Delhi"
    country: str            # "India"
    state: Optional[str] = None  # "Delhi" / "Tamil Nadu"
    lat: Optional[float] = None
    lon: Optional[float] = None

    @property
    def display_name(self) -> str:
        if self.state:
            return f"{self.name}, {self.state}, {self.country}"
        return f"{self.name}, {self.country}"
