# -*- coding: utf-8 -*-
"""
Тесты для core/utils/formatter.py
"""
from datetime import datetime, timedelta

from core.utils.formatter import relative_time

NOW = datetime(2025, 1, 1, 12, 0, 0)


def test_relative_time():
    assert relative_time(NOW - timedelta(seconds=30), NOW) == "только что"
    assert relative_time(NOW - timedelta(minutes=5), NOW) == "5 мин назад"
    assert relative_time(NOW - timedelta(minutes=59, seconds=59), NOW) == "59 мин назад"
    assert relative_time(NOW - timedelta(hours=3, minutes=10), NOW) == "3 ч назад"
