# -*- coding: utf-8 -*-
"""Хранилище локаций."""
