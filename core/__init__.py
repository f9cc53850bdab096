# -*- coding: utf-8 -*-
"""Ядро: хранилище локаций, обновление погоды, поиск."""
