# -*- coding: utf-8 -*-
"""Конфигурация приложения."""
