# -*- coding: utf-8 -*-
"""Утилиты: HTTP-клиенты, логирование, форматирование."""
