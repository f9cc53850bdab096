# -*- coding: utf-8 -*-
"""
Фильтр логов: убирает эмодзи для консолей, которые их не отображают.
"""

import logging
import re


class EmojiFilter(logging.Filter):
    """
    Фильтр, который убирает эмодзи и служебные символы из сообщений лога.
    Кириллица и «ёлочки» остаются.
    """
    EMOJI_PATTERN = re.compile(
        "["
        "\U0001f300-\U0001f5ff"  # symbols & pictographs
        "\U0001f600-\U0001f64f"  # emoticons
        "\U0001f680-\U0001f6ff"  # transport & map symbols
        "\U0001f900-\U0001f9ff"  # supplemental symbols
        "\u2190-\u21ff"          # arrows
        "\u2600-\u27bf"          # misc symbols, dingbats
        "\u2b00-\u2bff"
        "\ufe0f"                 # variation selector
        "]+",
        flags=re.UNICODE
    )

    def filter(self, record):
        if isinstance(record.msg, str):
            clean_msg = self.EMOJI_PATTERN.sub("", record.msg)
            record.msg = " ".join(clean_msg.split())
        return True
