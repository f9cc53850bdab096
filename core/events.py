# -*- coding: utf-8 -*-
"""
Имена событий, которые ядро публикует в сторону интерфейса.
"""

# === ОБНОВЛЕНИЕ ПОГОДЫ ===
LOADING_STATE = "loading_state"              # {"name", "loading": bool}
WEATHER_UPDATED = "weather_updated"          # {"name", "snapshot", "last_updated", "stale": bool}
STATUS_TEXT = "status_text"                  # {"name", "text"}
SHOW_MESSAGE = "show_message"                # {"name", "title", "message"}
FIRST_TIME_MESSAGE = "first_time_message"    # {"name", "text"}
REFRESH_ALL_COMPLETE = "refresh_all_complete"  # {"total", "succeeded", "failed"}

# === ПОИСК ===
SEARCH_RESULTS = "search_results"            # {"query", "suggestions": list}
SEARCH_STATUS = "search_status"              # {"query", "text": str | None}
LOCATION_SELECTED = "location_selected"      # {"name", "suggestion"}
