# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 16:45
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 回复用户的固定文案
"""

START_TPL = "Привет! Пришли мне текст или голосовое сообщение — я исправлю текст и верну результат."

OPEN_APP_TPL = "Открыть мини‑приложение"
OPEN_APP_BUTTON = "Open"
MENU_BUTTON_TEXT = "Open App"
WEB_APP_URL_MISSING = "WEB_APP_URL не задан. Укажите HTTPS ссылку в .env"

EMPTY_MESSAGE = "Пустое сообщение. Отправьте текст для исправления."
GENERIC_FAILURE = "Упс! Что-то пошло не так. Попробуйте ещё раз позже."

# web_app_data
EMPTY_TEXT = "Пустой текст"
EMPTY_QUERY = "Пустой запрос"
NO_DATA = "Нет данных"
UNSUPPORTED_PAYLOAD = "Неподдерживаемый формат данных из WebApp"
WEB_APP_FAILURE = "Не удалось обработать данные мини‑приложения"

# voice
RECOGNITION_DISABLED = "Распознавание речи отключено. Укажите DEEPGRAM_API_KEY в .env, чтобы включить."
RECOGNITION_FAILED = "Не удалось распознать речь. Попробуйте ещё раз."
VOICE_FAILURE = "Не удалось обработать голосовое сообщение. Попробуйте ещё раз позже."
