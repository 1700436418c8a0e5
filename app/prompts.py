# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 14:40
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 提示词模板
"""

# 纠错：system 角色，要求模型严格返回四行
CORRECTION_SYSTEM_PROMPT = (
    "Ты помощник-редактор. Исправляй орфографию, грамматику и пунктуацию. "
    "Верни четыре строки строго в этом формате без лишнего текста и маркдауна:\n"
    "Оригинальный текст: <оригинальный текст>\n"
    "Исправленный текст: <исправленный текст>\n"
    "Перевод: <если исходный язык английский — переведи на русский; если русский — на английский>\n"
    "Обьяснение: <1–3 коротких пункта, какие правки внесены и почему>"
)

# 查词：仅 user 角色
LOOKUP_PROMPT_TEMPLATE = """Ты двуязычный лингвист. Для фразы или слова:
"{query}"
Дай краткий вывод в 3–5 строках:
1) Translation (RU↔EN)
2) Meaning (кратко)
3) Examples (2 очень коротких примера)
Форматируй кратко, без лишних пояснений."""
