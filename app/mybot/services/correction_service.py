# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 16:00
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Grammar correction and word lookup on top of the completion API.
"""
from loguru import logger

from completion.completion_client import CompletionClient
from prompts import CORRECTION_SYSTEM_PROMPT, LOOKUP_PROMPT_TEMPLATE
from settings import Settings, settings

TEMPERATURE = 0.2
LOOKUP_MAX_TOKENS = 256

_completion_client: CompletionClient | None = None


def init_completion_client(config: Settings = settings) -> CompletionClient:
    """Create the process-wide completion client. Called once at startup."""
    global _completion_client
    _completion_client = CompletionClient(
        api_key=config.OPENROUTER_API_KEY.get_secret_value().strip(),
        base_url=config.OPENROUTER_BASE_URL,
        model=config.OPENAI_MODEL,
        referer=config.OPENROUTER_REFERER,
        title=config.OPENROUTER_TITLE,
    )
    logger.success(f"Completion client ready: model={config.OPENAI_MODEL}")
    return _completion_client


def get_completion_client() -> CompletionClient:
    if _completion_client is None:
        raise RuntimeError("Completion client is not initialized, call init_completion_client()")
    return _completion_client


async def correct_text(text: str) -> str:
    """
    纠正拼写、语法和标点

    返回模型输出的四行结果；模型没有给出内容时原样返回输入。
    网络或接口异常直接抛出，由调用方回复用户。
    """
    if not text.strip():
        return text

    messages = [
        {"role": "system", "content": CORRECTION_SYSTEM_PROMPT},
        {"role": "user", "content": text},
    ]
    output = await get_completion_client().complete(
        messages, temperature=TEMPERATURE, max_tokens=settings.max_output_tokens
    )
    if not output:
        logger.warning("Empty correction output, falling back to the original text")
    return output or text


async def lookup_word_brief(query: str) -> str:
    """Short bilingual gloss of a word or phrase, or an empty string."""
    messages = [{"role": "user", "content": LOOKUP_PROMPT_TEMPLATE.format(query=query)}]
    return await get_completion_client().complete(
        messages, temperature=TEMPERATURE, max_tokens=LOOKUP_MAX_TOKENS
    )
