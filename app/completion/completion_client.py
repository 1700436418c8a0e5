# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 15:05
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : OpenAI-compatible chat completion client (OpenRouter by default)
"""
from typing import List, Dict

import openai
from loguru import logger


class CompletionClient:
    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str,
        *,
        referer: str = "http://localhost",
        title: str = "Telegram Chatty Bot",
    ):
        self.model = model
        # 单次请求，不做重试
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            default_headers={"HTTP-Referer": referer, "X-Title": title},
            max_retries=0,
        )

    async def complete(
        self, messages: List[Dict[str, str]], *, temperature: float, max_tokens: int
    ) -> str:
        """
        发起一次 chat completion

        Args:
            messages: [{"role": ..., "content": ...}, ...]
            temperature:
            max_tokens:

        Returns:
            choices[0].message.content 去除首尾空白后的文本；没有内容时返回空字符串

        Raises:
            openai.APIError: 网络错误或非 2xx 响应，交由调用方处理
        """
        logger.debug(
            f"Completion request: model={self.model} "
            f"temperature={temperature} max_tokens={max_tokens}"
        )
        completion = await self._client.chat.completions.create(
            model=self.model, messages=messages, temperature=temperature, max_tokens=max_tokens
        )

        if not completion.choices:
            logger.warning("Completion response has no choices")
            return ""

        content = completion.choices[0].message.content
        return (content or "").strip()

    async def close(self):
        await self._client.close()
