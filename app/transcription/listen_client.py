# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 15:30
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Deepgram pre-recorded audio transcription
"""
from httpx import AsyncClient
from loguru import logger

from models import DeepgramListenResponse


class DeepgramListenClient:
    def __init__(self, api_key: str, base_url: str = "https://api.deepgram.com/v1"):
        headers = {"Authorization": f"Token {api_key}"}
        self._client = AsyncClient(base_url=base_url, headers=headers)

    async def listen(self, audio: bytes, content_type: str = "audio/ogg") -> DeepgramListenResponse:
        """
        上传原始音频并获取识别结果

        Telegram 的语音消息是 OGG/Opus 编码，直接以二进制 body 提交。
        """
        response = await self._client.post(
            "/listen",
            params={"smart_format": "true"},
            content=audio,
            headers={"Content-Type": content_type},
        )
        response.raise_for_status()
        return DeepgramListenResponse(**response.json())

    async def transcribe(self, audio: bytes, content_type: str = "audio/ogg") -> str:
        result = await self.listen(audio, content_type=content_type)
        transcript = result.transcript
        logger.debug(f"Deepgram transcript: {len(audio)} bytes -> {len(transcript)} chars")
        return transcript

    async def close(self):
        await self._client.aclose()
