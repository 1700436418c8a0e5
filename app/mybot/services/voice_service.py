# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 16:20
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Voice message download and speech-to-text.
"""
import httpx
from loguru import logger
from telegram import Bot

from settings import Settings, settings
from transcription.listen_client import DeepgramListenClient

VOICE_CONTENT_TYPE = "audio/ogg"

_listen_client: DeepgramListenClient | None = None


def init_listen_client(config: Settings = settings) -> DeepgramListenClient | None:
    """
    Create the process-wide Deepgram client. Called once at startup.

    Returns None when DEEPGRAM_API_KEY is not configured, which disables recognition.
    """
    global _listen_client
    if not config.is_voice_recognition_enabled:
        logger.warning("DEEPGRAM_API_KEY 未配置，语音识别已关闭")
        _listen_client = None
        return None

    _listen_client = DeepgramListenClient(
        api_key=config.DEEPGRAM_API_KEY.get_secret_value().strip(),
        base_url=config.DEEPGRAM_BASE_URL,
    )
    logger.success("Deepgram client ready")
    return _listen_client


def get_listen_client() -> DeepgramListenClient | None:
    return _listen_client


async def resolve_file_url(bot: Bot, file_id: str) -> str:
    """Resolve a Telegram file_id to a downloadable URL."""
    file_obj = await bot.get_file(file_id)
    return file_obj.file_path


async def download_bytes(url: str) -> bytes:
    async with httpx.AsyncClient() as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.content


async def download_voice(bot: Bot, file_id: str) -> bytes:
    url = await resolve_file_url(bot, file_id)
    audio = await download_bytes(url)
    logger.debug(f"Downloaded voice {file_id}: {len(audio)} bytes")
    return audio


async def transcribe(audio: bytes) -> str:
    """
    Transcribe OGG/Opus audio.

    Raises:
        RuntimeError: recognition is disabled; check get_listen_client() first
    """
    client = get_listen_client()
    if client is None:
        raise RuntimeError("Speech recognition is disabled")
    return await client.transcribe(audio, content_type=VOICE_CONTENT_TYPE)
