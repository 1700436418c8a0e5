# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 15:20
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Voice download and Deepgram transcription
"""
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from mybot.services import voice_service
from transcription.listen_client import DeepgramListenClient

DEEPGRAM_BASE_URL = "https://api.deepgram.com/v1"


def _listen_client(handler) -> DeepgramListenClient:
    client = DeepgramListenClient(api_key="dg-test", base_url=DEEPGRAM_BASE_URL)
    client._client = httpx.AsyncClient(
        base_url=DEEPGRAM_BASE_URL,
        headers={"Authorization": "Token dg-test"},
        transport=httpx.MockTransport(handler),
    )
    return client


class TestDeepgramListenClient:
    @pytest.mark.asyncio
    async def test_posts_raw_audio(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(
                200,
                json={
                    "results": {
                        "channels": [{"alternatives": [{"transcript": "Receive the message."}]}]
                    }
                },
            )

        client = _listen_client(handler)
        transcript = await client.transcribe(b"OggS\x00\x02", content_type="audio/ogg")

        request = seen["request"]
        assert transcript == "Receive the message."
        assert request.method == "POST"
        assert request.url.path == "/v1/listen"
        assert request.url.params["smart_format"] == "true"
        assert request.headers["Authorization"] == "Token dg-test"
        assert request.headers["Content-Type"] == "audio/ogg"
        assert request.content == b"OggS\x00\x02"
        await client.close()

    @pytest.mark.asyncio
    async def test_zero_channels(self):
        client = _listen_client(
            lambda request: httpx.Response(200, json={"results": {"channels": []}})
        )

        assert await client.transcribe(b"OggS") == ""
        await client.close()

    @pytest.mark.asyncio
    async def test_provider_error_raises(self):
        client = _listen_client(
            lambda request: httpx.Response(401, json={"err_code": "INVALID_AUTH"})
        )

        with pytest.raises(httpx.HTTPStatusError):
            await client.transcribe(b"OggS")
        await client.close()


class TestVoiceService:
    def test_disabled_without_key(self):
        config = Mock(is_voice_recognition_enabled=False)

        with patch.object(voice_service, "_listen_client", None):
            assert voice_service.init_listen_client(config) is None
            assert voice_service.get_listen_client() is None

    def test_enabled_with_key(self):
        config = Mock(is_voice_recognition_enabled=True, DEEPGRAM_BASE_URL=DEEPGRAM_BASE_URL)
        config.DEEPGRAM_API_KEY.get_secret_value.return_value = "dg-test"

        with patch.object(voice_service, "_listen_client", None):
            client = voice_service.init_listen_client(config)
            assert isinstance(client, DeepgramListenClient)
            assert voice_service.get_listen_client() is client

    @pytest.mark.asyncio
    async def test_transcribe_when_disabled(self):
        with patch.object(voice_service, "_listen_client", None):
            with pytest.raises(RuntimeError):
                await voice_service.transcribe(b"OggS")

    @pytest.mark.asyncio
    async def test_download_voice_resolves_file_link(self):
        bot = AsyncMock()
        bot.get_file.return_value = Mock(file_path="https://api.telegram.org/file/bot1/voice.oga")

        with patch.object(
            voice_service, "download_bytes", AsyncMock(return_value=b"OggS")
        ) as mock_download:
            audio = await voice_service.download_voice(bot, "voice-file-id")

        assert audio == b"OggS"
        bot.get_file.assert_awaited_once_with("voice-file-id")
        mock_download.assert_awaited_once_with("https://api.telegram.org/file/bot1/voice.oga")
