# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 14:10
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Payload and response models
"""
import json
from enum import Enum
from typing import Literal, List, Union, Annotated

from pydantic import BaseModel, Field, TypeAdapter, ValidationError


class ConfigurationError(RuntimeError):
    """Required configuration is missing, the process must not start."""


class UnsupportedPayloadError(ValueError):
    """The mini app sent data that does not match any known payload."""


class EventKind(str, Enum):
    START = "start"
    """
    /start 会话开始
    """

    OPEN_APP = "open_app"
    """
    /app 打开小程序
    """

    WEB_APP_DATA = "web_app_data"
    """
    小程序通过 sendData 回传的结构化数据
    """

    TEXT = "text"
    """
    普通文本消息
    """

    VOICE = "voice"
    """
    语音消息
    """

    IGNORED = "ignored"
    """
    无需处理的更新
    """


class TextPayload(BaseModel):
    type: Literal["text"]
    text: str = Field(strict=True, description="需要纠错的文本")


class LookupPayload(BaseModel):
    type: Literal["lookup"]
    text: str = Field(strict=True, description="需要查询的单词或短语")


WebAppPayload = Annotated[Union[TextPayload, LookupPayload], Field(discriminator="type")]

_web_app_payload_adapter = TypeAdapter(WebAppPayload)


def parse_web_app_payload(raw: str) -> TextPayload | LookupPayload:
    """
    解析小程序回传的 JSON 数据

    Raises:
        UnsupportedPayloadError: JSON 不合法、缺少字段或 type 不是 text / lookup
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as err:
        raise UnsupportedPayloadError(f"Invalid JSON: {err}") from err

    if not isinstance(data, dict):
        raise UnsupportedPayloadError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return _web_app_payload_adapter.validate_python(data)
    except ValidationError as err:
        raise UnsupportedPayloadError(str(err)) from err


class ListenAlternative(BaseModel):
    transcript: str | None = Field(default="")
    confidence: float | None = Field(default=None)


class ListenChannel(BaseModel):
    alternatives: List[ListenAlternative] | None = Field(default_factory=list)


class ListenResults(BaseModel):
    channels: List[ListenChannel] | None = Field(default_factory=list)


class DeepgramListenResponse(BaseModel):
    results: ListenResults | None = Field(default=None)

    @property
    def transcript(self) -> str:
        """First channel, first alternative. Empty when the provider returned nothing."""
        if not self.results or not self.results.channels:
            return ""
        alternatives = self.results.channels[0].alternatives
        if not alternatives:
            return ""
        return alternatives[0].transcript or ""
