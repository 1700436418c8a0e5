import math
from pathlib import Path
from typing import Any, List
from urllib.request import getproxies

import dotenv
from loguru import logger
from pydantic import SecretStr, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from telegram.ext import Application

dotenv.load_dotenv()


PROJECT_DIR = Path(__file__).parent
LOG_DIR = PROJECT_DIR.joinpath("logs")

DEFAULT_MAX_OUTPUT_TOKENS = 512


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    TELEGRAM_BOT_TOKEN: SecretStr = Field(
        default="", description="通过 https://t.me/BotFather 获取机器人的 API_TOKEN，必填"
    )

    OPENROUTER_API_KEY: SecretStr = Field(
        default="", description="OpenAI 兼容接口（默认 OpenRouter）的 API_KEY，必填"
    )

    OPENROUTER_BASE_URL: str = Field(
        default="https://openrouter.ai/api/v1", description="OpenAI 兼容接口的 base_url"
    )

    OPENROUTER_REFERER: str = Field(
        default="http://localhost", description="OpenRouter 排行榜使用的 HTTP-Referer 请求头"
    )

    OPENROUTER_TITLE: str = Field(
        default="Telegram Chatty Bot", description="OpenRouter 排行榜使用的 X-Title 请求头"
    )

    OPENAI_MODEL: str = Field(default="deepseek/deepseek-chat", description="纠错与查词使用的模型")

    OPENAI_MAX_TOKENS: int = Field(
        default=DEFAULT_MAX_OUTPUT_TOKENS,
        description="纠错请求的 max_tokens 上限。非正数或无法解析时回退到默认值。",
    )

    DEEPGRAM_API_KEY: SecretStr = Field(
        default="", description="Deepgram 语音识别的 API_KEY。留空则关闭语音识别。"
    )

    DEEPGRAM_BASE_URL: str = Field(
        default="https://api.deepgram.com/v1", description="Deepgram 接口地址"
    )

    WEB_APP_URL: str = Field(
        default="", description="小程序的 HTTPS 链接。配置后 /start 与 /app 会给出打开按钮。"
    )

    HTTP_REQUEST_TIMEOUT: float = Field(
        default=30.0, description="Telegram API 调用的 HTTP 超时时间（秒）"
    )

    @field_validator("OPENAI_MAX_TOKENS", mode="before")
    @classmethod
    def _sanitize_max_tokens(cls, value: Any) -> int:
        try:
            number = float(str(value).strip())
        except (TypeError, ValueError):
            logger.warning(f"OPENAI_MAX_TOKENS 无法解析，使用默认值 - {value!r}")
            return DEFAULT_MAX_OUTPUT_TOKENS

        if not math.isfinite(number) or int(number) <= 0:
            logger.warning(f"OPENAI_MAX_TOKENS 必须为正数，使用默认值 - {value!r}")
            return DEFAULT_MAX_OUTPUT_TOKENS

        return int(number)

    @field_validator("WEB_APP_URL", mode="before")
    @classmethod
    def _strip_web_app_url(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @property
    def max_output_tokens(self) -> int:
        return self.OPENAI_MAX_TOKENS

    @property
    def is_voice_recognition_enabled(self) -> bool:
        return bool(self.DEEPGRAM_API_KEY.get_secret_value().strip())

    def missing_required(self) -> List[str]:
        """Names of the required keys that are unset or blank."""
        required = {
            "TELEGRAM_BOT_TOKEN": self.TELEGRAM_BOT_TOKEN,
            "OPENROUTER_API_KEY": self.OPENROUTER_API_KEY,
        }
        return [name for name, secret in required.items() if not secret.get_secret_value().strip()]

    def get_default_application(self) -> Application:
        _base_builder = (
            Application.builder()
            .token(self.TELEGRAM_BOT_TOKEN.get_secret_value().strip())
            .connect_timeout(self.HTTP_REQUEST_TIMEOUT)
            .write_timeout(self.HTTP_REQUEST_TIMEOUT)
            .read_timeout(self.HTTP_REQUEST_TIMEOUT)
        )
        if proxy_url := getproxies().get("http"):
            logger.success(f"使用代理: {proxy_url}")
            application = _base_builder.proxy(proxy_url).get_updates_proxy(proxy_url).build()
        else:
            application = _base_builder.build()

        return application


settings = Settings()  # type: ignore
