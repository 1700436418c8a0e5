# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 12:15
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Environment configuration
"""
import pytest

from settings import Settings, DEFAULT_MAX_OUTPUT_TOKENS

ENV_KEYS = [
    "TELEGRAM_BOT_TOKEN",
    "OPENROUTER_API_KEY",
    "DEEPGRAM_API_KEY",
    "WEB_APP_URL",
    "OPENAI_MODEL",
    "OPENAI_MAX_TOKENS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


class TestRequiredKeys:
    def test_both_missing(self):
        assert _settings().missing_required() == ["TELEGRAM_BOT_TOKEN", "OPENROUTER_API_KEY"]

    def test_blank_counts_as_missing(self):
        config = _settings(TELEGRAM_BOT_TOKEN="123:abc", OPENROUTER_API_KEY="   ")
        assert config.missing_required() == ["OPENROUTER_API_KEY"]

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-test")
        assert _settings().missing_required() == []


class TestMaxOutputTokens:
    def test_default(self):
        assert _settings().max_output_tokens == DEFAULT_MAX_OUTPUT_TOKENS

    @pytest.mark.parametrize("value, expected", [("300", 300), ("1024", 1024), (64, 64)])
    def test_valid_override(self, value, expected):
        assert _settings(OPENAI_MAX_TOKENS=value).max_output_tokens == expected

    @pytest.mark.parametrize("value", ["abc", "0", "-5", "inf", "nan", "0.4", ""])
    def test_invalid_falls_back(self, value):
        assert _settings(OPENAI_MAX_TOKENS=value).max_output_tokens == DEFAULT_MAX_OUTPUT_TOKENS

    def test_invalid_from_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_MAX_TOKENS", "lots")
        assert _settings().max_output_tokens == DEFAULT_MAX_OUTPUT_TOKENS


class TestOptionalKeys:
    def test_voice_recognition_toggle(self):
        assert not _settings().is_voice_recognition_enabled
        assert _settings(DEEPGRAM_API_KEY="dg-test").is_voice_recognition_enabled

    def test_model_override(self, monkeypatch):
        assert _settings().OPENAI_MODEL == "deepseek/deepseek-chat"
        monkeypatch.setenv("OPENAI_MODEL", "openai/gpt-4o-mini")
        assert _settings().OPENAI_MODEL == "openai/gpt-4o-mini"

    def test_web_app_url_is_trimmed(self):
        assert _settings(WEB_APP_URL="  https://example.com/app ").WEB_APP_URL == (
            "https://example.com/app"
        )

    def test_secrets_are_masked_in_dump(self):
        dumped = _settings(OPENROUTER_API_KEY="sk-or-secret").model_dump(mode="json")
        assert "sk-or-secret" not in str(dumped)
