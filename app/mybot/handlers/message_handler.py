# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 17:40
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Text, voice and mini app data handlers.
"""
from loguru import logger
from telegram import Update
from telegram.constants import ChatAction
from telegram.ext import ContextTypes

from models import TextPayload, UnsupportedPayloadError, parse_web_app_payload
from mybot.replies import (
    EMPTY_MESSAGE,
    GENERIC_FAILURE,
    EMPTY_TEXT,
    EMPTY_QUERY,
    NO_DATA,
    UNSUPPORTED_PAYLOAD,
    WEB_APP_FAILURE,
    RECOGNITION_DISABLED,
    RECOGNITION_FAILED,
    VOICE_FAILURE,
)
from mybot.services import correction_service, voice_service


async def _send_typing(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await context.bot.send_chat_action(chat_id=update.message.chat_id, action=ChatAction.TYPING)


async def handle_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.message
    try:
        await _send_typing(update, context)
        user_text = (message.text or "").strip()
        if not user_text:
            await message.reply_text(EMPTY_MESSAGE)
            return

        corrected = await correction_service.correct_text(user_text)
        await message.reply_text(corrected)
    except Exception as e:
        logger.exception(f"Text correction failed: {e}")
        await message.reply_text(GENERIC_FAILURE)


async def handle_web_app_data(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    处理小程序通过 sendData 回传的数据

    支持 {"type": "text", "text": ...} 纠错 与 {"type": "lookup", "text": ...} 查词，
    其余格式统一回复不支持。
    """
    message = update.message
    try:
        payload = parse_web_app_payload(message.web_app_data.data)
    except UnsupportedPayloadError as e:
        logger.warning(f"Unsupported web_app_data: {e}")
        await message.reply_text(UNSUPPORTED_PAYLOAD)
        return

    text = payload.text.strip()
    is_correction = isinstance(payload, TextPayload)
    if not text:
        await message.reply_text(EMPTY_TEXT if is_correction else EMPTY_QUERY)
        return

    try:
        await _send_typing(update, context)
        if is_correction:
            answer = await correction_service.correct_text(text)
        else:
            answer = await correction_service.lookup_word_brief(text) or NO_DATA
        await message.reply_text(answer)
    except Exception as e:
        logger.exception(f"web_app_data {payload.type} failed: {e}")
        await message.reply_text(WEB_APP_FAILURE)


async def handle_voice(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    语音消息：下载 -> 识别 -> 纠错

    Every path ends with exactly one reply.
    """
    message = update.message
    try:
        await _send_typing(update, context)

        if voice_service.get_listen_client() is None:
            await message.reply_text(RECOGNITION_DISABLED)
            return

        audio = await voice_service.download_voice(context.bot, message.voice.file_id)
        transcript = (await voice_service.transcribe(audio)).strip()
        if not transcript:
            await message.reply_text(RECOGNITION_FAILED)
            return

        corrected = await correction_service.correct_text(transcript)
        await message.reply_text(corrected or transcript or RECOGNITION_FAILED)
    except Exception as e:
        logger.exception(f"Voice message failed: {e}")
        await message.reply_text(VOICE_FAILURE)
