# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 18:05
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Classify every incoming update and route it to exactly one handler.
"""
from typing import Awaitable, Callable, Dict

from loguru import logger
from telegram import Update
from telegram.ext import ContextTypes

from models import EventKind
from mybot.handlers.command_handler import start_command, app_command
from mybot.handlers.message_handler import handle_text, handle_voice, handle_web_app_data
from mybot.task_manager import non_blocking_handler

Handler = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]

_COMMANDS: Dict[str, EventKind] = {"start": EventKind.START, "app": EventKind.OPEN_APP}

_HANDLERS: Dict[EventKind, Handler] = {
    EventKind.START: start_command,
    EventKind.OPEN_APP: app_command,
    EventKind.WEB_APP_DATA: handle_web_app_data,
    EventKind.TEXT: handle_text,
    EventKind.VOICE: handle_voice,
}


def _extract_command_name(message_text: str, bot_username: str | None) -> str:
    """
    从消息文本中提取命令名

    `/start@this_bot` resolves to `start`; a command addressed to another bot,
    or text that is not a command, resolves to an empty string.
    """
    if not message_text.startswith("/"):
        return ""

    parts = message_text[1:].split()
    if not parts:
        return ""

    command_part = parts[0]
    if "@" not in command_part:
        return command_part.lower()

    command_name, _, mention = command_part.partition("@")
    if bot_username and mention.lower() != bot_username.lstrip("@").lower():
        return ""
    return command_name.lower()


def classify_update(update: Update, bot_username: str | None = None) -> EventKind:
    message = update.message
    if not message:
        return EventKind.IGNORED

    if message.web_app_data:
        return EventKind.WEB_APP_DATA

    if message.voice:
        return EventKind.VOICE

    if message.text is not None:
        command_name = _extract_command_name(message.text, bot_username)
        return _COMMANDS.get(command_name, EventKind.TEXT)

    return EventKind.IGNORED


async def route_update(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    kind = classify_update(update, context.bot.username)
    logger.debug(f"{kind=}")

    handler = _HANDLERS.get(kind)
    if handler is None:
        return

    await handler(update, context)


dispatch_update = non_blocking_handler("dispatch_update")(route_update)
