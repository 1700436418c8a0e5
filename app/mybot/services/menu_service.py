# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 17:05
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Bot command menu and mini app entry points.
"""
from loguru import logger
from telegram import (
    Bot,
    BotCommand,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    MenuButtonWebApp,
    WebAppInfo,
)
from telegram.ext import Application

from mybot.replies import OPEN_APP_BUTTON, MENU_BUTTON_TEXT
from settings import settings

BOT_COMMANDS = [
    BotCommand("start", "Начать"),
    BotCommand("app", "Открыть мини‑приложение"),
]


def build_open_app_markup(web_app_url: str) -> InlineKeyboardMarkup:
    button = InlineKeyboardButton(text=OPEN_APP_BUTTON, web_app=WebAppInfo(url=web_app_url))
    return InlineKeyboardMarkup([[button]])


async def configure_menu_button(bot: Bot, web_app_url: str, chat_id: int | None = None) -> bool:
    """
    把聊天菜单按钮设置为打开小程序

    Best effort: a failure here never interrupts the caller.
    """
    menu_button = MenuButtonWebApp(text=MENU_BUTTON_TEXT, web_app=WebAppInfo(url=web_app_url))
    try:
        await bot.set_chat_menu_button(chat_id=chat_id, menu_button=menu_button)
        return True
    except Exception as e:
        logger.debug(f"设置菜单按钮失败，已忽略: {e}")
        return False


async def setup_bot_commands(application: Application):
    """设置机器人的命令菜单"""
    try:
        await application.bot.set_my_commands(BOT_COMMANDS)
        logger.success(f"已设置机器人命令菜单: {[f'/{cmd.command}' for cmd in BOT_COMMANDS]}")
    except Exception as e:
        logger.error(f"设置机器人命令菜单失败: {e}")

    if settings.WEB_APP_URL:
        await configure_menu_button(application.bot, settings.WEB_APP_URL)
