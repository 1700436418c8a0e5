# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 17:20
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : /start and /app
"""
from telegram import Update
from telegram.ext import ContextTypes

from mybot.replies import START_TPL, OPEN_APP_TPL, WEB_APP_URL_MISSING
from mybot.services import menu_service
from settings import settings


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send a greeting when the command /start is issued."""
    message = update.message
    await message.reply_text(START_TPL)

    web_app_url = settings.WEB_APP_URL
    if not web_app_url:
        return

    await menu_service.configure_menu_button(context.bot, web_app_url)
    await message.reply_text(
        OPEN_APP_TPL, reply_markup=menu_service.build_open_app_markup(web_app_url)
    )


async def app_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send the mini app button when the command /app is issued."""
    message = update.message
    web_app_url = settings.WEB_APP_URL
    if not web_app_url:
        await message.reply_text(WEB_APP_URL_MISSING)
        return

    await message.reply_text(
        OPEN_APP_TPL, reply_markup=menu_service.build_open_app_markup(web_app_url)
    )
