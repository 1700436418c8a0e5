# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 18:30
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Grammar helper bot entry point
"""
import json
import sys

from loguru import logger
from telegram import Update
from telegram.ext import Application, MessageHandler, filters

from models import ConfigurationError
from mybot.handlers.dispatcher import dispatch_update
from mybot.services import correction_service, voice_service
from mybot.services.menu_service import setup_bot_commands
from mybot.task_manager import wait_for_all_tasks, cancel_all_tasks, get_active_tasks_count
from settings import settings, Settings, LOG_DIR
from utils import init_log


def check_settings(config: Settings) -> None:
    if missing := config.missing_required():
        raise ConfigurationError(f"Please set {' and '.join(missing)} in .env")


async def drain_tasks(application: Application):
    """Let in-flight updates send their replies while the bot is still connected."""
    logger.info(f"Stopping with {get_active_tasks_count()} active tasks")
    if not await wait_for_all_tasks(timeout=10.0):
        cancel_all_tasks()


async def close_clients(application: Application):
    clients = [correction_service._completion_client, voice_service.get_listen_client()]
    for client in filter(None, clients):
        await client.close()


def build_application(config: Settings = settings) -> Application:
    application = config.get_default_application()
    application.post_init = setup_bot_commands
    # post_stop 在 Application.shutdown() 之前执行，此时 bot 仍可发送消息
    application.post_stop = drain_tasks
    application.post_shutdown = close_clients

    # 所有消息统一进入 dispatcher，由 EventKind 决定处理方式
    application.add_handler(MessageHandler(filters.ALL, dispatch_update))
    return application


def main() -> None:
    """Start the bot."""
    init_log(runtime=LOG_DIR.joinpath("runtime.log"), error=LOG_DIR.joinpath("error.log"))

    try:
        check_settings(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    sp = settings.model_dump(mode="json")
    logger.success(f"Loading settings: {json.dumps(sp, indent=2, ensure_ascii=False)}")

    correction_service.init_completion_client(settings)
    voice_service.init_listen_client(settings)

    application = build_application(settings)

    # run_polling stops the updater gracefully on SIGINT / SIGTERM
    logger.success("Bot started.")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
