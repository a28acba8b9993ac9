"""
Управление жизненным циклом приложения.

Обработчики запуска и остановки регистрируются декораторами
register_startup_handler / register_shutdown_handler и вызываются
в порядке регистрации.
"""

import logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, List

from fastapi import FastAPI

logger = logging.getLogger(__name__)

Handler = Callable[[FastAPI], Awaitable[None]]

startup_handlers: List[Handler] = []
shutdown_handlers: List[Handler] = []


def register_startup_handler(handler: Handler) -> Handler:
    """Регистрирует обработчик запуска приложения."""
    startup_handlers.append(handler)
    return handler


def register_shutdown_handler(handler: Handler) -> Handler:
    """Регистрирует обработчик остановки приложения."""
    shutdown_handlers.append(handler)
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan FastAPI: запускает обработчики старта и остановки.

    Args:
        app (FastAPI): Экземпляр приложения.
    """
    logger.info("🚀 Запуск приложения")
    for handler in startup_handlers:
        await handler(app)

    yield

    for handler in reversed(shutdown_handlers):
        await handler(app)
    logger.info("Приложение остановлено")
