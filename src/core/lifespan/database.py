"""
Обработчики подключения к базе данных.
"""

from fastapi import FastAPI

from src.core.connections.database import database_client
from src.core.lifespan.base import (register_shutdown_handler,
                                    register_startup_handler)
from src.core.settings import settings


@register_startup_handler
async def initialize_database(app: FastAPI):  # noqa: ARG001
    """Подключается к БД и при необходимости создаёт таблицы."""
    database_client.connect()
    if settings.database.CREATE_TABLES:
        database_client.create_tables()


@register_shutdown_handler
async def close_database(app: FastAPI):  # noqa: ARG001
    """Закрывает соединения с БД."""
    database_client.close()
