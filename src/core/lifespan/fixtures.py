"""
Обработчик загрузки фикстур при старте приложения.

Загружает YAML фикстуры из FIXTURES_DIR, если включён LOAD_ON_STARTUP.
Имена загруженных ссылок сохраняются в app.state.fixture_references.
"""

import logging

from fastapi import FastAPI

from src.core.connections.database import get_db_session
from src.core.lifespan.base import register_startup_handler
from src.core.settings import settings
from src.services.v1.fixtures import FixtureService

logger = logging.getLogger(__name__)


@register_startup_handler
async def load_fixtures(app: FastAPI):
    """
    Загружает фикстуры при старте приложения.

    Args:
        app (FastAPI): Экземпляр FastAPI приложения
    """
    app.state.fixture_references = {}

    if not settings.fixtures.LOAD_ON_STARTUP:
        logger.debug("Загрузка фикстур при старте отключена")
        return

    for session in get_db_session():
        service = FixtureService(session=session)
        references = service.load_directory()
        app.state.fixture_references = {
            name: type(obj).__name__ for name, obj in references.items()
        }
        break  # Используем только первую сессию

    logger.info("📊 Загружено ссылок фикстур: %d", len(app.state.fixture_references))
