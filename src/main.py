"""Main FastAPI application."""

from fastapi import FastAPI

import src.core.lifespan.database  # noqa: F401
import src.core.lifespan.fixtures  # noqa: F401
from src.core.lifespan import lifespan
from src.core.logging import setup_logging
from src.core.settings import settings
from src.routers import setup_routers


def create_application() -> FastAPI:
    """
    Создает и настраивает экземпляр приложения FastAPI.

    Эта функция инициализирует приложение, настраивает логирование
    и подключает роуты. Фикстуры загружаются в lifespan.

    Returns:
        FastAPI: Настроенный экземпляр приложения FastAPI.
    """
    app = FastAPI(**settings.app_params, lifespan=lifespan)
    setup_logging()
    setup_routers(app)

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, **settings.uvicorn_params)
