from fastapi import FastAPI

from .main import router as main_router
from .v1 import router as v1_router


def setup_routers(app: FastAPI):
    """
    Настраивает все роутеры для приложения FastAPI.
    """
    app.include_router(main_router)
    app.include_router(v1_router, prefix="/api/v1")
