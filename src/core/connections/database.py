"""
Модуль для работы с базой данных.

Предоставляет:
- DatabaseClient: создание engine и фабрики сессий из настроек
- get_db_session: генератор сессий для скриптов и зависимостей FastAPI
"""

import logging
from typing import Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.settings import Settings as AppConfig
from src.core.settings import settings
from src.models import Base

logger = logging.getLogger(__name__)


class DatabaseClient:
    """
    Клиент для подключения к базе данных.

    Attributes:
        settings (AppConfig): Конфигурация приложения.
        engine (Engine | None): SQLAlchemy engine.
        session_factory (sessionmaker | None): Фабрика сессий.
    """

    def __init__(self, settings: AppConfig = settings) -> None:
        self.settings = settings
        self.engine: Optional[Engine] = None
        self.session_factory: Optional[sessionmaker] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    def connect(self) -> sessionmaker:
        """
        Создаёт engine и фабрику сессий.

        Returns:
            sessionmaker: Фабрика синхронных сессий.
        """
        if self.session_factory is None:
            self.logger.debug("Подключение к базе данных: %s", self.settings.database_url)
            self.engine = create_engine(
                self.settings.database_url, **self.settings.engine_params
            )
            self.session_factory = sessionmaker(
                bind=self.engine, **self.settings.session_params
            )
            self.logger.info("✅ Подключение к базе данных установлено")
        return self.session_factory

    def create_tables(self) -> None:
        """Создаёт таблицы всех зарегистрированных моделей."""
        self.connect()
        Base.metadata.create_all(self.engine)
        self.logger.info("📦 Таблицы созданы: %s", ", ".join(Base.metadata.tables))

    def close(self) -> None:
        """Закрывает все соединения engine."""
        if self.engine is not None:
            self.engine.dispose()
            self.logger.info("Соединения с базой данных закрыты")
        self.engine = None
        self.session_factory = None


database_client = DatabaseClient()


def get_db_session() -> Generator[Session, None, None]:
    """
    Генератор сессий базы данных.

    Yields:
        Session: Сессия SQLAlchemy, закрывается после использования.
    """
    session_factory = database_client.connect()
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
