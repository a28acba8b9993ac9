"""
Модуль подключений.

Предоставляет клиенты для внешних сервисов:
- DatabaseClient, get_db_session: Работа с базой данных через SQLAlchemy
"""

from .database import DatabaseClient, database_client, get_db_session

__all__ = [
    "DatabaseClient",
    "database_client",
    "get_db_session",
]
