import logging

from sqlalchemy.orm import Session

from src.core.settings import settings


class SessionMixin:
    """
    Миксин для предоставления экземпляра сессии базы данных.
    """

    def __init__(self, session: Session) -> None:
        """
        Инициализирует SessionMixin.

        Args:
            session (Session): Сессия базы данных.
        """
        self.session = session


class BaseService(SessionMixin):
    """
    Базовый класс для сервисов приложения.
    """

    def __init__(self, session: Session):
        super().__init__(session)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.settings = settings
