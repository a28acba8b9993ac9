"""
Слой сохранения фикстур поверх SQLAlchemy Session.
"""

import logging
from typing import Any, Iterable

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import InstanceState, Session


class SQLAlchemyPersister:
    """
    Адаптер сессии SQLAlchemy для загрузчика фикстур.

    Объекты без идентичности (composite value objects, любые классы без
    маппинга) не добавляются в сессию: они сохраняются вместе с владельцем.

    Attributes:
        session (Session): Сессия базы данных.
        commit (bool): Коммитить ли транзакцию после persist().
    """

    def __init__(self, session: Session, commit: bool = True):
        self.session = session
        self.commit = commit
        self.logger = logging.getLogger(self.__class__.__name__)

    def has_identity(self, obj: Any) -> bool:
        """
        Проверяет, есть ли у объекта идентичность по метаданным ORM.

        Args:
            obj: Любой объект.

        Returns:
            bool: True, если класс объекта смаплен и имеет первичный ключ.
        """
        state = inspect(obj, raiseerr=False)
        if state is None or not hasattr(state, "mapper"):
            return False
        return len(state.mapper.primary_key) > 0

    def merge(self, obj: Any) -> Any:
        """
        Присоединяет объект к сессии.

        Args:
            obj: Объект (обычно отсоединённый после предыдущей загрузки).

        Returns:
            Any: Экземпляр, управляемый текущей сессией, или сам объект,
            если у него нет идентичности.
        """
        if not self.has_identity(obj):
            return obj
        return self.session.merge(obj)

    def persist(self, objects: Iterable[Any]) -> None:
        """
        Сохраняет набор объектов.

        Args:
            objects: Объекты, построенные загрузчиком файлов.

        Raises:
            SQLAlchemyError: Если сохранение не удалось (сессия откатывается).
        """
        entities = [obj for obj in objects if self.has_identity(obj)]
        try:
            self.session.add_all(entities)
            self.session.flush()
            if self.commit:
                self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.error("Ошибка при сохранении фикстур: %s", e)
            raise
        self.logger.debug("Сохранено объектов: %d", len(entities))

    def detach(self, obj: Any) -> None:
        """
        Отсоединяет объект от сессии.

        Просроченные атрибуты объекта и объектов, которые expunge снимет
        с сессии каскадом, предварительно перечитываются, чтобы все они
        оставались читаемыми после отсоединения.

        Args:
            obj: Объект из таблицы ссылок.
        """
        if not self.has_identity(obj) or obj not in self.session:
            return
        state = inspect(obj)
        self._refresh_expired(state)
        for _, _, child_state, _ in state.mapper.cascade_iterator("expunge", state):
            self._refresh_expired(child_state)
        self.session.expunge(obj)

    def _refresh_expired(self, state: InstanceState) -> None:
        """Перечитывает объект сессии, просроченный коммитом."""
        instance = state.obj()
        if (
            state.expired_attributes
            and state.has_identity
            and instance is not None
            and instance in self.session
        ):
            self.session.refresh(instance)
