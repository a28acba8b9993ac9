"""
Оркестратор загрузки фикстур.

FixtureLoader связывает загрузчики файлов, слой сохранения и процессоры:
загружает файлы, вызывает хуки процессоров, сохраняет объекты и ведёт
таблицу именованных ссылок между вызовами load().
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sqlalchemy.orm import Session

from src.core.exceptions import PersistenceNotConfiguredError, UnknownLoaderError
from src.core.fixtures.interfaces import FixtureFileLoader, Processor
from src.core.fixtures.persister import SQLAlchemyPersister
from src.core.settings import settings

YAML_LOADER = "yaml"


class FixtureLoader:
    """
    Загрузчик фикстур.

    Attributes:
        loaders (Dict[str, FixtureFileLoader]): Загрузчики файлов по формату.
        processors (List[Processor]): Процессоры для текущей загрузки.
        providers (Sequence | None): Провайдеры функций для загрузчика файлов.
        persister (SQLAlchemyPersister | None): Слой сохранения.
        references (Dict[str, Any]): Таблица ссылок (имя -> объект).
        logger (logging.Logger): Логгер, передаётся загрузчикам файлов.

    Example:
        >>> loader = FixtureLoader({"yaml": YamlFixtureLoader()})
        >>> loader.set_session(session)
        >>> references = loader.load(["fixtures_data/users.yml"])
        >>> references["user_admin"].username
        'admin'
    """

    def __init__(
        self,
        loaders: Mapping[str, FixtureFileLoader],
        logger: Optional[logging.Logger] = None,
    ):
        self.loaders = dict(loaders)
        self.processors: List[Processor] = []
        self.providers: Optional[Sequence[Any]] = None
        self.session: Optional[Session] = None
        self.persister: Optional[SQLAlchemyPersister] = None
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.references: Dict[str, Any] = {}

    def set_session(self, session: Session) -> None:
        """
        Настраивает слой сохранения.

        Ссылки с идентичностью присоединяются к новой сессии через merge,
        value objects остаются как есть. Логгер, слой сохранения и
        обновлённые ссылки передаются всем загрузчикам файлов.

        Args:
            session: Сессия SQLAlchemy.
        """
        self.session = session
        self.persister = SQLAlchemyPersister(session, commit=settings.fixtures.COMMIT)

        new_references: Dict[str, Any] = {}
        for name, reference in self.references.items():
            # Value objects (composite) не присоединяются к сессии
            if self.persister.has_identity(reference):
                reference = self.persister.merge(reference)
            new_references[name] = reference
        self.references = new_references

        for loader in self.loaders.values():
            loader.set_logger(self.logger)
            loader.set_persister(self.persister)
            loader.set_references(new_references)

        self.logger.debug("Сессия настроена, ссылок: %d", len(new_references))

    def load(self, files: Sequence[Any]) -> Dict[str, Any]:
        """
        Загружает файлы фикстур.

        Args:
            files: Пути к файлам в порядке загрузки.

        Returns:
            Dict[str, Any]: Таблица всех ссылок с отсоединёнными объектами.

        Raises:
            UnknownLoaderError: Загрузчик "yaml" не зарегистрирован.
            PersistenceNotConfiguredError: set_session() ещё не вызывался.
        """
        loader = self.get_loader(YAML_LOADER)
        if self.persister is None:
            raise PersistenceNotConfiguredError()
        loader.set_providers(self.providers)

        # При ошибке загрузчик файлов возвращается к ссылкам до вызова
        snapshot = loader.get_references()
        objects: List[Any] = []
        try:
            for file in files:
                object_set = loader.load(file)
                self._persist(object_set)
                objects.extend(object_set)
        except Exception:
            loader.set_references(snapshot)
            raise

        references = loader.get_references()
        for obj in references.values():
            self.persister.detach(obj)
        self.references.update(references)

        # Процессоры действуют только в рамках одной загрузки
        self.processors = []

        if files:
            self.logger.info(
                "✅ Загружено фикстур: %d объектов из %d файлов, ссылок: %d",
                len(objects),
                len(files),
                len(self.references),
            )
        return self.references

    def set_providers(self, providers: Sequence[Any]) -> None:
        self.providers = providers

    def add_processor(self, processor: Processor) -> None:
        self.processors.append(processor)

    def get_loader(self, key: str) -> FixtureFileLoader:
        """
        Возвращает загрузчик файлов по ключу формата.

        Raises:
            UnknownLoaderError: Загрузчик не зарегистрирован.
        """
        if not self.loaders.get(key):
            raise UnknownLoaderError(key)
        return self.loaders[key]

    def _persist(self, objects: List[Any]) -> None:
        """Сохраняет объекты, вызывая pre_process и post_process процессоров."""
        for processor in self.processors:
            for obj in objects:
                processor.pre_process(obj)

        self.persister.persist(objects)

        for processor in self.processors:
            for obj in objects:
                processor.post_process(obj)
