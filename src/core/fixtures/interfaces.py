"""
Интерфейсы участников загрузки фикстур.

FixtureLoader работает только через эти протоколы: загрузчик файлов,
слой сохранения и процессоры подключаются без наследования.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Persister(Protocol):
    """Слой сохранения объектов (обёртка над ORM)."""

    def has_identity(self, obj: Any) -> bool:
        """Есть ли у объекта идентичность (первичный ключ) по метаданным ORM."""

    def merge(self, obj: Any) -> Any:
        """Присоединяет объект к текущему контексту и возвращает управляемый экземпляр."""

    def persist(self, objects: Iterable[Any]) -> None:
        """Сохраняет набор объектов."""

    def detach(self, obj: Any) -> None:
        """Отсоединяет объект от контекста сохранения."""


@runtime_checkable
class FixtureFileLoader(Protocol):
    """Загрузчик файлов фикстур одного формата."""

    def load(self, file: Any) -> List[Any]:
        """Строит объекты из файла и возвращает их набор."""

    def set_references(self, references: Mapping[str, Any]) -> None:
        ...

    def get_references(self) -> Dict[str, Any]:
        ...

    def set_logger(self, logger: logging.Logger) -> None:
        ...

    def set_persister(self, persister: Persister) -> None:
        ...

    def set_providers(self, providers: Sequence[Any]) -> None:
        ...


@runtime_checkable
class Processor(Protocol):
    """Хуки, вызываемые для каждого объекта до и после сохранения."""

    def pre_process(self, obj: Any) -> None:
        ...

    def post_process(self, obj: Any) -> None:
        ...
