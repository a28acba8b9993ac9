"""
Исключения для загрузки фикстур.

Classes:
    UnknownLoaderError: Запрошен незарегистрированный загрузчик файлов.
    PersistenceNotConfiguredError: Загрузка вызвана до настройки сессии БД.
    FixtureDefinitionError: Некорректное описание фикстуры в файле.
    ReferenceNotFoundError: Ссылка на несуществующую фикстуру.
    ProviderNotFoundError: Вызов незарегистрированного провайдера.
"""

from typing import Any, Optional

from src.core.exceptions.base import BaseFixtureError


class UnknownLoaderError(BaseFixtureError, ValueError):
    """
    Исключение при запросе загрузчика, который не зарегистрирован.

    Attributes:
        key: Ключ формата файлов (например, "yaml").
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            detail=f"Unknown loader type: {key}",
            error_type="unknown_loader",
            extra={"key": key},
        )


class PersistenceNotConfiguredError(BaseFixtureError):
    """Исключение при загрузке фикстур без настроенной сессии."""

    def __init__(self):
        super().__init__(
            detail="Сессия базы данных не настроена, вызовите set_session()",
            error_type="persistence_not_configured",
        )


class FixtureDefinitionError(BaseFixtureError):
    """
    Исключение при некорректном описании фикстуры.

    Attributes:
        file: Путь к файлу фикстур (если известен).
    """

    def __init__(self, detail: str, file: Optional[Any] = None):
        self.file = file
        super().__init__(
            detail=detail if file is None else f"{file}: {detail}",
            error_type="fixture_definition",
            extra={"file": str(file)} if file is not None else None,
        )


class ReferenceNotFoundError(BaseFixtureError, KeyError):
    """
    Исключение при ссылке на фикстуру, которая ещё не создана.

    Attributes:
        name: Имя (или шаблон имени) ссылки.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            detail=f"Ссылка на фикстуру '{name}' не найдена",
            error_type="reference_not_found",
            extra={"name": name},
        )

    def __str__(self) -> str:
        return self.detail


class ProviderNotFoundError(BaseFixtureError):
    """
    Исключение при вызове незарегистрированного провайдера.

    Attributes:
        name: Имя функции провайдера.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            detail=f"Провайдер '{name}' не зарегистрирован",
            error_type="provider_not_found",
            extra={"name": name},
        )
