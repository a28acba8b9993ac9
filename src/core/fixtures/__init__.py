"""
Модуль для работы с фикстурами.

Предоставляет инструменты для:
- Загрузки фикстур из YAML файлов со ссылками между объектами
- Сохранения объектов через SQLAlchemy с хуками процессоров
- Ведения таблицы именованных ссылок между загрузками
"""

from src.core.fixtures.interfaces import FixtureFileLoader, Persister, Processor
from src.core.fixtures.loader import YAML_LOADER, FixtureLoader
from src.core.fixtures.persister import SQLAlchemyPersister
from src.core.fixtures.yaml_loader import YamlFixtureLoader

__all__ = [
    "FixtureLoader",
    "YamlFixtureLoader",
    "SQLAlchemyPersister",
    "FixtureFileLoader",
    "Persister",
    "Processor",
    "YAML_LOADER",
]
