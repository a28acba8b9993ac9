"""
Модуль base.py — базовые настройки приложения.

Содержит основной класс Settings, который агрегирует все параметры конфигурации:
- Логирование (logging)
- Пути и окружение (paths)
- Загрузка фикстур (fixtures)
- Подключение к базе данных (database)
- Параметры FastAPI и Uvicorn

Экспортируемые объекты:
- Settings: Главный класс настроек приложения (через pydantic).
"""

import logging
import os
from pathlib import Path
from typing import Any, ClassVar, Dict, List

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class PathSettings(BaseSettings):
    """
    Класс для централизованного управления путями и определением типа окружения.

    Атрибуты класса:
        PROJECT_ROOT (Path): Корневая директория проекта.
        FIXTURES_DIR (Path): Директория с YAML фикстурами по умолчанию.

    Методы:
        find_project_root(): Определяет корень проекта по маркерным файлам.
        get_env_file_and_type(): Определяет используемый env-файл и тип окружения.
    """

    @staticmethod
    def find_project_root() -> Path:
        """
        Находит корень проекта по маркерным файлам.

        Алгоритм:
        - Начинает поиск с текущей рабочей директории.
        - Поднимается вверх по дереву директорий.
        - Если находит хотя бы один из маркерных файлов (.git, pyproject.toml), возвращает эту директорию.
        - Если ни один маркер не найден, возвращает текущую директорию и пишет предупреждение в лог.

        Returns:
            Path: Путь к корню проекта.
        """
        current_dir = Path.cwd()

        markers = [".git", "pyproject.toml"]

        for parent in [current_dir, *current_dir.parents]:
            if any((parent / marker).exists() for marker in markers):
                return parent

        logger.warning(
            "Не удалось определить корень проекта, используем текущую директорию"
        )
        return current_dir

    PROJECT_ROOT: ClassVar[Path] = find_project_root()

    FIXTURES_DIR: ClassVar[Path] = PROJECT_ROOT / "fixtures_data"

    @staticmethod
    def get_env_file_and_type() -> tuple[Path, str]:
        """
        Определяет путь к файлу с переменными окружения и тип окружения.

        Алгоритм:
        - Если переменная окружения ENV_FILE задана, используется указанный путь.
          - Если имя файла содержит ".env.test", считается что это тестовое окружение.
          - В противном случае — кастомное окружение.
        - Если в корне проекта есть .env.dev, используется он (development).
        - В остальных случаях используется .env (production).

        Returns:
            tuple[Path, str]: Путь к файлу с переменными окружения и тип окружения.
        """
        ENV_FILE = Path(".env")
        DEV_ENV_FILE = Path(".env.dev")

        env_file_path = os.getenv("ENV_FILE")
        if env_file_path:
            env_path = Path(env_file_path)
            if ".env.test" in str(env_path):
                env_type = "test"
            else:
                env_type = "custom"
        elif DEV_ENV_FILE.exists():
            env_path = DEV_ENV_FILE
            env_type = "development"
        else:
            env_path = ENV_FILE
            env_type = "production"
        logger.info("Запуск в режиме: %s", env_type.upper())
        logger.info("Конфигурация: %s", env_path)

        return env_path, env_type


class LoggingSettings(BaseSettings):
    """
    Конфигурация логирования приложения.

    Атрибуты:
        LOG_LEVEL (str): Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_FORMAT (str): Формат логирования (pretty, json, simple).
        LOG_FILE (str): Путь к файлу логов (пустая строка — без файла).
        ENCODING (str): Кодировка файла логов.
        FILE_MODE (str): Режим открытия файла логов.
        PRETTY_FORMAT (str): Цветной формат для консоли.
        SIMPLE_FORMAT (str): Краткий формат для консоли.
    """

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "pretty"  # pretty, json, simple
    LOG_FILE: str = ""
    ENCODING: str = "utf-8"
    FILE_MODE: str = "a"

    FILE_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    PRETTY_FORMAT: str = (
        "\033[1;36m%(asctime)s\033[0m - \033[1;32m%(name)s\033[0m - "
        "\033[1;33m%(levelname)s\033[0m - %(message)s"
    )

    JSON_FORMAT: str = (
        "%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(message)s"
    )

    SIMPLE_FORMAT: str = "%(levelname)s - %(name)s - %(message)s"

    @property
    def current_format(self) -> str:
        """Возвращает текущий формат логирования"""
        format_map = {
            "pretty": self.PRETTY_FORMAT,
            "simple": self.SIMPLE_FORMAT,
            "json": self.JSON_FORMAT,
        }
        return format_map.get(self.LOG_FORMAT, self.FILE_FORMAT)

    @property
    def is_json_format(self) -> bool:
        """Проверяет, используется ли JSON формат"""
        return self.LOG_FORMAT.lower() == "json"

    model_config = SettingsConfigDict(env_prefix="LOGGING__", extra="ignore")


class FixtureSettings(BaseSettings):
    """
    Настройки загрузки фикстур.

    Атрибуты:
        FIXTURES_DIR (Path): Директория, в которой ищутся файлы фикстур.
        FIXTURE_PATTERNS (List[str]): Glob-шаблоны файлов фикстур.
        LOAD_ON_STARTUP (bool): Загружать ли фикстуры при старте приложения.
        COMMIT (bool): Коммитить ли транзакцию после сохранения набора объектов.
    """

    FIXTURES_DIR: Path = PathSettings.FIXTURES_DIR
    FIXTURE_PATTERNS: List[str] = ["*.yml", "*.yaml"]
    LOAD_ON_STARTUP: bool = False
    COMMIT: bool = True

    model_config = SettingsConfigDict(env_prefix="FIXTURES__", extra="ignore")


class DatabaseSettings(BaseSettings):
    """
    Настройки подключения к базе данных.

    Атрибуты:
        DATABASE_URL (str): Строка подключения SQLAlchemy.
        ECHO (bool): Логирование SQL-запросов (для отладки).
        CREATE_TABLES (bool): Создавать таблицы при старте приложения.
    """

    DATABASE_URL: str = "sqlite:///./norake_fixtures.db"
    ECHO: bool = False
    CREATE_TABLES: bool = True

    model_config = SettingsConfigDict(env_prefix="DATABASE__", extra="ignore")


env_file_path, app_env = PathSettings.get_env_file_and_type()


class Settings(BaseSettings):
    """
    Главный класс настроек приложения.

    Атрибуты:
        logging (LoggingSettings): Настройки логирования.
        paths (PathSettings): Пути и параметры окружения.
        fixtures (FixtureSettings): Настройки загрузки фикстур.
        database (DatabaseSettings): Настройки подключения к БД.

        TITLE (str): Название сервиса.
        DESCRIPTION (str): Описание сервиса.
        VERSION (str): Версия приложения.
        HOST (str): Хост для запуска.
        PORT (int): Порт для запуска.

    Свойства:
        app_params (dict): Параметры для FastAPI.
        uvicorn_params (dict): Параметры для запуска uvicorn.
        engine_params (dict): Параметры SQLAlchemy engine.
        session_params (dict): Параметры SQLAlchemy session.
    """

    app_env: str = app_env

    logging: LoggingSettings = LoggingSettings()
    paths: PathSettings = PathSettings()
    fixtures: FixtureSettings = FixtureSettings()
    database: DatabaseSettings = DatabaseSettings()

    TITLE: str = "NoRake Fixtures Service"
    DESCRIPTION: str = "Загрузка тестовых и демонстрационных данных NoRake"
    VERSION: str = "0.1.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @property
    def app_params(self) -> dict:
        """
        Параметры для инициализации FastAPI приложения.

        Returns:
            Dict с настройками FastAPI
        """
        return {
            "title": self.TITLE,
            "description": self.DESCRIPTION,
            "version": self.VERSION,
            "root_path": "",
        }

    @property
    def uvicorn_params(self) -> dict:
        """
        Параметры для запуска uvicorn сервера.

        Returns:
            Dict с настройками uvicorn
        """
        return {
            "host": self.HOST,
            "port": self.PORT,
            "log_level": self.logging.LOG_LEVEL.lower(),
        }

    @property
    def database_url(self) -> str:
        """
        Строка подключения к базе данных.

        Returns:
            str: Строка подключения к базе данных.
        """
        return self.database.DATABASE_URL

    @property
    def engine_params(self) -> Dict[str, Any]:
        """
        Параметры для создания SQLAlchemy engine.

        Returns:
            dict: Параметры подключения.
        """
        params: Dict[str, Any] = {"echo": self.database.ECHO}
        if self.database_url.startswith("sqlite"):
            params["connect_args"] = {"check_same_thread": False}
        return params

    @property
    def session_params(self) -> Dict[str, Any]:
        """
        Параметры для создания SQLAlchemy session.

        Returns:
            dict: Параметры sessionmaker.
        """
        return {
            "autoflush": False,  # Автоматическая очистка буфера перед выполнением запроса
            "expire_on_commit": False,  # Отсоединённые фикстуры должны оставаться читаемыми
            "class_": Session,
        }

    model_config = SettingsConfigDict(
        env_file=env_file_path,
        env_file_encoding="utf-8",
        extra="allow",
    )


# Глобальный экземпляр настроек
settings = Settings()
