"""
Сервис загрузки фикстур.

Находит YAML файлы в директории фикстур и загружает их через FixtureLoader.
Файлы, имя которых начинается с "_", загружаются только через include.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sqlalchemy.orm import Session

from src.core.fixtures import (YAML_LOADER, FixtureLoader, Processor,
                               YamlFixtureLoader)
from src.core.fixtures.providers import FixtureProvider
from src.services.base import BaseService


class FixtureService(BaseService):
    """
    Сервис для загрузки фикстур в базу данных.

    Attributes:
        loader (FixtureLoader): Оркестратор загрузки, привязанный к сессии.

    Methods:
        find_fixture_files: Поиск файлов фикстур в директории.
        load_files: Загрузка указанных файлов.
        load_directory: Загрузка всех файлов директории.
    """

    def __init__(self, session: Session, loader: Optional[FixtureLoader] = None):
        """
        Инициализирует сервис загрузки фикстур.

        Args:
            session (Session): Сессия базы данных.
            loader (FixtureLoader, optional): Готовый оркестратор
                (например, с накопленными ссылками от прошлых загрузок).
        """
        super().__init__(session)
        self.loader = loader or FixtureLoader(
            {YAML_LOADER: YamlFixtureLoader()}, logger=self.logger
        )
        self.loader.set_session(session)

    def find_fixture_files(self, fixtures_dir: Optional[Path] = None) -> List[Path]:
        """
        Ищет файлы фикстур по шаблонам из настроек.

        Args:
            fixtures_dir: Директория поиска (по умолчанию FIXTURES_DIR).

        Returns:
            List[Path]: Отсортированный список файлов.
        """
        directory = Path(fixtures_dir or self.settings.fixtures.FIXTURES_DIR)
        if not directory.exists():
            self.logger.warning("📁 Директория фикстур не найдена: %s", directory)
            return []

        files = set()
        for pattern in self.settings.fixtures.FIXTURE_PATTERNS:
            files.update(
                path for path in directory.glob(pattern) if not path.name.startswith("_")
            )
        return sorted(files)

    def load_files(
        self,
        files: Sequence[Any],
        providers: Optional[Sequence[Any]] = None,
        processors: Iterable[Processor] = (),
    ) -> Dict[str, Any]:
        """
        Загружает указанные файлы фикстур.

        Args:
            files: Пути к файлам.
            providers: Провайдеры функций (по умолчанию FixtureProvider).
            processors: Процессоры для этой загрузки.

        Returns:
            Dict[str, Any]: Таблица ссылок после загрузки.
        """
        self.loader.set_providers(
            providers if providers is not None else [FixtureProvider()]
        )
        for processor in processors:
            self.loader.add_processor(processor)

        self.logger.info("🔄 Загрузка фикстур: %s", [str(file) for file in files])
        return self.loader.load(files)

    def load_directory(
        self, fixtures_dir: Optional[Path] = None, **kwargs: Any
    ) -> Dict[str, Any]:
        """
        Загружает все файлы фикстур из директории.

        Args:
            fixtures_dir: Директория фикстур (по умолчанию FIXTURES_DIR).
            **kwargs: Параметры load_files (providers, processors).

        Returns:
            Dict[str, Any]: Таблица ссылок после загрузки.
        """
        files = self.find_fixture_files(fixtures_dir)
        if not files:
            self.logger.warning("⚠️ Файлы фикстур не найдены, пропускаем загрузку")
        return self.load_files(files, **kwargs)
