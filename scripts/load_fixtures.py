"""
Загрузка YAML фикстур в базу данных.

Usage:
    python -m scripts.load_fixtures                       # все файлы из FIXTURES_DIR
    python -m scripts.load_fixtures fixtures_data/users.yml
    python -m scripts.load_fixtures --dir other_fixtures --create-tables
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from src.core.connections.database import database_client, get_db_session
from src.core.logging import setup_logging
from src.services.v1.fixtures import FixtureService

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Загрузка YAML фикстур в базу данных")
    parser.add_argument("files", nargs="*", type=Path, help="Файлы фикстур")
    parser.add_argument("--dir", type=Path, default=None, help="Директория фикстур")
    parser.add_argument(
        "--create-tables", action="store_true", help="Создать таблицы перед загрузкой"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Точка входа скрипта.

    Returns:
        int: Код возврата (0 — успех).
    """
    args = parse_args(argv)
    setup_logging()

    if args.create_tables:
        database_client.create_tables()

    for session in get_db_session():
        service = FixtureService(session=session)
        if args.files:
            references = service.load_files(args.files)
        else:
            references = service.load_directory(args.dir)
        break  # Используем только первую сессию

    logger.info("=" * 60)
    logger.info("📊 Загружено ссылок: %d", len(references))
    for name, obj in references.items():
        logger.info("   %s: %s", name, type(obj).__name__)
    logger.info("=" * 60)
    database_client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
