"""
Форматтеры логов.

- PrettyFormatter: цветной формат для консоли.
- CustomJsonFormatter: JSON формат (python-json-logger) для файлов и агрегаторов.
"""

import logging

from pythonjsonlogger.json import JsonFormatter

from src.core.settings import settings


class PrettyFormatter(logging.Formatter):
    """Форматтер для читаемого вывода в консоль."""

    def __init__(self, fmt: str | None = None):
        super().__init__(fmt or settings.logging.current_format)


class CustomJsonFormatter(JsonFormatter):
    """
    JSON форматтер с фиксированным набором полей.

    Добавляет в каждую запись поля level и logger, чтобы их не нужно
    было указывать в формате.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("fmt", settings.logging.JSON_FORMAT)
        super().__init__(*args, **kwargs)

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
