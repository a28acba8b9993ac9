"""
Инициализация модуля сервисов.

Exports:
    - BaseService: Базовый класс для всех сервисов
    - SessionMixin: Миксин для работы с сессией БД
    - FixtureService: Сервис загрузки фикстур
"""

from .base import BaseService, SessionMixin
from .v1.fixtures import FixtureService

__all__ = [
    "BaseService",
    "SessionMixin",
    "FixtureService",
]
