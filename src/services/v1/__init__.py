"""
Модуль с сервисами версии 1.

Exports:
    FixtureService: Сервис загрузки фикстур.
"""

from .fixtures import FixtureService

__all__ = [
    "FixtureService",
]
