"""
Провайдеры функций для значений фикстур.

Публичные методы провайдера вызываются из YAML: "<email('admin')>".
"""

import random
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any


class FixtureProvider:
    """Базовый набор функций для генерации значений фикстур."""

    def __init__(self, domain: str = "example.com", seed: int | None = None):
        self.domain = domain
        self._random = random.Random(seed)

    def uuid(self) -> uuid.UUID:
        return uuid.uuid4()

    def email(self, username: Any, domain: str | None = None) -> str:
        return f"{username}@{domain or self.domain}"

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def days_ago(self, days: int) -> datetime:
        return self.now() - timedelta(days=days)

    def number(self, minimum: int = 0, maximum: int = 100) -> int:
        return self._random.randint(minimum, maximum)

    def choice(self, *items: Any) -> Any:
        return self._random.choice(items)
