"""
Базовое исключение приложения.

Все собственные исключения наследуются от BaseFixtureError и несут
одинаковый набор полей: detail, error_type и extra.
"""

from typing import Any, Dict, Optional


class BaseFixtureError(Exception):
    """
    Базовое исключение для ошибок загрузки фикстур.

    Attributes:
        detail (str): Подробное сообщение об ошибке.
        error_type (str): Машиночитаемый тип ошибки.
        extra (Dict): Дополнительные данные об ошибке.
    """

    def __init__(
        self,
        detail: str,
        error_type: str = "fixture_error",
        extra: Optional[Dict[str, Any]] = None,
    ):
        self.detail = detail
        self.error_type = error_type
        self.extra = extra or {}
        super().__init__(detail)

    def to_dict(self) -> Dict[str, Any]:
        """Представление ошибки для логов и API ответов."""
        return {
            "detail": self.detail,
            "error_type": self.error_type,
            "extra": self.extra,
        }
