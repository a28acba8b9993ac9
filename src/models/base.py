"""
Базовая модель SQLAlchemy.

Все модели приложения наследуются от BaseModel и получают UUID первичный
ключ и временные метки создания/обновления.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Текущее время в UTC."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Декларативная база, хранит общий MetaData всех моделей."""


class BaseModel(Base):
    """
    Абстрактная модель с общими полями.

    Attributes:
        id (UUID): Первичный ключ.
        created_at (datetime): Дата создания записи.
        updated_at (datetime): Дата последнего обновления записи.
    """

    __abstract__ = True

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )
