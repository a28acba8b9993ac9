"""
Модели для работы с шаблонами проблем (Templates).

Шаблоны описывают настраиваемые формы через JSON поле fields.

Classes:
    TemplateVisibility: Enum для видимости шаблона.
    TemplateModel: Модель шаблона с JSON полями.

Example:
    >>> template = TemplateModel(
    ...     title="Проблема с оборудованием",
    ...     category="hardware",
    ...     fields={"fields": [{"name": "equipment_model", "type": "text"}]},
    ...     author=user,
    ... )
"""

import enum
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import BaseModel

if TYPE_CHECKING:
    from src.models.v1.users import UserModel


class TemplateVisibility(str, enum.Enum):
    """
    Enum для видимости шаблона.

    Attributes:
        PUBLIC: Шаблон доступен всем.
        PRIVATE: Шаблон доступен только создателю.
        TEAM: Шаблон доступен команде.
    """

    PUBLIC = "public"
    PRIVATE = "private"
    TEAM = "team"


class TemplateModel(BaseModel):
    """
    Модель шаблона для создания проблем с настраиваемыми полями.

    Attributes:
        title: Название шаблона.
        description: Описание назначения шаблона (опционально).
        category: Категория проблем (hardware, software, process).
        fields: JSON структура с определением полей формы.
        visibility: Видимость шаблона (public/private/team).
        author_id: UUID создателя шаблона (FK users.id).
        usage_count: Счётчик использований шаблона.
        is_active: Флаг активности.
        author: Relationship к создателю шаблона.
    """

    __tablename__ = "templates"

    title: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True, comment="Название шаблона"
    )

    description: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="Описание назначения шаблона"
    )

    category: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="Категория проблем (hardware, software, process)",
    )

    fields: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="JSON структура с определением полей формы",
    )

    visibility: Mapped[TemplateVisibility] = mapped_column(
        String(20),
        nullable=False,
        default=TemplateVisibility.PRIVATE,
        comment="Видимость шаблона (public/private/team)",
    )

    author_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="UUID создателя шаблона",
    )

    usage_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    author: Mapped["UserModel"] = relationship(
        "UserModel",
        foreign_keys=[author_id],
        back_populates="templates",
    )

    def __repr__(self) -> str:
        return f"<TemplateModel(id={self.id}, title={self.title!r}, category={self.category!r})>"
