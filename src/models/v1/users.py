import dataclasses
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from ..base import BaseModel

if TYPE_CHECKING:
    from .roles import UserRoleModel
    from .templates import TemplateModel


@dataclasses.dataclass
class ContactInfo:
    """
    Контактные данные пользователя (value object).

    Не имеет собственной идентичности и хранится в колонках таблицы users
    через composite. В фикстурах может описываться отдельно и подключаться
    к пользователю по ссылке.
    """

    phone: Optional[str] = None
    city: Optional[str] = None


class UserModel(BaseModel):
    """
    Модель пользователя.

    Attributes:
        username (str): Уникальное имя пользователя.
        email (str): Email адрес (уникальный).
        contact (ContactInfo): Контактные данные (composite из phone и city).
        is_active (bool): Флаг активности аккаунта.

    Relationships:
        user_roles: One-to-Many связь с UserRoleModel.
        templates: One-to-Many связь с TemplateModel.

    Example:
        >>> user = UserModel(
        ...     username="john_doe",
        ...     email="john@example.com",
        ...     contact=ContactInfo(phone="+79991234567", city="Москва"),
        ... )
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
        comment="Уникальное имя пользователя для входа",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Email адрес пользователя",
    )

    contact: Mapped[ContactInfo] = composite(
        mapped_column("phone", String(20), nullable=True),
        mapped_column("city", String(100), nullable=True),
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True, nullable=False, comment="Активен ли пользователь"
    )

    user_roles: Mapped[List["UserRoleModel"]] = relationship(
        "UserRoleModel",
        back_populates="user",
        passive_deletes=True,
        cascade="all, delete-orphan",
    )

    templates: Mapped[List["TemplateModel"]] = relationship(
        "TemplateModel",
        back_populates="author",
        passive_deletes=True,
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<UserModel(username={self.username}, email={self.email})>"
