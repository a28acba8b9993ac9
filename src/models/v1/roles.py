"""
Роли пользователей.
"""

import enum
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..base import BaseModel

if TYPE_CHECKING:
    from .users import UserModel


class RoleCode(str, enum.Enum):
    """Коды ролей пользователя."""

    ADMIN = "admin"
    USER = "user"


class UserRoleModel(BaseModel):
    """
    Связь пользователя с ролью.

    Attributes:
        user_id (UUID): Пользователь (FK users.id).
        role_code (RoleCode): Код роли.
    """

    __tablename__ = "user_roles"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    role_code: Mapped[RoleCode] = mapped_column(
        String(20), nullable=False, default=RoleCode.USER
    )

    user: Mapped["UserModel"] = relationship(
        "UserModel", back_populates="user_roles"
    )
