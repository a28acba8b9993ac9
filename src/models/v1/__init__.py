"""
Модуль v1 содержит модели данных, которые заполняются фикстурами.

Экспортируемые модели:
    - UserModel, ContactInfo (пользователи и их контакты)
    - UserRoleModel, RoleCode (роли пользователей)
    - TemplateModel, TemplateVisibility (шаблоны)
"""

from .roles import RoleCode, UserRoleModel
from .templates import TemplateModel, TemplateVisibility
from .users import ContactInfo, UserModel

__all__ = [
    # Users & Roles
    "UserModel",
    "ContactInfo",
    "UserRoleModel",
    "RoleCode",
    # Templates
    "TemplateModel",
    "TemplateVisibility",
]
