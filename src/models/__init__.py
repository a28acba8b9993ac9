from .base import Base, BaseModel
from .v1.roles import RoleCode, UserRoleModel
from .v1.templates import TemplateModel, TemplateVisibility
from .v1.users import ContactInfo, UserModel

__all__ = [
    "Base",
    "BaseModel",
    "UserModel",
    "ContactInfo",
    "RoleCode",
    "UserRoleModel",
    "TemplateModel",
    "TemplateVisibility",
]
