"""Default role hierarchy and role-to-permission grants."""
from enum import Enum
from types import MappingProxyType


class Role(str, Enum):
    """Roles, most senior first."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    MANAGER = "manager"
    PREMIUM_USER = "premium_user"
    USER = "user"


class Permission(str, Enum):
    # Product permissions
    PRODUCT_CREATE = "product:create"
    PRODUCT_READ = "product:read"
    PRODUCT_UPDATE = "product:update"
    PRODUCT_DELETE = "product:delete"
    PRODUCT_REVIEW = "product:review"

    # User permissions
    USER_CREATE = "user:create"
    USER_READ = "user:read"
    USER_UPDATE = "user:update"
    USER_DELETE = "user:delete"


# role -> roles it directly inherits from
ROLE_HIERARCHY = MappingProxyType(
    {
        Role.SUPER_ADMIN: (Role.ADMIN,),
        Role.ADMIN: (Role.MANAGER,),
        Role.MANAGER: (Role.PREMIUM_USER,),
        Role.PREMIUM_USER: (Role.USER,),
        Role.USER: (),
    }
)

# role -> permissions granted directly to it
ROLE_PERMISSIONS = MappingProxyType(
    {
        Role.SUPER_ADMIN: (),
        Role.ADMIN: (Permission.PRODUCT_DELETE, Permission.USER_DELETE),
        Role.MANAGER: (
            Permission.PRODUCT_CREATE,
            Permission.PRODUCT_UPDATE,
            Permission.USER_CREATE,
            Permission.USER_UPDATE,
            Permission.USER_READ,
        ),
        Role.PREMIUM_USER: (Permission.PRODUCT_REVIEW,),
        Role.USER: (Permission.PRODUCT_READ,),
    }
)
