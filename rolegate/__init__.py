# rolegate/__init__.py
from .config import ROLE_HIERARCHY, ROLE_PERMISSIONS, Permission, Role
from .errors import (
    AccessDeniedError,
    EmptyRoleListError,
    RoleHierarchyCycleError,
    RolegateError,
)
from .guards import require, require_any, require_role
from .manager import PermissionManager
from .schemas import PermissionContext

__all__ = [
    "ROLE_HIERARCHY",
    "ROLE_PERMISSIONS",
    "AccessDeniedError",
    "EmptyRoleListError",
    "Permission",
    "PermissionContext",
    "PermissionManager",
    "Role",
    "RoleHierarchyCycleError",
    "RolegateError",
    "require",
    "require_any",
    "require_role",
]
