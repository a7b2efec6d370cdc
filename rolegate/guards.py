"""Decorators that enforce permission checks around plain callables."""
from __future__ import annotations

import functools
from typing import Callable, Hashable, Union

from .errors import AccessDeniedError
from .manager import PermissionManager

ManagerSource = Union[PermissionManager, Callable[[], PermissionManager]]


def _resolve(manager: ManagerSource) -> PermissionManager:
    if isinstance(manager, PermissionManager):
        return manager
    return manager()


def _guard(manager: ManagerSource, check: Callable[[PermissionManager], bool], denied: str):
    def wrapper(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def inner(*args, **kwargs):
            if not check(_resolve(manager)):
                raise AccessDeniedError(f"Access denied: {denied}")
            return fn(*args, **kwargs)

        return inner

    return wrapper


def require(manager: ManagerSource, *permissions: Hashable) -> Callable:
    """Allow the call only when every permission is held."""
    return _guard(
        manager,
        lambda m: m.has_permissions(permissions),
        f"requires all of {', '.join(map(str, permissions))}",
    )


def require_any(manager: ManagerSource, *permissions: Hashable) -> Callable:
    """Allow the call when at least one permission is held."""
    return _guard(
        manager,
        lambda m: m.has_any_permission(permissions),
        f"requires one of {', '.join(map(str, permissions))}",
    )


def require_role(manager: ManagerSource, role: Hashable) -> Callable:
    """Allow the call when the principal holds ``role`` directly or by inheritance."""
    return _guard(manager, lambda m: m.has_role(role), f"requires role {role}")
