"""Permission manager: flattens the role hierarchy once, answers checks from caches."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, FrozenSet, Hashable, Iterable, Mapping, Optional, Set, Union

from loguru import logger

from .config import ROLE_HIERARCHY, ROLE_PERMISSIONS
from .errors import EmptyRoleListError, RoleHierarchyCycleError
from .schemas import PermissionContext
from .settings import resolve_cycle_policy

_EMPTY: FrozenSet[Any] = frozenset()


class PermissionManager:
    """
    Authorization checks for a single principal.

    On construction every role in ``hierarchy`` gets its full set of inherited
    roles cached, then every role in ``role_permissions`` gets its own grants
    plus the grants of all inherited roles. After that the caches are read-only
    and every query is a set lookup.
    """

    def __init__(
        self,
        context: Union[PermissionContext, Mapping[str, Any], None] = None,
        hierarchy: Optional[Mapping[Hashable, Iterable[Hashable]]] = None,
        role_permissions: Optional[Mapping[Hashable, Iterable[Hashable]]] = None,
        cycle_policy: Optional[str] = None,
    ):
        if context is None:
            context = PermissionContext()
        elif not isinstance(context, PermissionContext):
            context = PermissionContext.model_validate(context)
        self.context = context
        self.cycle_policy = resolve_cycle_policy(cycle_policy)

        self._hierarchy = ROLE_HIERARCHY if hierarchy is None else hierarchy
        self._grants = ROLE_PERMISSIONS if role_permissions is None else role_permissions
        self._direct_permissions = frozenset(context.permissions)

        # Hierarchy closures first, permission closures read them.
        self._role_hierarchy = MappingProxyType(
            {role: frozenset(self.compute_role_hierarchy(role)) for role in self._hierarchy}
        )
        logger.debug(f"Cached role hierarchy for {len(self._role_hierarchy)} roles")
        self._check_cycles()

        self._role_permissions = MappingProxyType(
            {role: frozenset(self.compute_role_permissions(role)) for role in self._grants}
        )
        logger.debug(f"Cached role permissions for {len(self._role_permissions)} roles")

    # -------------------------
    # CLOSURES
    # -------------------------
    def compute_role_hierarchy(self, role: Hashable) -> Set[Hashable]:
        """Return every role reachable from ``role`` over inheritance edges.

        The role itself is only included when the hierarchy loops back to it.
        Already seen roles are not expanded again, so a cycle ends the walk
        instead of looping forever.
        """
        result: Set[Hashable] = set()
        stack = list(self._hierarchy.get(role) or ())
        while stack:
            current = stack.pop()
            if current in result:
                continue
            result.add(current)
            stack.extend(self._hierarchy.get(current) or ())
        return result

    def compute_role_permissions(self, role: Hashable) -> Set[Hashable]:
        """Return the direct grants of ``role`` plus those of every inherited role."""
        result: Set[Hashable] = set(self._grants.get(role) or ())

        inherited = self._role_hierarchy.get(role)
        if inherited is None:
            inherited = self.compute_role_hierarchy(role)
        for inherited_role in inherited:
            result.update(self._grants.get(inherited_role) or ())
        return result

    def _check_cycles(self) -> None:
        cyclic = [role for role, closure in self._role_hierarchy.items() if role in closure]
        if not cyclic or self.cycle_policy == "ignore":
            return

        names = ", ".join(str(role) for role in cyclic)
        if self.cycle_policy == "raise":
            logger.error(f"Role hierarchy cycle detected through: {names}")
            raise RoleHierarchyCycleError(cyclic)
        logger.warning(
            f"Role hierarchy cycle detected through: {names}. "
            "Inherited roles were truncated at the repeated role."
        )

    # -------------------------
    # CACHE ACCESS
    # -------------------------
    @property
    def role_hierarchy(self) -> Mapping[Hashable, FrozenSet[Hashable]]:
        return self._role_hierarchy

    @property
    def role_permissions(self) -> Mapping[Hashable, FrozenSet[Hashable]]:
        return self._role_permissions

    def hierarchy_of(self, role: Hashable) -> FrozenSet[Hashable]:
        return self._role_hierarchy.get(role, _EMPTY)

    def permissions_of(self, role: Hashable) -> FrozenSet[Hashable]:
        return self._role_permissions.get(role, _EMPTY)

    # -------------------------
    # PUBLIC API
    # -------------------------
    def has_permission(self, required_permission: Hashable) -> bool:
        if required_permission in self._direct_permissions:
            return True
        return any(
            required_permission in self.permissions_of(role) for role in self.context.roles
        )

    def has_permissions(self, required_permissions: Iterable[Hashable]) -> bool:
        """True when every permission is held. An empty request is always allowed."""
        return all(self.has_permission(p) for p in required_permissions)

    def has_any_permission(self, required_permissions: Iterable[Hashable]) -> bool:
        """True when at least one permission is held. An empty request is denied."""
        return any(self.has_permission(p) for p in required_permissions)

    def has_role(self, required_role: Hashable) -> bool:
        return any(
            role == required_role or required_role in self.hierarchy_of(role)
            for role in self.context.roles
        )

    def get_max_role(self) -> Hashable:
        """
        Return the most senior of the principal's roles.

        Roles are folded left to right: the current candidate is kept when the
        next role is one it already inherits, otherwise the next role takes
        over. The result depends on the order of roles for unrelated roles.

        Raises:
            EmptyRoleListError: If the principal holds no roles
        """
        roles = self.context.roles
        if not roles:
            raise EmptyRoleListError("Cannot determine max role: principal has no roles")

        max_role = roles[0]
        for role in roles:
            if role not in self.hierarchy_of(max_role):
                max_role = role
        return max_role
