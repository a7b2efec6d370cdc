"""Exceptions raised by rolegate."""


class RolegateError(Exception):
    pass


class EmptyRoleListError(RolegateError, ValueError):
    """Raised when a max role is requested for a principal without roles."""


class RoleHierarchyCycleError(RolegateError, ValueError):
    """Raised when the role hierarchy contains a cycle and the policy is strict."""

    def __init__(self, roles):
        self.roles = tuple(roles)
        super().__init__(
            f"Role hierarchy contains a cycle through: {', '.join(map(str, self.roles))}"
        )


class AccessDeniedError(RolegateError, PermissionError):
    pass
