from typing import Hashable, Tuple

from pydantic import BaseModel, ConfigDict


class PermissionContext(BaseModel):
    """Roles and directly granted permissions of one principal.

    ``roles`` keeps the caller's order; the max role fold depends on it.
    """

    model_config = ConfigDict(frozen=True)

    roles: Tuple[Hashable, ...] = ()
    permissions: Tuple[Hashable, ...] = ()
