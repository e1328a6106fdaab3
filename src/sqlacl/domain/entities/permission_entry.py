"""Permission entry entity - explicit GRANT or DENY."""

from dataclasses import dataclass, replace
from typing import NamedTuple

from sqlacl.domain.value_objects import Effect, PermissionKind


class PermissionKey(NamedTuple):
    """Unique key of a permission entry."""

    principal_id: str
    permission: PermissionKind
    securable_id: str

    def __str__(self) -> str:
        return f"{self.permission} ON {self.securable_id} TO {self.principal_id}"


@dataclass(frozen=True)
class PermissionEntry:
    """Explicit entry: principal has effect for permission on securable."""

    principal_id: str
    permission: PermissionKind
    securable_id: str
    effect: Effect
    grant_option: bool = False
    grantor_id: str | None = None

    @property
    def key(self) -> PermissionKey:
        return PermissionKey(self.principal_id, self.permission, self.securable_id)

    def without_grant_option(self) -> "PermissionEntry":
        return replace(self, grant_option=False)
