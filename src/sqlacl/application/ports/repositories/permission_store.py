"""Permission store port."""

from typing import Protocol

from sqlacl.domain.entities import PermissionEntry, PermissionKey
from sqlacl.domain.value_objects import Effect, PermissionKind


class PermissionStore(Protocol):
    """Port for explicit GRANT/DENY entries."""

    def get(self, key: PermissionKey) -> PermissionEntry | None: ...

    def entries_for(self, principal_id: str) -> list[PermissionEntry]: ...

    def entries_on(self, securable_id: str) -> list[PermissionEntry]: ...

    def entries_granted_by(self, grantor_id: str) -> list[PermissionEntry]: ...

    def dependents(
        self, principal_id: str, permission: PermissionKind, securable_id: str
    ) -> list[PermissionEntry]: ...

    def write(
        self,
        principal_id: str,
        permission: PermissionKind,
        securable_id: str,
        effect: Effect,
        grant_option: bool = False,
        grantor_id: str | None = None,
        cascade: bool = False,
    ) -> Effect | None: ...

    def revoke(
        self,
        principal_id: str,
        permission: PermissionKind,
        securable_id: str,
        cascade: bool = False,
        actor: str | None = None,
    ) -> list[PermissionEntry]: ...

    def revoke_grant_option_only(
        self,
        principal_id: str,
        permission: PermissionKind,
        securable_id: str,
        cascade: bool = False,
        actor: str | None = None,
    ) -> list[PermissionEntry]: ...
