"""Principal directory port."""

from typing import Protocol

from sqlacl.domain.entities import Principal
from sqlacl.domain.value_objects import PrincipalKind


class PrincipalDirectory(Protocol):
    """Port for users, roles and role memberships."""

    def get(self, principal_id: str) -> Principal | None: ...

    def exists(self, principal_id: str) -> bool: ...

    def list_all(self) -> list[Principal]: ...

    def add_principal(self, principal_id: str, kind: PrincipalKind) -> Principal: ...

    def add_membership(self, member_id: str, role_id: str) -> None: ...

    def remove_membership(self, member_id: str, role_id: str) -> None: ...

    def remove_principal(self, principal_id: str, actor: str | None = None) -> None: ...

    def members_of(self, role_id: str) -> frozenset[str]: ...

    def roles_of(self, member_id: str) -> frozenset[str]: ...

    def transitive_roles(self, principal_id: str) -> frozenset[str]: ...
