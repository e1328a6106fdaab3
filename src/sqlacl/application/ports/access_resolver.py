"""Access resolver port - effective permission decisions."""

from typing import Protocol

from sqlacl.application.dto.access_explanation import AccessExplanation
from sqlacl.application.ports.unit_of_work import UnitOfWork
from sqlacl.domain.value_objects import Decision, PermissionKind


class AccessResolver(Protocol):
    """Port for resolving whether a principal may use a permission on a securable."""

    def resolve(
        self, principal_id: str, permission: PermissionKind, securable_id: str
    ) -> Decision: ...

    def resolve_in(
        self,
        view: UnitOfWork,
        principal_id: str,
        permission: PermissionKind,
        securable_id: str,
    ) -> Decision: ...

    def explain(
        self, principal_id: str, permission: PermissionKind, securable_id: str
    ) -> AccessExplanation: ...

    def effective_permissions(
        self, principal_id: str, securable_id: str
    ) -> dict[PermissionKind, Decision]: ...
