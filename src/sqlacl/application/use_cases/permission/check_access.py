"""Check access use cases."""

from sqlacl.application.dto.access_explanation import AccessExplanation
from sqlacl.application.ports import AccessResolver
from sqlacl.domain.value_objects import Decision, PermissionKind


class CheckAccessUseCase:
    """Can a principal use a permission on a securable?"""

    def __init__(self, resolver: AccessResolver) -> None:
        self._resolver = resolver

    def execute(
        self, principal_id: str, permission: str | PermissionKind, securable_id: str
    ) -> Decision:
        return self._resolver.resolve(principal_id, PermissionKind.parse(permission), securable_id)

    def explain(
        self, principal_id: str, permission: str | PermissionKind, securable_id: str
    ) -> AccessExplanation:
        return self._resolver.explain(principal_id, PermissionKind.parse(permission), securable_id)


class EffectivePermissionsUseCase:
    """Every applicable permission of a principal on a securable (fn_my_permissions)."""

    def __init__(self, resolver: AccessResolver) -> None:
        self._resolver = resolver

    def execute(self, principal_id: str, securable_id: str) -> dict[PermissionKind, Decision]:
        return self._resolver.effective_permissions(principal_id, securable_id)

    def allowed(self, principal_id: str, securable_id: str) -> list[PermissionKind]:
        """Only the permissions that resolve to ALLOW."""
        return [
            perm
            for perm, decision in self.execute(principal_id, securable_id).items()
            if decision == Decision.ALLOW
        ]
