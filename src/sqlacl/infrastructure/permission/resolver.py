"""Permission resolver - effective decision from explicit entries.

Precedence, highest first:

1. Any DENY for the principal or any role it belongs to (transitively), on the
   securable or any of its ancestors, denies. Scope does not matter: a column
   DENY beats a schema GRANT, and a server DENY beats a column GRANT.
2. Otherwise any GRANT in the same candidate set allows.
3. Otherwise access is denied by default.
"""

import logging

from sqlacl.application.dto.access_explanation import AccessExplanation
from sqlacl.application.ports.unit_of_work import UnitOfWork
from sqlacl.domain.entities import PermissionEntry, PermissionKey
from sqlacl.domain.exceptions import UnknownPrincipal, UnknownSecurable
from sqlacl.domain.value_objects import (
    Decision,
    Effect,
    PermissionKind,
    applicable_permissions,
)
from sqlacl.infrastructure.persistence.memory.database import InMemoryDatabase
from sqlacl.infrastructure.persistence.memory.unit_of_work import MemoryReadView

logger = logging.getLogger(__name__)


class PermissionResolver:
    """Resolves access against the published snapshot or an open unit of work."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._database = database

    def _view(self) -> MemoryReadView:
        return MemoryReadView(self._database.snapshot())

    def resolve(
        self, principal_id: str, permission: PermissionKind, securable_id: str
    ) -> Decision:
        """Can principal_id use permission on securable_id?"""
        return self._evaluate(self._view(), principal_id, permission, securable_id).decision

    def resolve_in(
        self,
        view: UnitOfWork,
        principal_id: str,
        permission: PermissionKind,
        securable_id: str,
    ) -> Decision:
        """Same as resolve, against uncommitted state of an open unit of work."""
        return self._evaluate(view, principal_id, permission, securable_id).decision

    def explain(
        self, principal_id: str, permission: PermissionKind, securable_id: str
    ) -> AccessExplanation:
        """Decision together with the candidate set and the entries found in it."""
        return self._evaluate(self._view(), principal_id, permission, securable_id)

    def effective_permissions(
        self, principal_id: str, securable_id: str
    ) -> dict[PermissionKind, Decision]:
        """Decision for every permission applicable to the securable's kind."""
        view = self._view()
        securable = view.securables.get(securable_id)
        if securable is None:
            raise UnknownSecurable(f"Securable not found: {securable_id}")
        return {
            perm: self._evaluate(view, principal_id, perm, securable_id).decision
            for perm in applicable_permissions(securable.kind)
        }

    def _evaluate(
        self,
        view: UnitOfWork,
        principal_id: str,
        permission: PermissionKind,
        securable_id: str,
    ) -> AccessExplanation:
        permission = PermissionKind.parse(permission)
        if not view.principals.exists(principal_id):
            raise UnknownPrincipal(f"Principal not found: {principal_id}")
        if not view.securables.exists(securable_id):
            raise UnknownSecurable(f"Securable not found: {securable_id}")

        principals = [principal_id, *sorted(view.principals.transitive_roles(principal_id))]
        scopes = [s.id for s in view.securables.ancestor_chain(securable_id)]

        matches: list[PermissionEntry] = []
        for scope_id in scopes:
            for candidate in principals:
                entry = view.permissions.get(PermissionKey(candidate, permission, scope_id))
                if entry is not None:
                    matches.append(entry)

        if any(e.effect == Effect.DENY for e in matches):
            decision = Decision.DENY
        elif matches:
            decision = Decision.ALLOW
        else:
            decision = Decision.DENY

        logger.debug(
            "%s %s on %s -> %s (%d matching entries)",
            principal_id,
            permission,
            securable_id,
            decision,
            len(matches),
        )
        return AccessExplanation(
            principal_id=principal_id,
            permission=permission,
            securable_id=securable_id,
            decision=decision,
            candidate_principals=principals,
            scope_chain=scopes,
            matching_entries=matches,
        )
