"""In-memory principal directory."""

from collections import deque

from sqlacl.domain.entities import Principal
from sqlacl.domain.exceptions import (
    CycleDetected,
    DependentGrantsExist,
    DuplicatePrincipal,
    NotARole,
    PrincipalHasMembers,
    PrincipalOwnsObjects,
    UnknownPrincipal,
    ValidationError,
)
from sqlacl.domain.value_objects import PrincipalKind
from sqlacl.infrastructure.persistence.memory.permission_store import MemoryPermissionStore
from sqlacl.infrastructure.persistence.memory.state import AclState


class MemoryPrincipalDirectory:
    """Users, roles and the acyclic role membership graph."""

    def __init__(self, state: AclState, permissions: MemoryPermissionStore) -> None:
        self._state = state
        self._permissions = permissions

    def get(self, principal_id: str) -> Principal | None:
        return self._state.principals.get(principal_id)

    def exists(self, principal_id: str) -> bool:
        return principal_id in self._state.principals

    def list_all(self) -> list[Principal]:
        return sorted(self._state.principals.values(), key=lambda p: p.id)

    def require(self, principal_id: str) -> Principal:
        """Get principal or raise UnknownPrincipal."""
        principal = self._state.principals.get(principal_id)
        if principal is None:
            raise UnknownPrincipal(f"Principal not found: {principal_id}")
        return principal

    def add_principal(self, principal_id: str, kind: PrincipalKind) -> Principal:
        """Create a user or role (CREATE USER / CREATE ROLE)."""
        self._state.ensure_writable()
        if not principal_id or not principal_id.strip():
            raise ValidationError("Principal id must not be empty")
        if principal_id in self._state.principals:
            raise DuplicatePrincipal(f"Principal already exists: {principal_id}")
        try:
            kind = PrincipalKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown principal kind: {kind}") from None
        principal = Principal(id=principal_id, kind=kind)
        self._state.principals[principal_id] = principal
        self._state.memberships[principal_id] = set()
        if principal.is_role:
            self._state.members[principal_id] = set()
        return principal

    def add_membership(self, member_id: str, role_id: str) -> None:
        """Make member_id a direct member of role_id (ALTER ROLE ... ADD MEMBER)."""
        self._state.ensure_writable()
        self.require(member_id)
        role = self.require(role_id)
        if not role.is_role:
            raise NotARole(f"{role_id} is a {role.kind}, not a role")
        if member_id == role_id:
            raise CycleDetected(f"Role {role_id} cannot be a member of itself")
        if member_id in self.transitive_roles(role_id):
            raise CycleDetected(
                f"Role {role_id} is already a member of {member_id}; "
                f"adding {member_id} to {role_id} would create a cycle"
            )
        self._state.memberships[member_id].add(role_id)
        self._state.members[role_id].add(member_id)

    def remove_membership(self, member_id: str, role_id: str) -> None:
        """Drop a direct membership edge (ALTER ROLE ... DROP MEMBER)."""
        self._state.ensure_writable()
        self.require(member_id)
        role = self.require(role_id)
        if not role.is_role:
            raise NotARole(f"{role_id} is a {role.kind}, not a role")
        self._state.memberships[member_id].discard(role_id)
        self._state.members[role_id].discard(member_id)

    def remove_principal(self, principal_id: str, actor: str | None = None) -> None:
        """Drop a principal, its memberships and its own entries.

        Ownership, members and grants made to others must be cleaned up first.
        """
        self._state.ensure_writable()
        principal = self.require(principal_id)

        owned = sorted(s for s, owner in self._state.owners.items() if owner == principal_id)
        if owned:
            raise PrincipalOwnsObjects(
                f"{principal_id} owns {', '.join(owned)}; transfer ownership first"
            )
        if principal.is_role and self._state.members.get(principal_id):
            members = ", ".join(sorted(self._state.members[principal_id]))
            raise PrincipalHasMembers(f"Role {principal_id} still has members: {members}")
        delegated = [
            e
            for e in self._permissions.entries_granted_by(principal_id)
            if e.principal_id != principal_id
        ]
        if delegated:
            raise DependentGrantsExist(
                f"{principal_id} granted {len(delegated)} permission(s) to other principals"
            )

        self._permissions.remove_all_for_principal(principal_id, actor=actor)
        for role_id in self._state.memberships.pop(principal_id, set()):
            self._state.members[role_id].discard(principal_id)
        self._state.members.pop(principal_id, None)
        del self._state.principals[principal_id]

    def members_of(self, role_id: str) -> frozenset[str]:
        self.require(role_id)
        return frozenset(self._state.members.get(role_id, ()))

    def roles_of(self, member_id: str) -> frozenset[str]:
        self.require(member_id)
        return frozenset(self._state.memberships.get(member_id, ()))

    def transitive_roles(self, principal_id: str) -> frozenset[str]:
        """All roles reachable from principal_id over membership edges (BFS)."""
        self.require(principal_id)
        visited: set[str] = {principal_id}
        queue = deque([principal_id])
        while queue:
            current = queue.popleft()
            for role_id in self._state.memberships.get(current, ()):
                if role_id not in visited:
                    visited.add(role_id)
                    queue.append(role_id)
        visited.discard(principal_id)
        return frozenset(visited)
