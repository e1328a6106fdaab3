"""In-memory permission store."""

from collections import deque
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from sqlacl.domain.entities import AuditEvent, PermissionEntry, PermissionKey
from sqlacl.domain.exceptions import (
    DependentGrantsExist,
    InvalidGrantOption,
    UnknownPrincipal,
    UnknownSecurable,
    ValidationError,
)
from sqlacl.domain.value_objects import Effect, PermissionKind
from sqlacl.infrastructure.persistence.memory.state import AclState


class MemoryPermissionStore:
    """Explicit GRANT/DENY entries, one per (principal, permission, securable)."""

    def __init__(
        self,
        state: AclState,
        record: Callable[[AuditEvent], None] | None = None,
    ) -> None:
        self._state = state
        self._record = record or (lambda event: None)

    def get(self, key: PermissionKey) -> PermissionEntry | None:
        return self._state.entries.get(key)

    def entries_for(self, principal_id: str) -> list[PermissionEntry]:
        return [e for e in self._state.entries.values() if e.principal_id == principal_id]

    def entries_on(self, securable_id: str) -> list[PermissionEntry]:
        return [e for e in self._state.entries.values() if e.securable_id == securable_id]

    def entries_granted_by(self, grantor_id: str) -> list[PermissionEntry]:
        return [e for e in self._state.entries.values() if e.grantor_id == grantor_id]

    def dependents(
        self, principal_id: str, permission: PermissionKind, securable_id: str
    ) -> list[PermissionEntry]:
        """Entries delegated by principal_id for the same permission and securable."""
        return [
            e
            for e in self._state.entries.values()
            if e.grantor_id == principal_id
            and e.permission == permission
            and e.securable_id == securable_id
            and e.principal_id != principal_id
        ]

    def write(
        self,
        principal_id: str,
        permission: PermissionKind,
        securable_id: str,
        effect: Effect,
        grant_option: bool = False,
        grantor_id: str | None = None,
        cascade: bool = False,
    ) -> Effect | None:
        """Upsert the entry for the exact key. Returns the prior effect, if any."""
        self._state.ensure_writable()
        permission = PermissionKind.parse(permission)
        try:
            effect = Effect(effect)
        except ValueError:
            raise ValidationError(f"Unknown effect: {effect}") from None
        self._require_principal(principal_id)
        self._require_securable(securable_id)
        if grantor_id is not None:
            self._require_principal(grantor_id)
        if effect == Effect.DENY and grant_option:
            raise InvalidGrantOption("DENY cannot be issued WITH GRANT OPTION")

        key = PermissionKey(principal_id, permission, securable_id)
        prior = self._state.entries.get(key)
        removed: list[PermissionEntry] = []
        if prior is not None and prior.grant_option and not grant_option:
            deps = self._delegated(prior)
            if deps and not cascade:
                raise DependentGrantsExist(
                    f"{key} has {len(deps)} delegated grant(s); CASCADE is required"
                )
            self._revoke_dependents(deps, grantor_id, {key}, removed)

        entry = PermissionEntry(
            principal_id=principal_id,
            permission=permission,
            securable_id=securable_id,
            effect=effect,
            grant_option=grant_option,
            grantor_id=grantor_id,
        )
        self._state.entries[key] = entry
        self._emit(grantor_id, effect.name, prior, entry)
        return prior.effect if prior else None

    def revoke(
        self,
        principal_id: str,
        permission: PermissionKind,
        securable_id: str,
        cascade: bool = False,
        actor: str | None = None,
    ) -> list[PermissionEntry]:
        """Remove exactly the entry at this key, and its delegated grants with cascade.

        Entries at other scopes and entries held by roles are never touched.
        Returns the removed entries (empty when nothing matched).
        """
        self._state.ensure_writable()
        permission = PermissionKind.parse(permission)
        key = PermissionKey(principal_id, permission, securable_id)
        entry = self._state.entries.get(key)
        if entry is None:
            return []

        deps = self._delegated(entry)
        if deps and not cascade:
            raise DependentGrantsExist(
                f"{key} has {len(deps)} delegated grant(s); CASCADE is required"
            )
        removed: list[PermissionEntry] = []
        self._remove(entry, actor, "REVOKE", removed)
        self._revoke_dependents(deps, actor, {key}, removed)
        return removed

    def revoke_grant_option_only(
        self,
        principal_id: str,
        permission: PermissionKind,
        securable_id: str,
        cascade: bool = False,
        actor: str | None = None,
    ) -> list[PermissionEntry]:
        """REVOKE GRANT OPTION FOR: keep the GRANT, drop the right to delegate it.

        Returns the delegated entries removed by cascade.
        """
        self._state.ensure_writable()
        permission = PermissionKind.parse(permission)
        key = PermissionKey(principal_id, permission, securable_id)
        entry = self._state.entries.get(key)
        if entry is None or not entry.grant_option:
            return []

        deps = self._delegated(entry)
        if deps and not cascade:
            raise DependentGrantsExist(
                f"{key} has {len(deps)} delegated grant(s); CASCADE is required"
            )
        updated = entry.without_grant_option()
        self._state.entries[key] = updated
        self._emit(actor, "REVOKE GRANT OPTION", entry, updated)
        removed: list[PermissionEntry] = []
        self._revoke_dependents(deps, actor, {key}, removed)
        return removed

    def remove_all_for_principal(
        self, principal_id: str, actor: str | None = None
    ) -> list[PermissionEntry]:
        """REVOKE ALL FROM principal, without dependency checks."""
        self._state.ensure_writable()
        removed: list[PermissionEntry] = []
        for entry in self.entries_for(principal_id):
            self._remove(entry, actor, "REVOKE ALL", removed)
        return removed

    def remove_all_on_securable(
        self, securable_id: str, actor: str | None = None
    ) -> list[PermissionEntry]:
        """Drop every entry on a securable that is being dropped."""
        self._state.ensure_writable()
        removed: list[PermissionEntry] = []
        for entry in self.entries_on(securable_id):
            self._remove(entry, actor, "DROP", removed)
        return removed

    def _revoke_dependents(
        self,
        dependents: Iterable[PermissionEntry],
        actor: str | None,
        visited: set[PermissionKey],
        removed: list[PermissionEntry],
    ) -> None:
        queue = deque(dependents)
        while queue:
            candidate = queue.popleft()
            if candidate.key in visited:
                continue
            visited.add(candidate.key)
            current = self._state.entries.get(candidate.key)
            if current is None:
                continue
            self._remove(current, actor, "REVOKE CASCADE", removed)
            queue.extend(self._delegated(current))

    def _delegated(self, entry: PermissionEntry) -> list[PermissionEntry]:
        # Only a GRANT WITH GRANT OPTION can have been passed on.
        if entry.effect != Effect.GRANT or not entry.grant_option:
            return []
        return self.dependents(entry.principal_id, entry.permission, entry.securable_id)

    def _remove(
        self,
        entry: PermissionEntry,
        actor: str | None,
        operation: str,
        removed: list[PermissionEntry],
    ) -> None:
        del self._state.entries[entry.key]
        removed.append(entry)
        self._emit(actor, operation, entry, None)

    def _emit(
        self,
        actor: str | None,
        operation: str,
        before: PermissionEntry | None,
        after: PermissionEntry | None,
    ) -> None:
        key = (after or before).key
        self._record(
            AuditEvent(
                actor=actor,
                operation=operation,
                key=key,
                before=before.effect if before else None,
                after=after.effect if after else None,
                occurred_at=datetime.now(UTC),
                grant_option_before=before.grant_option if before else False,
                grant_option_after=after.grant_option if after else False,
            )
        )

    def _require_principal(self, principal_id: str) -> None:
        if principal_id not in self._state.principals:
            raise UnknownPrincipal(f"Principal not found: {principal_id}")

    def _require_securable(self, securable_id: str) -> None:
        if securable_id not in self._state.securables:
            raise UnknownSecurable(f"Securable not found: {securable_id}")
