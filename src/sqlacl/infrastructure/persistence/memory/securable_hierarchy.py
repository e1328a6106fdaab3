"""In-memory securable hierarchy."""

from sqlacl.domain.entities import Securable
from sqlacl.domain.exceptions import (
    DuplicateSecurable,
    InvalidParent,
    NotEmpty,
    UnknownSecurable,
    ValidationError,
)
from sqlacl.domain.value_objects import ObjectType, SecurableKind
from sqlacl.infrastructure.persistence.memory.permission_store import MemoryPermissionStore
from sqlacl.infrastructure.persistence.memory.state import AclState


class MemorySecurableHierarchy:
    """Tree of securables: every node except the server has exactly one parent."""

    def __init__(self, state: AclState, permissions: MemoryPermissionStore) -> None:
        self._state = state
        self._permissions = permissions

    def get(self, securable_id: str) -> Securable | None:
        return self._state.securables.get(securable_id)

    def exists(self, securable_id: str) -> bool:
        return securable_id in self._state.securables

    def require(self, securable_id: str) -> Securable:
        """Get securable or raise UnknownSecurable."""
        securable = self._state.securables.get(securable_id)
        if securable is None:
            raise UnknownSecurable(f"Securable not found: {securable_id}")
        return securable

    def children_of(self, securable_id: str) -> list[Securable]:
        self.require(securable_id)
        return [self._state.securables[c] for c in self._state.children.get(securable_id, ())]

    def add_securable(
        self,
        securable_id: str,
        kind: SecurableKind,
        parent_id: str | None,
        object_type: ObjectType | None = None,
    ) -> Securable:
        """Register a securable under a parent of the containing kind."""
        self._state.ensure_writable()
        try:
            kind = SecurableKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown securable kind: {kind}") from None
        if not securable_id or not securable_id.strip():
            raise ValidationError("Securable id must not be empty")
        if securable_id in self._state.securables:
            raise DuplicateSecurable(f"Securable already exists: {securable_id}")
        if object_type is not None and kind != SecurableKind.OBJECT:
            raise ValidationError(f"object_type only applies to objects, not {kind}")
        if object_type is not None:
            try:
                object_type = ObjectType(object_type)
            except ValueError:
                raise ValidationError(f"Unknown object type: {object_type}") from None

        expected = kind.parent_kind
        if expected is None:
            if parent_id is not None:
                raise InvalidParent(f"A {kind} is the root and cannot have a parent")
        else:
            if parent_id is None:
                raise InvalidParent(f"A {kind} must be created inside a {expected}")
            parent = self.require(parent_id)
            if parent.kind != expected:
                raise InvalidParent(
                    f"A {kind} must be created inside a {expected}, not a {parent.kind}"
                )

        securable = Securable(
            id=securable_id,
            kind=kind,
            parent_id=parent_id,
            object_type=object_type,
        )
        self._state.securables[securable_id] = securable
        self._state.children[securable_id] = []
        if parent_id is not None:
            self._state.children[parent_id].append(securable_id)
        return securable

    def ancestor_chain(self, securable_id: str) -> tuple[Securable, ...]:
        """The securable itself, then each ancestor up to the server."""
        chain: list[Securable] = []
        visited: set[str] = set()
        current: str | None = securable_id
        while current is not None and current not in visited:
            visited.add(current)
            securable = self.require(current)
            chain.append(securable)
            current = securable.parent_id
        return tuple(chain)

    def remove_securable(self, securable_id: str) -> list[Securable]:
        """Drop a securable. Objects take their columns with them.

        Containers with children raise NotEmpty. Entries and ownership on
        dropped securables are removed. Returns the dropped securables.
        """
        self._state.ensure_writable()
        securable = self.require(securable_id)
        child_ids = list(self._state.children.get(securable_id, ()))
        if child_ids and securable.kind != SecurableKind.OBJECT:
            raise NotEmpty(
                f"{securable.kind} {securable_id} still contains {len(child_ids)} securable(s)"
            )

        dropped = [self._state.securables[c] for c in child_ids] + [securable]
        for item in dropped:
            self._permissions.remove_all_on_securable(item.id)
            self._state.owners.pop(item.id, None)
            self._state.children.pop(item.id, None)
            del self._state.securables[item.id]
        if securable.parent_id is not None:
            self._state.children[securable.parent_id].remove(securable_id)
        return dropped
