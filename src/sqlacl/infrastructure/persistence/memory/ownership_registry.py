"""In-memory ownership registry."""

from sqlacl.domain.exceptions import UnknownPrincipal, UnknownSecurable
from sqlacl.infrastructure.persistence.memory.state import AclState


class MemoryOwnershipRegistry:
    """Securable -> owning principal."""

    def __init__(self, state: AclState) -> None:
        self._state = state

    def owner_of(self, securable_id: str) -> str | None:
        return self._state.owners.get(securable_id)

    def owned_by(self, principal_id: str) -> list[str]:
        return sorted(s for s, owner in self._state.owners.items() if owner == principal_id)

    def set_owner(self, securable_id: str, principal_id: str) -> str | None:
        """ALTER AUTHORIZATION. Returns the previous owner."""
        self._state.ensure_writable()
        if securable_id not in self._state.securables:
            raise UnknownSecurable(f"Securable not found: {securable_id}")
        if principal_id not in self._state.principals:
            raise UnknownPrincipal(f"Principal not found: {principal_id}")
        previous = self._state.owners.get(securable_id)
        self._state.owners[securable_id] = principal_id
        return previous
