"""Ownership registry port."""

from typing import Protocol


class OwnershipRegistry(Protocol):
    """Port for securable ownership (one owner per securable)."""

    def owner_of(self, securable_id: str) -> str | None: ...

    def owned_by(self, principal_id: str) -> list[str]: ...

    def set_owner(self, securable_id: str, principal_id: str) -> str | None: ...
