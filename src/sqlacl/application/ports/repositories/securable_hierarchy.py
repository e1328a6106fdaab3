"""Securable hierarchy port."""

from typing import Protocol

from sqlacl.domain.entities import Securable
from sqlacl.domain.value_objects import ObjectType, SecurableKind


class SecurableHierarchy(Protocol):
    """Port for the server -> database -> schema -> object -> column tree."""

    def get(self, securable_id: str) -> Securable | None: ...

    def exists(self, securable_id: str) -> bool: ...

    def children_of(self, securable_id: str) -> list[Securable]: ...

    def add_securable(
        self,
        securable_id: str,
        kind: SecurableKind,
        parent_id: str | None,
        object_type: ObjectType | None = None,
    ) -> Securable: ...

    def ancestor_chain(self, securable_id: str) -> tuple[Securable, ...]: ...

    def remove_securable(self, securable_id: str) -> list[Securable]: ...
