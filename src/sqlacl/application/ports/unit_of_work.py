"""Unit of Work port - transactional boundary."""

from contextlib import AbstractContextManager
from typing import Protocol

from sqlacl.application.ports.repositories.ownership_registry import OwnershipRegistry
from sqlacl.application.ports.repositories.permission_store import PermissionStore
from sqlacl.application.ports.repositories.principal_directory import (
    PrincipalDirectory,
)
from sqlacl.application.ports.repositories.securable_hierarchy import (
    SecurableHierarchy,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages the write transaction and repository access."""

    @property
    def principals(self) -> PrincipalDirectory: ...

    @property
    def securables(self) -> SecurableHierarchy: ...

    @property
    def permissions(self) -> PermissionStore: ...

    @property
    def ownership(self) -> OwnershipRegistry: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    def __call__(self) -> AbstractContextManager[UnitOfWork]: ...
