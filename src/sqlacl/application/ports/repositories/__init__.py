"""Repository ports."""

from sqlacl.application.ports.repositories.ownership_registry import OwnershipRegistry
from sqlacl.application.ports.repositories.permission_store import PermissionStore
from sqlacl.application.ports.repositories.principal_directory import (
    PrincipalDirectory,
)
from sqlacl.application.ports.repositories.securable_hierarchy import (
    SecurableHierarchy,
)

__all__ = [
    "OwnershipRegistry",
    "PermissionStore",
    "PrincipalDirectory",
    "SecurableHierarchy",
]
