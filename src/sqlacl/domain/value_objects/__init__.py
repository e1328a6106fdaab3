"""Domain value objects."""

from sqlacl.domain.value_objects.decision import Decision
from sqlacl.domain.value_objects.effect import Effect
from sqlacl.domain.value_objects.permission_kind import (
    ALL_PERMISSIONS,
    PermissionKind,
    applicable_permissions,
    expand_permissions,
)
from sqlacl.domain.value_objects.principal_kind import PrincipalKind
from sqlacl.domain.value_objects.securable_kind import ObjectType, SecurableKind

__all__ = [
    "ALL_PERMISSIONS",
    "Decision",
    "Effect",
    "ObjectType",
    "PermissionKind",
    "PrincipalKind",
    "SecurableKind",
    "applicable_permissions",
    "expand_permissions",
]
