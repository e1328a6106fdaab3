"""Domain entities."""

from sqlacl.domain.entities.audit_event import AuditEvent
from sqlacl.domain.entities.permission_entry import PermissionEntry, PermissionKey
from sqlacl.domain.entities.principal import Principal
from sqlacl.domain.entities.securable import Securable

__all__ = [
    "AuditEvent",
    "PermissionEntry",
    "PermissionKey",
    "Principal",
    "Securable",
]
