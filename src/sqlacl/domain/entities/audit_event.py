"""Audit event entity - one change to the permission store."""

from dataclasses import dataclass
from datetime import datetime

from sqlacl.domain.entities.permission_entry import PermissionKey
from sqlacl.domain.value_objects import Effect


@dataclass(frozen=True)
class AuditEvent:
    """Who changed which entry, and its effect before and after."""

    actor: str | None
    operation: str
    key: PermissionKey
    before: Effect | None
    after: Effect | None
    occurred_at: datetime
    grant_option_before: bool = False
    grant_option_after: bool = False
