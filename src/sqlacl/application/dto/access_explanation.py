"""Access explanation DTO."""

from dataclasses import dataclass, field

from sqlacl.domain.entities import PermissionEntry
from sqlacl.domain.value_objects import Decision, PermissionKind


@dataclass
class AccessExplanation:
    """Decision plus the entries that produced it."""

    principal_id: str
    permission: PermissionKind
    securable_id: str
    decision: Decision
    candidate_principals: list[str] = field(default_factory=list)
    scope_chain: list[str] = field(default_factory=list)
    matching_entries: list[PermissionEntry] = field(default_factory=list)

    @property
    def deciding_entries(self) -> list[PermissionEntry]:
        """Entries with the same effect as the decision (empty on default-deny)."""
        wanted = "deny" if self.decision == Decision.DENY else "grant"
        return [e for e in self.matching_entries if e.effect == wanted]
