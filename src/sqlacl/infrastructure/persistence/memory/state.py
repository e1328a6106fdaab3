"""In-memory access control state."""

from dataclasses import dataclass, field

from sqlacl.domain.entities import PermissionEntry, PermissionKey, Principal, Securable


@dataclass
class AclState:
    """All principals, securables, entries and owners of one database.

    A published state is read-only; writers mutate a private copy.
    """

    principals: dict[str, Principal] = field(default_factory=dict)
    # member -> roles it belongs to
    memberships: dict[str, set[str]] = field(default_factory=dict)
    # role -> direct members
    members: dict[str, set[str]] = field(default_factory=dict)
    securables: dict[str, Securable] = field(default_factory=dict)
    children: dict[str, list[str]] = field(default_factory=dict)
    entries: dict[PermissionKey, PermissionEntry] = field(default_factory=dict)
    owners: dict[str, str] = field(default_factory=dict)
    read_only: bool = False

    def copy(self) -> "AclState":
        """Writable copy; entities are frozen so only containers are copied."""
        return AclState(
            principals=dict(self.principals),
            memberships={k: set(v) for k, v in self.memberships.items()},
            members={k: set(v) for k, v in self.members.items()},
            securables=dict(self.securables),
            children={k: list(v) for k, v in self.children.items()},
            entries=dict(self.entries),
            owners=dict(self.owners),
        )

    def ensure_writable(self) -> None:
        if self.read_only:
            raise RuntimeError("State snapshot is read-only; open a unit of work to modify it")
