"""Principal entity - user or role."""

from dataclasses import dataclass

from sqlacl.domain.value_objects import PrincipalKind


@dataclass(frozen=True)
class Principal:
    """Principal that can hold permissions."""

    id: str
    kind: PrincipalKind

    @property
    def is_role(self) -> bool:
        return self.kind == PrincipalKind.ROLE
