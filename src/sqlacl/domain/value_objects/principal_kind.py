"""Principal kinds."""

from enum import StrEnum


class PrincipalKind(StrEnum):
    """Kinds of principals that can hold permissions."""

    USER = "user"
    ROLE = "role"
