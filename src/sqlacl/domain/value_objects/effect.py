"""Effect of an explicit permission entry."""

from enum import StrEnum


class Effect(StrEnum):
    """GRANT or DENY."""

    GRANT = "grant"
    DENY = "deny"
