"""Outcome of a permission check."""

from enum import StrEnum


class Decision(StrEnum):
    """Effective access decision. Denied access is a value, not an error."""

    ALLOW = "allow"
    DENY = "deny"
