"""Securable kinds and their containment rules."""

from enum import StrEnum


class SecurableKind(StrEnum):
    """Scope levels, from the server down to a single column."""

    SERVER = "server"
    DATABASE = "database"
    SCHEMA = "schema"
    OBJECT = "object"
    COLUMN = "column"

    @property
    def parent_kind(self) -> "SecurableKind | None":
        """Kind that must contain this kind, or None for the root."""
        return _PARENT_KIND[self]


class ObjectType(StrEnum):
    """Schema-scoped object types."""

    TABLE = "table"
    VIEW = "view"
    PROCEDURE = "procedure"
    FUNCTION = "function"
    TYPE = "type"


_PARENT_KIND: dict[SecurableKind, SecurableKind | None] = {
    SecurableKind.SERVER: None,
    SecurableKind.DATABASE: SecurableKind.SERVER,
    SecurableKind.SCHEMA: SecurableKind.DATABASE,
    SecurableKind.OBJECT: SecurableKind.SCHEMA,
    SecurableKind.COLUMN: SecurableKind.OBJECT,
}
