"""Permission kinds and where they apply."""

from enum import StrEnum

from sqlacl.domain.exceptions import ValidationError
from sqlacl.domain.value_objects.securable_kind import SecurableKind


class PermissionKind(StrEnum):
    """Permissions that can be granted, denied or revoked."""

    # Object, schema and column permissions
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    EXECUTE = "EXECUTE"
    REFERENCES = "REFERENCES"
    ALTER = "ALTER"
    CONTROL = "CONTROL"
    VIEW_DEFINITION = "VIEW DEFINITION"
    TAKE_OWNERSHIP = "TAKE OWNERSHIP"

    # Database permissions
    CREATE_TABLE = "CREATE TABLE"
    CREATE_VIEW = "CREATE VIEW"
    CREATE_PROCEDURE = "CREATE PROCEDURE"
    CREATE_FUNCTION = "CREATE FUNCTION"
    BACKUP_DATABASE = "BACKUP DATABASE"
    BACKUP_LOG = "BACKUP LOG"
    VIEW_DATABASE_STATE = "VIEW DATABASE STATE"

    # Server permissions
    VIEW_SERVER_STATE = "VIEW SERVER STATE"
    ALTER_ANY_DATABASE = "ALTER ANY DATABASE"
    CONTROL_SERVER = "CONTROL SERVER"

    @classmethod
    def parse(cls, value: "str | PermissionKind") -> "PermissionKind":
        """Parse 'select', 'CREATE TABLE' or 'create_table' into a PermissionKind."""
        if isinstance(value, PermissionKind):
            return value
        normalized = " ".join(value.replace("_", " ").split()).upper()
        try:
            return cls(normalized)
        except ValueError:
            raise ValidationError(f"Unknown permission: {value}") from None


# Pseudo-permission expanded by GRANT/DENY/REVOKE ALL
ALL_PERMISSIONS = "ALL"

_OBJECT_PERMISSIONS: tuple[PermissionKind, ...] = (
    PermissionKind.SELECT,
    PermissionKind.INSERT,
    PermissionKind.UPDATE,
    PermissionKind.DELETE,
    PermissionKind.EXECUTE,
    PermissionKind.REFERENCES,
    PermissionKind.ALTER,
    PermissionKind.CONTROL,
    PermissionKind.VIEW_DEFINITION,
    PermissionKind.TAKE_OWNERSHIP,
)

_DATABASE_PERMISSIONS: tuple[PermissionKind, ...] = (
    PermissionKind.CREATE_TABLE,
    PermissionKind.CREATE_VIEW,
    PermissionKind.CREATE_PROCEDURE,
    PermissionKind.CREATE_FUNCTION,
    PermissionKind.BACKUP_DATABASE,
    PermissionKind.BACKUP_LOG,
    PermissionKind.VIEW_DATABASE_STATE,
)

_SERVER_PERMISSIONS: tuple[PermissionKind, ...] = (
    PermissionKind.VIEW_SERVER_STATE,
    PermissionKind.ALTER_ANY_DATABASE,
    PermissionKind.CONTROL_SERVER,
)

_APPLICABLE: dict[SecurableKind, tuple[PermissionKind, ...]] = {
    SecurableKind.SERVER: _SERVER_PERMISSIONS,
    SecurableKind.DATABASE: _OBJECT_PERMISSIONS + _DATABASE_PERMISSIONS,
    SecurableKind.SCHEMA: _OBJECT_PERMISSIONS,
    SecurableKind.OBJECT: _OBJECT_PERMISSIONS,
    SecurableKind.COLUMN: (
        PermissionKind.SELECT,
        PermissionKind.UPDATE,
        PermissionKind.REFERENCES,
    ),
}


def applicable_permissions(kind: SecurableKind) -> tuple[PermissionKind, ...]:
    """Permissions meaningful at the given securable kind."""
    return _APPLICABLE[kind]


def expand_permissions(
    permissions: list[str | PermissionKind], kind: SecurableKind
) -> list[PermissionKind]:
    """Expand ALL and parse names; order preserved, duplicates dropped."""
    result: list[PermissionKind] = []
    for item in permissions:
        if isinstance(item, str) and item.strip().upper() == ALL_PERMISSIONS:
            expanded = list(applicable_permissions(kind))
        else:
            expanded = [PermissionKind.parse(item)]
        for perm in expanded:
            if perm not in result:
                result.append(perm)
    return result
