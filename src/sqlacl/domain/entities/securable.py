"""Securable entity - a node in the scope hierarchy."""

from dataclasses import dataclass

from sqlacl.domain.value_objects import ObjectType, SecurableKind


@dataclass(frozen=True)
class Securable:
    """Server, database, schema, object or column."""

    id: str
    kind: SecurableKind
    parent_id: str | None = None
    object_type: ObjectType | None = None
