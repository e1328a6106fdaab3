"""Securable definition DTO supplied by a schema catalog."""

from dataclasses import dataclass

from sqlacl.domain.value_objects import ObjectType, SecurableKind


@dataclass
class SecurableDefinition:
    """One securable to register, with its optional owner."""

    id: str
    kind: SecurableKind
    parent_id: str | None
    object_type: ObjectType | None = None
    owner: str | None = None
