"""Schema catalog port - read-only snapshot of securable definitions."""

from typing import Protocol

from sqlacl.application.dto.securable_definition import SecurableDefinition


class SchemaCatalog(Protocol):
    """Supplies securable definitions, parents before children."""

    def load(self) -> list[SecurableDefinition]: ...
