"""Import schema catalog use case."""

import logging

from sqlacl.application.ports import SchemaCatalog, UnitOfWorkFactory
from sqlacl.domain.entities import Securable
from sqlacl.domain.exceptions import DuplicateSecurable

logger = logging.getLogger(__name__)


class ImportCatalogUseCase:
    """Load securables from a schema catalog snapshot in one transaction."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    def execute(self, catalog: SchemaCatalog) -> list[Securable]:
        """Register every definition; identical existing securables are skipped.

        Returns the securables that were created.
        """
        definitions = catalog.load()
        created: list[Securable] = []
        with self._uow_factory() as uow:
            for definition in definitions:
                existing = uow.securables.get(definition.id)
                if existing is not None:
                    if (
                        existing.kind != definition.kind
                        or existing.parent_id != definition.parent_id
                    ):
                        raise DuplicateSecurable(
                            f"Catalog redefines {definition.id} as {definition.kind} "
                            f"under {definition.parent_id}"
                        )
                else:
                    created.append(
                        uow.securables.add_securable(
                            definition.id,
                            definition.kind,
                            definition.parent_id,
                            definition.object_type,
                        )
                    )
                if definition.owner is not None:
                    uow.ownership.set_owner(definition.id, definition.owner)

        logger.info("Imported %d securables from catalog", len(created))
        return created
