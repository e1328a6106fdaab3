"""Transfer ownership use case."""

import logging

from sqlacl.application.ports import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class TransferOwnershipUseCase:
    """ALTER AUTHORIZATION ON <securable> TO <principal>."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    def execute(self, securable_id: str, new_owner: str) -> str | None:
        """Set the owner; returns the previous owner."""
        with self._uow_factory() as uow:
            previous = uow.ownership.set_owner(securable_id, new_owner)

        logger.info("Ownership of %s: %s -> %s", securable_id, previous, new_owner)
        return previous
