"""Drop securable use case."""

import logging

from sqlacl.application.ports import UnitOfWorkFactory
from sqlacl.domain.entities import Securable

logger = logging.getLogger(__name__)


class DropSecurableUseCase:
    """DROP SCHEMA / TABLE ... Containers must be empty."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    def execute(self, securable_id: str) -> list[Securable]:
        with self._uow_factory() as uow:
            dropped = uow.securables.remove_securable(securable_id)

        logger.info("Dropped %s (%d securables)", securable_id, len(dropped))
        return dropped
