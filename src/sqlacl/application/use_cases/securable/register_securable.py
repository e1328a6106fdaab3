"""Register securable use case."""

import logging

from sqlacl.application.ports import UnitOfWorkFactory
from sqlacl.domain.entities import Securable
from sqlacl.domain.value_objects import ObjectType, SecurableKind

logger = logging.getLogger(__name__)


class RegisterSecurableUseCase:
    """CREATE DATABASE / SCHEMA / TABLE ... as a node in the hierarchy."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    def execute(
        self,
        securable_id: str,
        kind: SecurableKind,
        parent_id: str | None,
        object_type: ObjectType | None = None,
        owner: str | None = None,
    ) -> Securable:
        with self._uow_factory() as uow:
            securable = uow.securables.add_securable(securable_id, kind, parent_id, object_type)
            if owner is not None:
                uow.ownership.set_owner(securable_id, owner)

        logger.info("Registered %s %s", securable.kind, securable.id)
        return securable
