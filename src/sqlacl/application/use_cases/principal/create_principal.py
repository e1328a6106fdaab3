"""Create principal use case."""

import logging

from sqlacl.application.ports import UnitOfWorkFactory
from sqlacl.domain.entities import Principal
from sqlacl.domain.value_objects import PrincipalKind

logger = logging.getLogger(__name__)


class CreatePrincipalUseCase:
    """CREATE USER / CREATE ROLE."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    def execute(
        self,
        principal_id: str,
        kind: PrincipalKind = PrincipalKind.USER,
        member_of: list[str] | None = None,
    ) -> Principal:
        """Create the principal and optionally add it to roles in one transaction."""
        with self._uow_factory() as uow:
            principal = uow.principals.add_principal(principal_id, kind)
            for role_id in member_of or []:
                uow.principals.add_membership(principal_id, role_id)

        logger.info("Created %s %s", principal.kind, principal.id)
        return principal
