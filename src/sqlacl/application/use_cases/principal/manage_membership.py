"""Role membership use cases."""

import logging

from sqlacl.application.ports import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class AddRoleMemberUseCase:
    """ALTER ROLE <role> ADD MEMBER <member>."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    def execute(self, role_id: str, member_id: str) -> None:
        with self._uow_factory() as uow:
            uow.principals.add_membership(member_id, role_id)
        logger.info("Added %s to role %s", member_id, role_id)


class DropRoleMemberUseCase:
    """ALTER ROLE <role> DROP MEMBER <member>."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    def execute(self, role_id: str, member_id: str) -> None:
        with self._uow_factory() as uow:
            uow.principals.remove_membership(member_id, role_id)
        logger.info("Dropped %s from role %s", member_id, role_id)
