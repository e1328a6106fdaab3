"""Drop principal use case."""

import logging

from sqlacl.application.ports import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class DropPrincipalUseCase:
    """DROP USER / DROP ROLE."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    def execute(
        self,
        principal_id: str,
        clean_up: bool = False,
        actor_id: str | None = None,
    ) -> None:
        """Drop the principal.

        With clean_up, role members are dropped and grants the principal
        delegated to others are revoked with CASCADE before the drop. Owned
        securables are never reassigned implicitly. actor_id is recorded on
        the audit events of every revoke the drop performs.
        """
        with self._uow_factory() as uow:
            principal = uow.principals.get(principal_id)
            if clean_up and principal is not None:
                if principal.is_role:
                    for member_id in sorted(uow.principals.members_of(principal_id)):
                        uow.principals.remove_membership(member_id, principal_id)
                for entry in uow.permissions.entries_granted_by(principal_id):
                    if entry.principal_id != principal_id:
                        uow.permissions.revoke(
                            entry.principal_id,
                            entry.permission,
                            entry.securable_id,
                            cascade=True,
                            actor=actor_id,
                        )
            uow.principals.remove_principal(principal_id, actor=actor_id)

        logger.info("Dropped principal %s", principal_id)
