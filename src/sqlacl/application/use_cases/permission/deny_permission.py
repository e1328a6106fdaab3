"""Deny permission use case."""

import logging

from sqlacl.application.ports import AccessResolver, UnitOfWorkFactory
from sqlacl.application.use_cases.permission.authority import (
    check_authority,
    require_non_empty,
    require_securable,
)
from sqlacl.domain.entities import PermissionEntry, PermissionKey
from sqlacl.domain.value_objects import Effect, PermissionKind, expand_permissions

logger = logging.getLogger(__name__)


class DenyPermissionUseCase:
    """DENY <permissions> ON <securables> TO <principals> [CASCADE]."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        resolver: AccessResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver

    def execute(
        self,
        actor_id: str,
        permissions: list[str | PermissionKind],
        securables: list[str],
        principals: list[str],
        cascade: bool = False,
    ) -> list[PermissionEntry]:
        """Write DENY entries, replacing any GRANT at the same key."""
        require_non_empty("permission", permissions)
        require_non_empty("securable", securables)
        require_non_empty("principal", principals)

        written: list[PermissionEntry] = []
        with self._uow_factory() as uow:
            for securable_id in securables:
                securable = require_securable(uow, securable_id)
                for permission in expand_permissions(permissions, securable.kind):
                    check_authority(uow, self._resolver, actor_id, permission, securable_id)
                    for principal_id in principals:
                        uow.permissions.write(
                            principal_id,
                            permission,
                            securable_id,
                            Effect.DENY,
                            grant_option=False,
                            grantor_id=actor_id,
                            cascade=cascade,
                        )
                        written.append(
                            uow.permissions.get(
                                PermissionKey(principal_id, permission, securable_id)
                            )
                        )

        logger.info(
            "%s denied %d permission(s) on %s to %s",
            actor_id,
            len(written),
            ", ".join(securables),
            ", ".join(principals),
        )
        return written
