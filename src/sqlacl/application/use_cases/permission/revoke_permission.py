"""Revoke permission use case."""

import logging

from sqlacl.application.ports import AccessResolver, UnitOfWorkFactory
from sqlacl.application.use_cases.permission.authority import (
    check_authority,
    require_non_empty,
    require_securable,
)
from sqlacl.domain.entities import PermissionEntry
from sqlacl.domain.value_objects import PermissionKind, expand_permissions

logger = logging.getLogger(__name__)


class RevokePermissionUseCase:
    """REVOKE [GRANT OPTION FOR] <permissions> ON <securables> FROM <principals> [CASCADE]."""

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
        grant_option_only: bool = False,
    ) -> list[PermissionEntry]:
        """Remove exact entries; returns every entry removed, cascaded ones included."""
        require_non_empty("permission", permissions)
        require_non_empty("securable", securables)
        require_non_empty("principal", principals)

        removed: list[PermissionEntry] = []
        with self._uow_factory() as uow:
            for securable_id in securables:
                securable = require_securable(uow, securable_id)
                for permission in expand_permissions(permissions, securable.kind):
                    check_authority(uow, self._resolver, actor_id, permission, securable_id)
                    for principal_id in principals:
                        if grant_option_only:
                            removed += uow.permissions.revoke_grant_option_only(
                                principal_id, permission, securable_id, cascade, actor_id
                            )
                        else:
                            removed += uow.permissions.revoke(
                                principal_id, permission, securable_id, cascade, actor_id
                            )

        logger.info(
            "%s revoked %s on %s from %s (%d entries removed)",
            actor_id,
            "grant option" if grant_option_only else "permission(s)",
            ", ".join(securables),
            ", ".join(principals),
            len(removed),
        )
        return removed
