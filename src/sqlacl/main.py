"""Application entry point and composition root."""

import logging
from dataclasses import dataclass

from sqlacl import __version__
from sqlacl.application.use_cases.permission.check_access import (
    CheckAccessUseCase,
    EffectivePermissionsUseCase,
)
from sqlacl.application.use_cases.permission.deny_permission import DenyPermissionUseCase
from sqlacl.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from sqlacl.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from sqlacl.application.use_cases.principal.create_principal import CreatePrincipalUseCase
from sqlacl.application.use_cases.principal.drop_principal import DropPrincipalUseCase
from sqlacl.application.use_cases.principal.manage_membership import (
    AddRoleMemberUseCase,
    DropRoleMemberUseCase,
)
from sqlacl.application.use_cases.securable.drop_securable import DropSecurableUseCase
from sqlacl.application.use_cases.securable.import_catalog import ImportCatalogUseCase
from sqlacl.application.use_cases.securable.register_securable import (
    RegisterSecurableUseCase,
)
from sqlacl.application.use_cases.securable.transfer_ownership import (
    TransferOwnershipUseCase,
)
from sqlacl.config import Settings, get_settings
from sqlacl.domain.value_objects import PrincipalKind, SecurableKind
from sqlacl.infrastructure.audit.logging_sink import LoggingAuditSink
from sqlacl.infrastructure.catalog.json_catalog import JsonSchemaCatalog
from sqlacl.infrastructure.permission.resolver import PermissionResolver
from sqlacl.infrastructure.persistence.memory.database import InMemoryDatabase
from sqlacl.infrastructure.persistence.memory.unit_of_work import create_uow_factory

logger = logging.getLogger(__name__)


@dataclass
class AccessControl:
    """Wired use cases sharing one database."""

    database: InMemoryDatabase
    resolver: PermissionResolver
    create_principal: CreatePrincipalUseCase
    drop_principal: DropPrincipalUseCase
    add_role_member: AddRoleMemberUseCase
    drop_role_member: DropRoleMemberUseCase
    register_securable: RegisterSecurableUseCase
    drop_securable: DropSecurableUseCase
    transfer_ownership: TransferOwnershipUseCase
    import_catalog: ImportCatalogUseCase
    grant: GrantPermissionUseCase
    deny: DenyPermissionUseCase
    revoke: RevokePermissionUseCase
    check_access: CheckAccessUseCase
    effective_permissions: EffectivePermissionsUseCase


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    print(f"sqlacl v{__version__}")


def create_access_control(settings: Settings | None = None) -> AccessControl:
    """Composition root - build the database and wire all use cases.

    The server securable and its owner are created at startup; the schema
    catalog, when configured, is imported below the server.
    """
    settings = settings or get_settings()
    database = InMemoryDatabase()
    uow_factory = create_uow_factory(database, LoggingAuditSink(settings.audit_logger_name))
    resolver = PermissionResolver(database)

    with uow_factory() as uow:
        uow.principals.add_principal(settings.server_owner, PrincipalKind.USER)
        uow.securables.add_securable(settings.server_name, SecurableKind.SERVER, None)
        uow.ownership.set_owner(settings.server_name, settings.server_owner)

    access = AccessControl(
        database=database,
        resolver=resolver,
        create_principal=CreatePrincipalUseCase(uow_factory),
        drop_principal=DropPrincipalUseCase(uow_factory),
        add_role_member=AddRoleMemberUseCase(uow_factory),
        drop_role_member=DropRoleMemberUseCase(uow_factory),
        register_securable=RegisterSecurableUseCase(uow_factory),
        drop_securable=DropSecurableUseCase(uow_factory),
        transfer_ownership=TransferOwnershipUseCase(uow_factory),
        import_catalog=ImportCatalogUseCase(uow_factory),
        grant=GrantPermissionUseCase(uow_factory, resolver),
        deny=DenyPermissionUseCase(uow_factory, resolver),
        revoke=RevokePermissionUseCase(uow_factory, resolver),
        check_access=CheckAccessUseCase(resolver),
        effective_permissions=EffectivePermissionsUseCase(resolver),
    )

    if settings.catalog_path:
        created = access.import_catalog.execute(JsonSchemaCatalog.from_file(settings.catalog_path))
        logger.info("Loaded catalog %s (%d securables)", settings.catalog_path, len(created))
    return access
