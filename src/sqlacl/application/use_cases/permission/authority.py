"""Who may grant, deny or revoke a permission on a securable."""

from sqlacl.application.ports import AccessResolver, UnitOfWork
from sqlacl.domain.entities import PermissionKey, Securable
from sqlacl.domain.exceptions import (
    InsufficientAuthority,
    UnknownPrincipal,
    UnknownSecurable,
    ValidationError,
)
from sqlacl.domain.value_objects import Decision, Effect, PermissionKind


def require_securable(uow: UnitOfWork, securable_id: str) -> Securable:
    securable = uow.securables.get(securable_id)
    if securable is None:
        raise UnknownSecurable(f"Securable not found: {securable_id}")
    return securable


def require_non_empty(name: str, values: list) -> None:
    if not values:
        raise ValidationError(f"At least one {name} is required")


def check_authority(
    uow: UnitOfWork,
    resolver: AccessResolver,
    actor_id: str,
    permission: PermissionKind,
    securable_id: str,
) -> None:
    """Raise InsufficientAuthority unless actor may manage permission on securable.

    The actor (directly or through a role) must own the securable or an
    ancestor, hold a GRANT WITH GRANT OPTION for the permission there, or
    have effective CONTROL on the securable.
    """
    if not uow.principals.exists(actor_id):
        raise UnknownPrincipal(f"Principal not found: {actor_id}")
    acting_as = {actor_id} | uow.principals.transitive_roles(actor_id)

    for scope in uow.securables.ancestor_chain(securable_id):
        if uow.ownership.owner_of(scope.id) in acting_as:
            return
        for principal_id in acting_as:
            entry = uow.permissions.get(PermissionKey(principal_id, permission, scope.id))
            if entry is not None and entry.effect == Effect.GRANT and entry.grant_option:
                return

    if resolver.resolve_in(uow, actor_id, PermissionKind.CONTROL, securable_id) == Decision.ALLOW:
        return
    raise InsufficientAuthority(
        f"{actor_id} has no authority to manage {permission} on {securable_id}"
    )
