"""Domain exceptions."""


class SqlAclError(Exception):
    """Base exception for sqlacl."""

    pass


class ValidationError(SqlAclError):
    """Validation failed for input data."""

    pass


class UnknownPrincipal(SqlAclError):
    """Principal does not exist in the directory."""

    pass


class UnknownSecurable(SqlAclError):
    """Securable does not exist in the hierarchy."""

    pass


class DuplicatePrincipal(SqlAclError):
    """Principal with the same id already exists."""

    pass


class DuplicateSecurable(SqlAclError):
    """Securable with the same id already exists."""

    pass


class NotARole(SqlAclError):
    """Membership target is not a role."""

    pass


class CycleDetected(SqlAclError):
    """Membership would make a role a member of itself."""

    pass


class PrincipalOwnsObjects(SqlAclError):
    """Principal still owns securables; ownership must be transferred first."""

    pass


class PrincipalHasMembers(SqlAclError):
    """Role still has members; they must be dropped first."""

    pass


class InvalidParent(SqlAclError):
    """Parent securable kind cannot contain the child kind."""

    pass


class NotEmpty(SqlAclError):
    """Securable still contains child securables."""

    pass


class InvalidGrantOption(SqlAclError):
    """DENY cannot carry a grant option."""

    pass


class DependentGrantsExist(SqlAclError):
    """Delegated grants depend on the entry; CASCADE is required."""

    pass


class InsufficientAuthority(SqlAclError):
    """Actor may not grant, deny or revoke the permission on the securable."""

    pass
