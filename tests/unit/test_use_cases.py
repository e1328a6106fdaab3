"""Unit tests for use cases."""

import pytest

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
from sqlacl.application.use_cases.securable.register_securable import (
    RegisterSecurableUseCase,
)
from sqlacl.application.use_cases.securable.transfer_ownership import (
    TransferOwnershipUseCase,
)
from sqlacl.domain.entities import PermissionKey
from sqlacl.domain.exceptions import (
    DependentGrantsExist,
    InsufficientAuthority,
    NotEmpty,
    PrincipalHasMembers,
    PrincipalOwnsObjects,
    UnknownPrincipal,
    UnknownSecurable,
    ValidationError,
)
from sqlacl.domain.value_objects import (
    Decision,
    Effect,
    ObjectType,
    PermissionKind,
    PrincipalKind,
    SecurableKind,
)

SELECT = PermissionKind.SELECT


@pytest.fixture
def grant(uow_factory, resolver) -> GrantPermissionUseCase:
    return GrantPermissionUseCase(uow_factory, resolver)


@pytest.fixture
def deny(uow_factory, resolver) -> DenyPermissionUseCase:
    return DenyPermissionUseCase(uow_factory, resolver)


@pytest.fixture
def revoke(uow_factory, resolver) -> RevokePermissionUseCase:
    return RevokePermissionUseCase(uow_factory, resolver)


@pytest.fixture
def check(resolver) -> CheckAccessUseCase:
    return CheckAccessUseCase(resolver)


# --- GrantPermissionUseCase ---


def test_grant_multiple_permissions_and_objects(hr_system, grant, check) -> None:
    """GRANT SELECT, INSERT ON HR.Departments, HR.Projects TO HRClerks."""
    entries = grant.execute("sa", ["SELECT", "INSERT"], ["HR.Departments", "HR.Projects"], ["HRClerks"])

    assert len(entries) == 4
    assert all(e.grantor_id == "sa" and e.effect == Effect.GRANT for e in entries)
    assert check.execute("Clerk1", "insert", "HR.Projects") == Decision.ALLOW


def test_grant_all_expands_to_applicable_permissions(hr_system, grant, uow_factory) -> None:
    grant.execute("sa", ["ALL"], ["HR.EMP_Details.Email"], ["Clerk1"])

    with uow_factory() as uow:
        perms = {e.permission for e in uow.permissions.entries_for("Clerk1")}
    assert perms == {SELECT, PermissionKind.UPDATE, PermissionKind.REFERENCES}


def test_grant_requires_authority(hr_system, grant, database) -> None:
    with pytest.raises(InsufficientAuthority, match="Clerk1"):
        grant.execute("Clerk1", [SELECT], ["HR.EMP_Details"], ["Analyst1"])
    assert database.snapshot().entries == {}


def test_grant_with_grant_option_lets_grantee_delegate(hr_system, grant, check) -> None:
    grant.execute("sa", [SELECT], ["HR.Departments"], ["HRManagers"], with_grant_option=True)
    # Manager1 acts through HRManagers' grant option
    grant.execute("Manager1", [SELECT], ["HR.Departments"], ["Analyst1"])

    assert check.execute("Analyst1", SELECT, "HR.Departments") == Decision.ALLOW
    with pytest.raises(InsufficientAuthority):
        grant.execute("Analyst1", [SELECT], ["HR.Departments"], ["Intern1"])


def test_grant_option_does_not_cover_other_permissions(hr_system, grant) -> None:
    grant.execute("sa", [SELECT], ["HR.Departments"], ["HRManagers"], with_grant_option=True)
    with pytest.raises(InsufficientAuthority):
        grant.execute("Manager1", [PermissionKind.DELETE], ["HR.Departments"], ["Analyst1"])


def test_schema_owner_can_grant_inside_schema(hr_system, uow_factory, grant, check) -> None:
    TransferOwnershipUseCase(uow_factory).execute("Payroll", "Manager1")
    grant.execute("Manager1", [SELECT], ["Payroll.Salaries"], ["Analyst1"])
    assert check.execute("Analyst1", SELECT, "Payroll.Salaries") == Decision.ALLOW


def test_control_grants_authority(hr_system, grant, check) -> None:
    """GRANT CONTROL ON SCHEMA::Payroll lets the holder manage the schema."""
    grant.execute("sa", [PermissionKind.CONTROL], ["Payroll"], ["HRManagers"])
    grant.execute("Manager1", [SELECT], ["Payroll.Salaries"], ["Analyst1"])
    assert check.execute("Analyst1", SELECT, "Payroll.Salaries") == Decision.ALLOW


def test_grant_empty_lists_rejected(hr_system, grant) -> None:
    with pytest.raises(ValidationError):
        grant.execute("sa", [], ["HR"], ["HRClerks"])
    with pytest.raises(ValidationError):
        grant.execute("sa", [SELECT], ["HR"], [])


def test_grant_unknown_permission(hr_system, grant, database) -> None:
    with pytest.raises(ValidationError, match="Unknown permission: SELEC"):
        grant.execute("sa", ["SELEC"], ["HR.EMP_Details"], ["HRClerks"])
    assert database.snapshot().entries == {}


def test_grant_unknown_securable(hr_system, grant) -> None:
    with pytest.raises(UnknownSecurable):
        grant.execute("sa", [SELECT], ["HR.Nope"], ["HRClerks"])


def test_grant_unknown_actor(hr_system, grant) -> None:
    with pytest.raises(UnknownPrincipal):
        grant.execute("Ghost", [SELECT], ["HR"], ["HRClerks"])


def test_grant_batch_is_atomic(hr_system, grant, database) -> None:
    with pytest.raises(UnknownPrincipal):
        grant.execute("sa", [SELECT], ["HR"], ["HRClerks", "Ghost"])
    assert database.snapshot().entries == {}


# --- DenyPermissionUseCase ---


def test_deny_overrides_earlier_grant(hr_system, grant, deny, check) -> None:
    grant.execute("sa", [SELECT], ["HR.SalaryHistory"], ["HRClerks"])
    deny.execute("sa", [SELECT], ["HR.SalaryHistory"], ["HRClerks"])
    assert check.execute("Clerk1", SELECT, "HR.SalaryHistory") == Decision.DENY


def test_deny_schema_wide(hr_system, deny, check) -> None:
    """DENY SELECT, INSERT, UPDATE, DELETE ON SCHEMA::Payroll TO Interns."""
    entries = deny.execute("sa", ["SELECT", "INSERT", "UPDATE", "DELETE"], ["Payroll"], ["Interns"])
    assert len(entries) == 4
    assert check.execute("Intern1", "DELETE", "Payroll.Salaries") == Decision.DENY


def test_deny_over_delegating_grant_needs_cascade(hr_system, grant, deny, check) -> None:
    grant.execute("sa", [SELECT], ["HR.Projects"], ["Manager1"], with_grant_option=True)
    grant.execute("Manager1", [SELECT], ["HR.Projects"], ["Analyst1"])

    with pytest.raises(DependentGrantsExist):
        deny.execute("sa", [SELECT], ["HR.Projects"], ["Manager1"])
    deny.execute("sa", [SELECT], ["HR.Projects"], ["Manager1"], cascade=True)
    assert check.execute("Analyst1", SELECT, "HR.Projects") == Decision.DENY


# --- RevokePermissionUseCase ---


def test_revoke_cascade(hr_system, grant, revoke, check) -> None:
    grant.execute("sa", [SELECT], ["HR.Departments"], ["Manager1"], with_grant_option=True)
    grant.execute("Manager1", [SELECT], ["HR.Departments"], ["Analyst1"])

    with pytest.raises(DependentGrantsExist):
        revoke.execute("sa", [SELECT], ["HR.Departments"], ["Manager1"])

    removed = revoke.execute("sa", [SELECT], ["HR.Departments"], ["Manager1"], cascade=True)
    assert {e.principal_id for e in removed} == {"Manager1", "Analyst1"}
    assert check.execute("Analyst1", SELECT, "HR.Departments") == Decision.DENY


def test_revoke_grant_option_for(hr_system, grant, revoke, uow_factory, check) -> None:
    """REVOKE GRANT OPTION FOR SELECT ON HR.Projects FROM HRManagers."""
    grant.execute("sa", [SELECT], ["HR.Projects"], ["HRManagers"], with_grant_option=True)
    revoke.execute("sa", [SELECT], ["HR.Projects"], ["HRManagers"], grant_option_only=True)

    with uow_factory() as uow:
        entry = uow.permissions.get(PermissionKey("HRManagers", SELECT, "HR.Projects"))
    assert entry.grant_option is False
    assert check.execute("Manager1", SELECT, "HR.Projects") == Decision.ALLOW


def test_revoke_all(hr_system, grant, revoke, uow_factory) -> None:
    """REVOKE ALL ON HR.EMP_Details FROM HRClerks."""
    grant.execute("sa", [SELECT, PermissionKind.INSERT, PermissionKind.DELETE], ["HR.EMP_Details"], ["HRClerks"])
    grant.execute("sa", [SELECT], ["HR"], ["HRClerks"])
    removed = revoke.execute("sa", ["ALL"], ["HR.EMP_Details"], ["HRClerks"])

    assert len(removed) == 3
    with uow_factory() as uow:
        assert [e.securable_id for e in uow.permissions.entries_for("HRClerks")] == ["HR"]


def test_revoke_requires_authority(hr_system, grant, revoke) -> None:
    grant.execute("sa", [SELECT], ["HR"], ["HRClerks"])
    with pytest.raises(InsufficientAuthority):
        revoke.execute("Clerk1", [SELECT], ["HR"], ["HRClerks"])


# --- Principal use cases ---


def test_create_principal_with_memberships(hr_system, uow_factory) -> None:
    principal = CreatePrincipalUseCase(uow_factory).execute(
        "Clerk2", PrincipalKind.USER, member_of=["HRClerks"]
    )
    assert principal.id == "Clerk2"
    with uow_factory() as uow:
        assert uow.principals.transitive_roles("Clerk2") == {"HRClerks"}


def test_create_principal_membership_failure_rolls_back(hr_system, uow_factory, database) -> None:
    with pytest.raises(UnknownPrincipal):
        CreatePrincipalUseCase(uow_factory).execute("Clerk2", member_of=["NoSuchRole"])
    assert "Clerk2" not in database.snapshot().principals


def test_role_member_use_cases(hr_system, uow_factory, grant, check) -> None:
    grant.execute("sa", [SELECT], ["HR.Projects"], ["DataAnalysts"])
    AddRoleMemberUseCase(uow_factory).execute("DataAnalysts", "Clerk1")
    assert check.execute("Clerk1", SELECT, "HR.Projects") == Decision.ALLOW

    DropRoleMemberUseCase(uow_factory).execute("DataAnalysts", "Clerk1")
    assert check.execute("Clerk1", SELECT, "HR.Projects") == Decision.DENY


def test_drop_role_with_members_requires_clean_up(hr_system, uow_factory, database) -> None:
    drop = DropPrincipalUseCase(uow_factory)
    with pytest.raises(PrincipalHasMembers):
        drop.execute("DataAnalysts")

    drop.execute("DataAnalysts", clean_up=True)
    assert "DataAnalysts" not in database.snapshot().principals
    assert database.snapshot().memberships["Analyst1"] == set()


def test_drop_principal_clean_up_revokes_delegated_grants(hr_system, uow_factory, grant, database) -> None:
    grant.execute("sa", [SELECT], ["HR.Departments"], ["Manager1"], with_grant_option=True)
    grant.execute("Manager1", [SELECT], ["HR.Departments"], ["Analyst1"])

    DropPrincipalUseCase(uow_factory).execute("Manager1", clean_up=True)
    assert database.snapshot().entries == {}


def test_drop_principal_clean_up_records_actor(hr_system, uow_factory, grant, audit_sink) -> None:
    grant.execute("sa", [SELECT], ["HR.Departments"], ["Manager1"], with_grant_option=True)
    grant.execute("Manager1", [SELECT], ["HR.Departments"], ["Analyst1"])
    audit_sink.events.clear()

    DropPrincipalUseCase(uow_factory).execute("Manager1", clean_up=True, actor_id="sa")
    assert audit_sink.operations() == ["REVOKE", "REVOKE ALL"]
    assert [e.key.principal_id for e in audit_sink.events] == ["Analyst1", "Manager1"]
    assert all(e.actor == "sa" for e in audit_sink.events)


def test_drop_owner_requires_transfer(hr_system, uow_factory) -> None:
    TransferOwnershipUseCase(uow_factory).execute("HR", "Manager1")
    with pytest.raises(PrincipalOwnsObjects):
        DropPrincipalUseCase(uow_factory).execute("Manager1", clean_up=True)

    previous = TransferOwnershipUseCase(uow_factory).execute("HR", "sa")
    assert previous == "Manager1"
    DropPrincipalUseCase(uow_factory).execute("Manager1")


# --- Securable use cases ---


def test_register_and_drop_securable(hr_system, uow_factory, database) -> None:
    register = RegisterSecurableUseCase(uow_factory)
    register.execute("Sales", SecurableKind.SCHEMA, "HRSystem", owner="Manager1")
    register.execute("Sales.Orders", SecurableKind.OBJECT, "Sales", ObjectType.TABLE)

    assert database.snapshot().owners["Sales"] == "Manager1"
    drop = DropSecurableUseCase(uow_factory)
    with pytest.raises(NotEmpty):
        drop.execute("Sales")
    drop.execute("Sales.Orders")
    dropped = drop.execute("Sales")
    assert [s.id for s in dropped] == ["Sales"]
    assert "Sales" not in database.snapshot().owners


# --- Check access use cases ---


def test_effective_permissions_allowed(hr_system, grant, deny, resolver) -> None:
    grant.execute("sa", ["SELECT", "UPDATE"], ["HR"], ["HRClerks"])
    deny.execute("sa", ["UPDATE"], ["HR.EMP_Details.Salary"], ["HRClerks"])

    allowed = EffectivePermissionsUseCase(resolver).allowed("Clerk1", "HR.EMP_Details.Salary")
    assert allowed == [SELECT]


def test_check_access_explain(hr_system, grant, check) -> None:
    grant.execute("sa", [SELECT], ["HR"], ["HRClerks"])
    explanation = check.explain("Clerk1", "select", "HR.EMP_Details")
    assert explanation.decision == Decision.ALLOW
    assert explanation.deciding_entries[0].principal_id == "HRClerks"
