"""Pytest fixtures for sqlacl tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from sqlacl.domain.entities import AuditEvent
from sqlacl.domain.value_objects import (
    Effect,
    ObjectType,
    PermissionKind,
    PrincipalKind,
    SecurableKind,
)
from sqlacl.infrastructure.permission.resolver import PermissionResolver
from sqlacl.infrastructure.persistence.memory.database import InMemoryDatabase
from sqlacl.infrastructure.persistence.memory.unit_of_work import create_uow_factory


# --- Fake adapters ---


class MemoryAuditSink:
    """Collects audit events in a list."""

    def __init__(self) -> None:
        self.events: list[AuditEvent] = []

    def publish(self, event: AuditEvent) -> None:
        self.events.append(event)

    def operations(self) -> list[str]:
        return [e.operation for e in self.events]


# --- Fixtures ---


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def audit_sink() -> MemoryAuditSink:
    return MemoryAuditSink()


@pytest.fixture
def uow_factory(database: InMemoryDatabase, audit_sink: MemoryAuditSink):
    return create_uow_factory(database, audit_sink)


@pytest.fixture
def resolver(database: InMemoryDatabase) -> PermissionResolver:
    return PermissionResolver(database)


@pytest.fixture
def hr_system(uow_factory, database: InMemoryDatabase, audit_sink: MemoryAuditSink):
    """HRSystem database owned by sa, with HR and Payroll schemas.

    Principals: users sa, Clerk1, Manager1, Analyst1, Intern1; roles HRClerks,
    HRManagers, DataAnalysts, Interns. Clerk1 in HRClerks, Manager1 in
    HRManagers, Analyst1 in DataAnalysts, Intern1 in Interns, and HRManagers
    in HRClerks.
    """
    with uow_factory() as uow:
        for user in ("sa", "Clerk1", "Manager1", "Analyst1", "Intern1"):
            uow.principals.add_principal(user, PrincipalKind.USER)
        for role in ("HRClerks", "HRManagers", "DataAnalysts", "Interns"):
            uow.principals.add_principal(role, PrincipalKind.ROLE)
        uow.principals.add_membership("Clerk1", "HRClerks")
        uow.principals.add_membership("Manager1", "HRManagers")
        uow.principals.add_membership("Analyst1", "DataAnalysts")
        uow.principals.add_membership("Intern1", "Interns")
        uow.principals.add_membership("HRManagers", "HRClerks")

        uow.securables.add_securable("SQLSERVER", SecurableKind.SERVER, None)
        uow.securables.add_securable("HRSystem", SecurableKind.DATABASE, "SQLSERVER")
        uow.securables.add_securable("HR", SecurableKind.SCHEMA, "HRSystem")
        uow.securables.add_securable("Payroll", SecurableKind.SCHEMA, "HRSystem")
        for table in ("HR.EMP_Details", "HR.SalaryHistory", "HR.Departments", "HR.Projects"):
            uow.securables.add_securable(table, SecurableKind.OBJECT, "HR", ObjectType.TABLE)
        uow.securables.add_securable(
            "HR.UpdateSalary", SecurableKind.OBJECT, "HR", ObjectType.PROCEDURE
        )
        uow.securables.add_securable(
            "Payroll.Salaries", SecurableKind.OBJECT, "Payroll", ObjectType.TABLE
        )
        for column in ("EmployeeID", "FirstName", "Email", "Salary", "BankAccount"):
            uow.securables.add_securable(
                f"HR.EMP_Details.{column}", SecurableKind.COLUMN, "HR.EMP_Details"
            )
        uow.ownership.set_owner("SQLSERVER", "sa")
    audit_sink.events.clear()
    return database


@pytest.fixture
def write(uow_factory) -> Callable[..., Effect | None]:
    """Write one entry in its own transaction."""

    def _write(
        principal_id: str,
        permission: PermissionKind | str,
        securable_id: str,
        effect: Effect = Effect.GRANT,
        grant_option: bool = False,
        grantor_id: str | None = None,
    ) -> Effect | None:
        with uow_factory() as uow:
            return uow.permissions.write(
                principal_id, permission, securable_id, effect, grant_option, grantor_id
            )

    return _write
