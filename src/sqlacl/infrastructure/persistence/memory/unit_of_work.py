"""In-memory Unit of Work implementation."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlacl.application.ports.audit_sink import AuditSink
from sqlacl.domain.entities import AuditEvent
from sqlacl.infrastructure.persistence.memory.database import InMemoryDatabase
from sqlacl.infrastructure.persistence.memory.ownership_registry import (
    MemoryOwnershipRegistry,
)
from sqlacl.infrastructure.persistence.memory.permission_store import (
    MemoryPermissionStore,
)
from sqlacl.infrastructure.persistence.memory.principal_directory import (
    MemoryPrincipalDirectory,
)
from sqlacl.infrastructure.persistence.memory.securable_hierarchy import (
    MemorySecurableHierarchy,
)
from sqlacl.infrastructure.persistence.memory.state import AclState

logger = logging.getLogger(__name__)


class MemoryRepositories:
    """Repositories bound to one state object."""

    def _bind(
        self,
        state: AclState,
        record: Callable[[AuditEvent], None] | None = None,
    ) -> None:
        self._permissions = MemoryPermissionStore(state, record)
        self._principals = MemoryPrincipalDirectory(state, self._permissions)
        self._securables = MemorySecurableHierarchy(state, self._permissions)
        self._ownership = MemoryOwnershipRegistry(state)

    @property
    def principals(self) -> MemoryPrincipalDirectory:
        return self._principals

    @property
    def securables(self) -> MemorySecurableHierarchy:
        return self._securables

    @property
    def permissions(self) -> MemoryPermissionStore:
        return self._permissions

    @property
    def ownership(self) -> MemoryOwnershipRegistry:
        return self._ownership


class MemoryReadView(MemoryRepositories):
    """Read-only repositories over a published snapshot."""

    def __init__(self, state: AclState) -> None:
        self._bind(state)


class MemoryUnitOfWork(MemoryRepositories):
    """In-memory Unit of Work - exclusive writer over a private copy of the state."""

    def __init__(self, database: InMemoryDatabase, audit_sink: AuditSink | None = None) -> None:
        self._database = database
        self._audit_sink = audit_sink
        self._working: AclState | None = None
        self._pending: list[AuditEvent] = []

    def __enter__(self) -> "MemoryUnitOfWork":
        self._database.write_lock.acquire()
        self._begin()
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        try:
            if exc_type:
                self.rollback()
        finally:
            self._database.write_lock.release()

    def _begin(self) -> None:
        self._working = self._database.snapshot().copy()
        self._pending = []
        self._bind(self._working, self._pending.append)

    def commit(self) -> None:
        self._database.publish(self._working)
        events = self._pending
        self._begin()
        self._deliver(events)

    def rollback(self) -> None:
        self._begin()

    def _deliver(self, events: list[AuditEvent]) -> None:
        if self._audit_sink is None:
            return
        for event in events:
            try:
                self._audit_sink.publish(event)
            except Exception:
                logger.exception("Audit sink failed for %s %s", event.operation, event.key)


def create_uow_factory(
    database: InMemoryDatabase, audit_sink: AuditSink | None = None
) -> Callable[[], Iterator[MemoryUnitOfWork]]:
    """Create UnitOfWork factory (context manager)."""

    @contextmanager
    def factory() -> Iterator[MemoryUnitOfWork]:
        with MemoryUnitOfWork(database, audit_sink) as uow:
            try:
                yield uow
                uow.commit()
            except BaseException:
                uow.rollback()
                raise

    return factory
