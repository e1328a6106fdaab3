"""Audit sink port - compliance log of permission changes."""

from typing import Protocol

from sqlacl.domain.entities import AuditEvent


class AuditSink(Protocol):
    """Receives one event per committed permission change."""

    def publish(self, event: AuditEvent) -> None: ...
