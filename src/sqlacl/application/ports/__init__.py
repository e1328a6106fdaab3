"""Application ports - interfaces for external adapters."""

from sqlacl.application.ports.access_resolver import AccessResolver
from sqlacl.application.ports.audit_sink import AuditSink
from sqlacl.application.ports.schema_catalog import SchemaCatalog
from sqlacl.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AccessResolver",
    "AuditSink",
    "SchemaCatalog",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
