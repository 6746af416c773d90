"""Application ports - interfaces for external adapters."""

from talentgate.application.ports.access_evaluator import AccessEvaluator
from talentgate.application.ports.audit_sink import AuditSink
from talentgate.application.ports.permission_store import PermissionStore
from talentgate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AccessEvaluator",
    "AuditSink",
    "PermissionStore",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
