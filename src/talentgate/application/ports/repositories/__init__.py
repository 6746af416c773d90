"""Repository ports."""

from talentgate.application.ports.repositories.audit_repository import AuditRepository
from talentgate.application.ports.repositories.role_grant_repository import (
    RoleGrantRepository,
)
from talentgate.application.ports.repositories.user_grant_repository import (
    UserGrantRepository,
)

__all__ = [
    "AuditRepository",
    "RoleGrantRepository",
    "UserGrantRepository",
]
