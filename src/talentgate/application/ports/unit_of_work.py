"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from talentgate.application.ports.repositories.audit_repository import AuditRepository
from talentgate.application.ports.repositories.role_grant_repository import (
    RoleGrantRepository,
)
from talentgate.application.ports.repositories.user_grant_repository import (
    UserGrantRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def role_grants(self) -> RoleGrantRepository: ...

    @property
    def user_grants(self) -> UserGrantRepository: ...

    @property
    def audit_records(self) -> AuditRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Zero-argument callable returning an async context manager over a UnitOfWork."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
