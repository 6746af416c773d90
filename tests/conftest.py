"""Pytest fixtures for TalentGate tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from talentgate.domain.entities import AuditRecord, GrantConditions, RoleGrant, UserGrant
from talentgate.infrastructure.permission.access_evaluator import GrantAccessEvaluator
from talentgate.infrastructure.permission.permission_store import UnitOfWorkPermissionStore

NOON = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)


# --- Fake repositories ---


class FakeRoleGrantRepository:
    """In-memory role grant repository."""

    def __init__(self) -> None:
        self._store: list[RoleGrant] = []

    async def list_by_role(self, role: str) -> list[RoleGrant]:
        return [g for g in self._store if g.role == role]

    async def get_for_scope(
        self, role: str, category: str, action: str, resource: str | None
    ) -> RoleGrant | None:
        for g in self._store:
            if (g.role, g.category, g.action, g.resource) == (role, category, action, resource):
                return g
        return None

    async def create(self, grant: RoleGrant) -> RoleGrant:
        self._store.append(grant)
        return grant

    def add(
        self,
        role: str,
        category: str,
        action: str,
        resource: str | None = None,
        granted: bool = True,
    ) -> RoleGrant:
        """Helper to add a role grant for tests."""
        grant = RoleGrant(
            id=uuid4(),
            role=role,
            category=category,
            action=action,
            resource=resource,
            granted=granted,
            created_at=NOON,
        )
        self._store.append(grant)
        return grant


class FakeUserGrantRepository:
    """In-memory user grant repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, UserGrant] = {}

    async def list_by_user(self, user_id: str) -> list[UserGrant]:
        grants = [g for g in self._by_id.values() if g.user_id == user_id]
        return sorted(grants, key=lambda g: g.created_at)

    async def upsert(self, grant: UserGrant) -> UserGrant:
        """Atomic like ON CONFLICT: yields first, then checks and writes without awaiting."""
        await asyncio.sleep(0)
        for existing in self._by_id.values():
            if existing.user_id == grant.user_id and existing.same_scope(
                grant.category, grant.action, grant.resource
            ):
                existing.granted = grant.granted
                existing.granted_by = grant.granted_by
                existing.expires_at = grant.expires_at
                existing.conditions = grant.conditions
                existing.updated_at = grant.updated_at
                return existing
        self._by_id[grant.id] = grant
        return grant

    async def update(self, grant: UserGrant) -> None:
        self._by_id[grant.id] = grant

    def add(
        self,
        user_id: str,
        category: str,
        action: str,
        resource: str | None = None,
        granted: bool = True,
        expires_at: datetime | None = None,
        conditions: GrantConditions | None = None,
        created_at: datetime = NOON,
        updated_at: datetime | None = None,
    ) -> UserGrant:
        """Helper to add a user grant for tests."""
        grant = UserGrant(
            id=uuid4(),
            user_id=user_id,
            category=category,
            action=action,
            resource=resource,
            granted=granted,
            granted_by="admin-1",
            expires_at=expires_at,
            conditions=conditions,
            created_at=created_at,
            updated_at=updated_at or created_at,
        )
        self._by_id[grant.id] = grant
        return grant


class FakeAuditRepository:
    """In-memory append-only audit repository."""

    def __init__(self) -> None:
        self.records: list[AuditRecord] = []

    async def create(self, record: AuditRecord) -> AuditRecord:
        self.records.append(record)
        return record

    async def list(
        self,
        *,
        user_id: str | None = None,
        granted: bool | None = None,
        limit: int = 100,
    ) -> list[AuditRecord]:
        items = [
            r
            for r in self.records
            if (user_id is None or r.user_id == user_id)
            and (granted is None or r.granted == granted)
        ]
        items.sort(key=lambda r: r.timestamp, reverse=True)
        return items[:limit]


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.role_grants = FakeRoleGrantRepository()
        self.user_grants = FakeUserGrantRepository()
        self.audit_records = FakeAuditRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


class FailingPermissionStore:
    """Permission store whose reads always fail."""

    async def get_role_grants(self, role: str) -> list[RoleGrant]:
        raise ConnectionError("database unavailable")

    async def get_user_grants(self, user_id: str) -> list[UserGrant]:
        raise ConnectionError("database unavailable")


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """In-memory UnitOfWork shared by every factory call in a test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager yielding the shared FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def permission_store(uow_factory) -> UnitOfWorkPermissionStore:
    return UnitOfWorkPermissionStore(uow_factory)


@pytest.fixture
def evaluator(permission_store) -> GrantAccessEvaluator:
    return GrantAccessEvaluator(permission_store)


@pytest.fixture
def mock_audit_sink():
    """AsyncMock for AuditSink."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.record.return_value = None
    return mock
