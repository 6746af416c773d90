"""Fixtures for API tests."""

import pytest

from talentgate.application.use_cases.permission.check_permission import CheckPermissionUseCase
from talentgate.application.use_cases.permission.get_effective_permissions import (
    GetEffectivePermissionsUseCase,
)
from talentgate.application.use_cases.permission.grant_user_permission import (
    GrantUserPermissionUseCase,
)
from talentgate.application.use_cases.permission.list_audit_records import ListAuditRecordsUseCase
from talentgate.application.use_cases.permission.revoke_user_permission import (
    RevokeUserPermissionUseCase,
)
from talentgate.application.use_cases.permission.seed_role_permissions import (
    SeedRolePermissionsUseCase,
)
from talentgate.domain.policy import PermissionChecks
from talentgate.infrastructure.audit.audit_sink import UnitOfWorkAuditSink
from talentgate.interfaces.api.middleware.auth import RequestUser


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing. Set user to None for anonymous calls."""

    def __init__(self) -> None:
        self.user: RequestUser | None = RequestUser(user_id="admin-1", role="admin")

    async def process_request(self, req, resp):
        req.context.user = self.user


@pytest.fixture
def auth() -> AuthBypassMiddleware:
    return AuthBypassMiddleware()


@pytest.fixture
def seeded_uow(fake_uow):
    """Admin role can manage settings and view users; talent can send messages."""
    for perm in (
        PermissionChecks.MANAGE_SETTINGS,
        PermissionChecks.VIEW_SETTINGS,
        PermissionChecks.VIEW_ALL_USERS,
    ):
        fake_uow.role_grants.add("admin", perm.category, perm.action, perm.resource)
    fake_uow.role_grants.add("talent", "messaging", "create")
    return fake_uow


@pytest.fixture
def app(auth, seeded_uow, uow_factory, permission_store, evaluator):
    """Falcon ASGI app with API resources for testing."""
    from talentgate.interfaces.api.app import create_app
    from talentgate.interfaces.api.resources.health import HealthResource
    from talentgate.interfaces.api.resources.permissions import (
        PermissionAuditResource,
        PermissionCheckAllResource,
        PermissionCheckAnyResource,
        PermissionCheckResource,
        PermissionGrantResource,
        PermissionInitResource,
        PermissionRevokeResource,
    )
    from talentgate.interfaces.api.resources.users import UserPermissionsResource

    check = CheckPermissionUseCase(evaluator, UnitOfWorkAuditSink(uow_factory))
    return create_app(
        health_resource=HealthResource(),
        check_resource=PermissionCheckResource(check),
        check_any_resource=PermissionCheckAnyResource(check),
        check_all_resource=PermissionCheckAllResource(check),
        grant_resource=PermissionGrantResource(GrantUserPermissionUseCase(permission_store, check)),
        revoke_resource=PermissionRevokeResource(
            RevokeUserPermissionUseCase(permission_store, check)
        ),
        audit_resource=PermissionAuditResource(ListAuditRecordsUseCase(uow_factory, check)),
        init_resource=PermissionInitResource(SeedRolePermissionsUseCase(uow_factory, check)),
        user_permissions_resource=UserPermissionsResource(
            GetEffectivePermissionsUseCase(permission_store, check)
        ),
        middleware=[auth],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
