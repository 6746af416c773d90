"""Application entry point and composition root."""

import argparse
import asyncio

from talentgate import __version__
from talentgate.application.use_cases.permission.check_permission import CheckPermissionUseCase
from talentgate.application.use_cases.permission.get_effective_permissions import (
    GetEffectivePermissionsUseCase,
)
from talentgate.application.use_cases.permission.grant_admin_permissions import (
    GrantAdminPermissionsUseCase,
)
from talentgate.application.use_cases.permission.grant_user_permission import (
    GrantUserPermissionUseCase,
)
from talentgate.application.use_cases.permission.list_audit_records import (
    ListAuditRecordsUseCase,
)
from talentgate.application.use_cases.permission.revoke_user_permission import (
    RevokeUserPermissionUseCase,
)
from talentgate.application.use_cases.permission.seed_role_permissions import (
    SeedRolePermissionsUseCase,
)
from talentgate.config import get_settings
from talentgate.infrastructure.audit.audit_sink import LogAuditSink, UnitOfWorkAuditSink
from talentgate.infrastructure.auth.keycloak_provider import KeycloakProvider
from talentgate.infrastructure.permission.access_evaluator import GrantAccessEvaluator
from talentgate.infrastructure.permission.permission_store import UnitOfWorkPermissionStore
from talentgate.infrastructure.persistence.postgres.connection import create_pool
from talentgate.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from talentgate.interfaces.api.app import create_app
from talentgate.interfaces.api.middleware.auth import AuthMiddleware
from talentgate.interfaces.api.middleware.cors import CORSMiddleware
from talentgate.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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
from talentgate.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"TalentGate v{__version__}")


def create_talentgate_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)
    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)

    keycloak = KeycloakProvider.from_settings(settings)
    if keycloak is None:
        logger.warning("keycloak_not_configured", detail="all requests are unauthenticated")

    permission_store = UnitOfWorkPermissionStore(uow_factory)
    evaluator = GrantAccessEvaluator(permission_store, timezone=settings.permission_timezone)
    audit_sink = UnitOfWorkAuditSink(uow_factory) if settings.audit_enabled else LogAuditSink()

    check_permission = CheckPermissionUseCase(evaluator, audit_sink)
    grant_permission = GrantUserPermissionUseCase(permission_store, check_permission)
    revoke_permission = RevokeUserPermissionUseCase(permission_store, check_permission)
    get_effective = GetEffectivePermissionsUseCase(permission_store, check_permission)
    list_audit = ListAuditRecordsUseCase(uow_factory, check_permission)
    seed_roles = SeedRolePermissionsUseCase(uow_factory, check_permission)

    return create_app(
        health_resource=HealthResource(pool),
        check_resource=PermissionCheckResource(check_permission),
        check_any_resource=PermissionCheckAnyResource(check_permission),
        check_all_resource=PermissionCheckAllResource(check_permission),
        grant_resource=PermissionGrantResource(grant_permission),
        revoke_resource=PermissionRevokeResource(revoke_permission),
        audit_resource=PermissionAuditResource(list_audit),
        init_resource=PermissionInitResource(seed_roles),
        user_permissions_resource=UserPermissionsResource(get_effective),
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_talentgate_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


async def _seed(admin_user_ids: list[str]) -> None:
    settings = get_settings()
    pool = create_pool(settings)
    await pool.open()
    try:
        uow_factory = create_uow_factory(pool)
        await SeedRolePermissionsUseCase(uow_factory).execute()
        if admin_user_ids:
            grant_admin = GrantAdminPermissionsUseCase(UnitOfWorkPermissionStore(uow_factory))
            for user_id in admin_user_ids:
                await grant_admin.execute(user_id)
    finally:
        await pool.close()


def seed_main() -> None:
    """CLI: seed default role grants and optionally bootstrap administrators."""
    parser = argparse.ArgumentParser(description="Seed TalentGate role permissions")
    parser.add_argument(
        "--admin",
        action="append",
        default=[],
        metavar="USER_ID",
        help="grant every admin default to this user (repeatable)",
    )
    args = parser.parse_args()
    configure_logging()
    asyncio.run(_seed(args.admin))
