"""Falcon ASGI application."""

import falcon
import falcon.asgi
from falcon.asgi import App

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
from talentgate.logging import get_logger

logger = get_logger(__name__)


async def _handle_unexpected(req, resp, ex, params) -> None:
    logger.error(
        "unhandled_exception",
        method=req.method,
        path=req.path,
        exc_info=(type(ex), ex, ex.__traceback__),
    )
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    *,
    health_resource: HealthResource,
    check_resource: PermissionCheckResource,
    check_any_resource: PermissionCheckAnyResource,
    check_all_resource: PermissionCheckAllResource,
    grant_resource: PermissionGrantResource,
    revoke_resource: PermissionRevokeResource,
    audit_resource: PermissionAuditResource,
    init_resource: PermissionInitResource,
    user_permissions_resource: UserPermissionsResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/permissions/check", check_resource)
    app.add_route("/v1/permissions/check-any", check_any_resource)
    app.add_route("/v1/permissions/check-all", check_all_resource)
    app.add_route("/v1/permissions/grant", grant_resource)
    app.add_route("/v1/permissions/revoke", revoke_resource)
    app.add_route("/v1/permissions/audit", audit_resource)
    app.add_route("/v1/permissions/init", init_resource)
    app.add_route("/v1/users/{user_id}/permissions", user_permissions_resource)
    return app
