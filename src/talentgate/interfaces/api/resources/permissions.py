"""Permissions API resources."""

import falcon
import falcon.asgi

from talentgate.application.dto.permission_input import parse_permission, parse_permissions
from talentgate.application.use_cases.permission.check_permission import CheckPermissionUseCase
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
from talentgate.domain.exceptions import ValidationError
from talentgate.domain.policy import PermissionChecks
from talentgate.domain.value_objects import AccessContext, UserRole
from talentgate.interfaces.api.context import actor_context, read_json, run_mapped
from talentgate.interfaces.api.resources.serializers import (
    audit_record_to_dict,
    permission_to_dict,
    user_grant_to_dict,
)

_ROLES = frozenset(r.value for r in UserRole)


class _SubjectCheck:
    """Shared body parsing for check endpoints."""

    def __init__(self, check_permission: CheckPermissionUseCase) -> None:
        self._check = check_permission

    async def _subject(self, actor: AccessContext, body: dict) -> AccessContext:
        """Context for whoever is being checked; checking someone else needs VIEW_ALL_USERS.

        The caller's address and user agent do not describe the subject, so an
        on-behalf context carries neither and IP restrictions are not applied.
        """
        user_id = body.get("user_id")
        if user_id is None:
            user_id = actor.user_id
        elif not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("user_id must be a non-empty string")
        user_id = user_id.strip()

        role = body.get("role")
        if user_id == actor.user_id and role in (None, actor.user_role):
            return actor

        await self._check.require(actor, PermissionChecks.VIEW_ALL_USERS)
        if not isinstance(role, str) or role not in _ROLES:
            raise ValidationError(f"Unknown role: {role}")
        return AccessContext(user_id=user_id, user_role=role)


class PermissionCheckResource(_SubjectCheck):
    """POST /v1/permissions/check - evaluate a single permission (audited)."""

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = actor_context(req, resp)
        if actor is None:
            return

        async def handle() -> None:
            body = await read_json(req)
            permission = parse_permission(body.get("permission"))
            subject = await self._subject(actor, body)
            allowed = await self._check.execute(subject, permission)
            resp.media = {
                "user_id": subject.user_id,
                "permission": permission_to_dict(permission),
                "has_permission": allowed,
            }
            resp.status = falcon.HTTP_200

        await run_mapped(resp, handle)


class PermissionCheckAnyResource(_SubjectCheck):
    """POST /v1/permissions/check-any - allowed if any listed permission is."""

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = actor_context(req, resp)
        if actor is None:
            return

        async def handle() -> None:
            body = await read_json(req)
            permissions = parse_permissions(body.get("permissions"))
            subject = await self._subject(actor, body)
            resp.media = {
                "user_id": subject.user_id,
                "has_permission": await self._check.execute_any(subject, permissions),
            }
            resp.status = falcon.HTTP_200

        await run_mapped(resp, handle)


class PermissionCheckAllResource(_SubjectCheck):
    """POST /v1/permissions/check-all - allowed only if every listed permission is."""

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = actor_context(req, resp)
        if actor is None:
            return

        async def handle() -> None:
            body = await read_json(req)
            permissions = parse_permissions(body.get("permissions"))
            subject = await self._subject(actor, body)
            resp.media = {
                "user_id": subject.user_id,
                "has_permission": await self._check.execute_all(subject, permissions),
            }
            resp.status = falcon.HTTP_200

        await run_mapped(resp, handle)


class PermissionGrantResource:
    """POST /v1/permissions/grant - grant a user override."""

    def __init__(self, grant_permission: GrantUserPermissionUseCase) -> None:
        self._grant = grant_permission

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = actor_context(req, resp)
        if actor is None:
            return

        async def handle() -> None:
            body = await read_json(req)
            grant = await self._grant.execute(
                actor,
                body.get("user_id"),
                body.get("permission"),
                expires_at=body.get("expires_at"),
                conditions=body.get("conditions"),
            )
            resp.media = user_grant_to_dict(grant)
            resp.status = falcon.HTTP_201

        await run_mapped(resp, handle)


class PermissionRevokeResource:
    """POST /v1/permissions/revoke - revoke a user override (row kept, granted=false)."""

    def __init__(self, revoke_permission: RevokeUserPermissionUseCase) -> None:
        self._revoke = revoke_permission

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = actor_context(req, resp)
        if actor is None:
            return

        async def handle() -> None:
            body = await read_json(req)
            await self._revoke.execute(actor, body.get("user_id"), body.get("permission"))
            resp.media = {"success": True}
            resp.status = falcon.HTTP_200

        await run_mapped(resp, handle)


class PermissionAuditResource:
    """GET /v1/permissions/audit - decision audit trail, newest first."""

    def __init__(self, list_audit_records: ListAuditRecordsUseCase) -> None:
        self._list = list_audit_records

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = actor_context(req, resp)
        if actor is None:
            return

        async def handle() -> None:
            records = await self._list.execute(
                actor,
                user_id=req.get_param("user_id"),
                granted=req.get_param_as_bool("granted"),
                limit=req.get_param_as_int("limit") or 100,
            )
            resp.media = {"logs": [audit_record_to_dict(r) for r in records]}
            resp.status = falcon.HTTP_200

        await run_mapped(resp, handle)


class PermissionInitResource:
    """POST /v1/permissions/init - seed default role grants."""

    def __init__(self, seed_role_permissions: SeedRolePermissionsUseCase) -> None:
        self._seed = seed_role_permissions

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = actor_context(req, resp)
        if actor is None:
            return

        async def handle() -> None:
            created = await self._seed.execute(actor)
            resp.media = {"role_permissions": created}
            resp.status = falcon.HTTP_200

        await run_mapped(resp, handle)
