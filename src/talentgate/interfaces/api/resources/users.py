"""User permission API resources."""

import falcon
import falcon.asgi

from talentgate.application.use_cases.permission.get_effective_permissions import (
    GetEffectivePermissionsUseCase,
)
from talentgate.domain.exceptions import ValidationError
from talentgate.domain.value_objects import UserRole
from talentgate.interfaces.api.context import actor_context, run_mapped
from talentgate.interfaces.api.resources.serializers import effective_to_dict


class UserPermissionsResource:
    """GET /v1/users/{user_id}/permissions?role= - effective permissions."""

    def __init__(self, get_effective_permissions: GetEffectivePermissionsUseCase) -> None:
        self._get_effective = get_effective_permissions

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        actor = actor_context(req, resp)
        if actor is None:
            return

        async def handle() -> None:
            default_role = actor.user_role if user_id == actor.user_id else None
            role = req.get_param("role") or default_role
            if role not in {r.value for r in UserRole}:
                raise ValidationError("role query parameter must be a marketplace role")
            result = await self._get_effective.execute(actor, user_id, role)
            resp.media = {"user_id": user_id, "role": role, **effective_to_dict(result)}
            resp.status = falcon.HTTP_200

        await run_mapped(resp, handle)
