"""Helpers shared by API resources."""

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import Any

import falcon
import falcon.asgi

from talentgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from talentgate.domain.value_objects import AccessContext


def access_context(req: falcon.asgi.Request, user_id: str, role: str) -> AccessContext:
    """Build an AccessContext for user_id from the request's network details."""
    return AccessContext(
        user_id=user_id,
        user_role=role,
        ip_address=req.remote_addr,
        user_agent=req.user_agent,
        timestamp=datetime.now(UTC),
    )


def actor_context(req: falcon.asgi.Request, resp: falcon.asgi.Response) -> AccessContext | None:
    """AccessContext for the authenticated caller, or None after setting 401."""
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Authentication required"}
        return None
    return access_context(req, user.user_id, user.role)


async def read_json(req: falcon.asgi.Request) -> dict[str, Any]:
    body = await req.get_media(default_when_empty=None)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


async def run_mapped(
    resp: falcon.asgi.Response, call: Callable[[], Awaitable[None]]
) -> None:
    """Run a handler body, mapping domain exceptions to HTTP errors."""
    try:
        await call()
    except ValidationError as e:
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(e)}
    except PermissionDenied as e:
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Permission denied", "detail": str(e)}
    except NotFound as e:
        resp.status = falcon.HTTP_404
        resp.media = {"error": "Not found", "detail": str(e)}
