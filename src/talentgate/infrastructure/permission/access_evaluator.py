"""Access evaluator - user overrides first, then role defaults."""

from collections.abc import Sequence
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo

from talentgate.application.ports import PermissionStore
from talentgate.domain.entities import UserGrant
from talentgate.domain.value_objects import AccessContext, PermissionRequest
from talentgate.logging import get_logger

logger = get_logger(__name__)


def _aware(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


class GrantAccessEvaluator:
    """Decides access from the permission store. Never raises: errors deny."""

    def __init__(self, permission_store: PermissionStore, timezone: str | tzinfo = "UTC") -> None:
        self._store = permission_store
        self._tz = ZoneInfo(timezone) if isinstance(timezone, str) else timezone

    async def evaluate(self, context: AccessContext, request: PermissionRequest) -> bool:
        """Check if the principal in context may perform request."""
        if not context.is_well_formed or not request.is_well_formed:
            logger.info(
                "permission_request_malformed",
                user_id=context.user_id,
                permission=str(request),
            )
            return False

        try:
            override = await self._find_user_grant(context, request)
            if override is not None:
                return self._check_user_grant(override, context)

            role_grants = await self._store.get_role_grants(context.user_role)
            for grant in role_grants:
                if grant.matches(request):
                    return bool(grant.granted)
            return False
        except Exception:
            logger.warning(
                "permission_check_failed",
                user_id=context.user_id,
                role=context.user_role,
                permission=str(request),
                exc_info=True,
            )
            return False

    async def evaluate_many(
        self, context: AccessContext, requests: Sequence[PermissionRequest]
    ) -> list[bool]:
        """Evaluate each request independently, preserving order."""
        return [await self.evaluate(context, request) for request in requests]

    async def evaluate_any(
        self, context: AccessContext, requests: Sequence[PermissionRequest]
    ) -> bool:
        """True if at least one request is allowed. Stops at the first allow."""
        for request in requests:
            if await self.evaluate(context, request):
                return True
        return False

    async def evaluate_all(
        self, context: AccessContext, requests: Sequence[PermissionRequest]
    ) -> bool:
        """True only if every request is allowed. Stops at the first deny."""
        for request in requests:
            if not await self.evaluate(context, request):
                return False
        return True

    async def _find_user_grant(
        self, context: AccessContext, request: PermissionRequest
    ) -> UserGrant | None:
        """Most recently updated, unexpired override matching the request."""
        now = _aware(context.timestamp)
        candidates = [
            g
            for g in await self._store.get_user_grants(context.user_id)
            if g.matches(request)
            and (g.expires_at is None or _aware(g.expires_at) > now)
        ]
        if not candidates:
            return None
        return max(candidates, key=lambda g: (_aware(g.updated_at), _aware(g.created_at)))

    def _check_user_grant(self, grant: UserGrant, context: AccessContext) -> bool:
        if not grant.granted:
            return False

        conditions = grant.conditions
        if conditions is None:
            return True

        if conditions.ip_restrictions is not None and context.ip_address:
            if context.ip_address not in conditions.ip_restrictions:
                return False

        if conditions.time_restrictions is not None:
            hour = self._local_hour(context.timestamp)
            if not conditions.time_restrictions.contains(hour):
                return False

        return True

    def _local_hour(self, timestamp: datetime) -> int:
        if timestamp.tzinfo is None:
            return timestamp.hour
        return timestamp.astimezone(self._tz).hour
