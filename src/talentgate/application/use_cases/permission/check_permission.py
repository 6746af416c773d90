"""Check permission use case - evaluate and audit."""

from collections.abc import Sequence
from uuid import uuid4

from talentgate.application.ports import AccessEvaluator, AuditSink
from talentgate.domain.entities import AuditRecord
from talentgate.domain.exceptions import PermissionDenied
from talentgate.domain.value_objects import AccessContext, PermissionRequest


class CheckPermissionUseCase:
    """Evaluate access for a principal and write an audit record for the decision."""

    def __init__(self, evaluator: AccessEvaluator, audit_sink: AuditSink) -> None:
        self._evaluator = evaluator
        self._audit_sink = audit_sink

    async def execute(self, context: AccessContext, request: PermissionRequest) -> bool:
        """Return the decision. Auditing happens after and cannot change it."""
        granted = await self._evaluator.evaluate(context, request)
        await self._audit_sink.record(
            AuditRecord(
                id=uuid4(),
                user_id=context.user_id,
                user_role=context.user_role,
                permission_requested=request,
                granted=granted,
                timestamp=context.timestamp,
                ip_address=context.ip_address,
                user_agent=context.user_agent,
                reason="Access granted" if granted else "Access denied",
            )
        )
        return granted

    async def execute_any(
        self, context: AccessContext, requests: Sequence[PermissionRequest]
    ) -> bool:
        return await self._evaluator.evaluate_any(context, requests)

    async def execute_all(
        self, context: AccessContext, requests: Sequence[PermissionRequest]
    ) -> bool:
        return await self._evaluator.evaluate_all(context, requests)

    async def require(self, context: AccessContext, request: PermissionRequest) -> None:
        """Raise PermissionDenied unless the decision is allow."""
        if not await self.execute(context, request):
            raise PermissionDenied(f"Permission denied: {request}")
