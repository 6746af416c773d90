"""Access evaluator port - role + user-override authorization."""

from collections.abc import Sequence
from typing import Protocol

from talentgate.domain.value_objects import AccessContext, PermissionRequest


class AccessEvaluator(Protocol):
    """Port for deciding whether a principal may perform a request."""

    async def evaluate(self, context: AccessContext, request: PermissionRequest) -> bool: ...

    async def evaluate_many(
        self, context: AccessContext, requests: Sequence[PermissionRequest]
    ) -> list[bool]: ...

    async def evaluate_any(
        self, context: AccessContext, requests: Sequence[PermissionRequest]
    ) -> bool: ...

    async def evaluate_all(
        self, context: AccessContext, requests: Sequence[PermissionRequest]
    ) -> bool: ...
