"""Access context - who is asking, from where, and when."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class AccessContext:
    """Per-request evaluation input. Never persisted by the evaluator."""

    user_id: str
    user_role: str
    ip_address: str | None = None
    user_agent: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_well_formed(self) -> bool:
        return bool(self.user_id) and bool(self.user_role)
