"""Grant entities - role defaults and per-user overrides."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from talentgate.domain.exceptions import ValidationError
from talentgate.domain.value_objects import PermissionRequest, resource_matches


@dataclass(frozen=True)
class TimeWindow:
    """Hours of the day (inclusive on both ends) during which a grant applies."""

    start_hour: int
    end_hour: int

    def __post_init__(self) -> None:
        for name, hour in (("start_hour", self.start_hour), ("end_hour", self.end_hour)):
            if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
                raise ValidationError(f"{name} must be an integer hour in 0..23, got {hour!r}")
        if self.start_hour > self.end_hour:
            # Windows do not wrap past midnight.
            raise ValidationError(
                f"start_hour {self.start_hour} is after end_hour {self.end_hour}"
            )

    def contains(self, hour: int) -> bool:
        return self.start_hour <= hour <= self.end_hour


@dataclass(frozen=True)
class GrantConditions:
    """Contextual restrictions attached to a user grant."""

    ip_restrictions: tuple[str, ...] | None = None
    time_restrictions: TimeWindow | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "GrantConditions | None":
        """Build conditions from stored JSON, rejecting malformed shapes.

        Accepts both snake_case and the camelCase keys the web client sends.
        """
        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise ValidationError("conditions must be an object")

        ips = data.get("ip_restrictions", data.get("ipRestrictions"))
        if ips is not None:
            if not isinstance(ips, (list, tuple)) or not all(isinstance(ip, str) for ip in ips):
                raise ValidationError("ip_restrictions must be a list of strings")
            ips = tuple(ips)

        window = data.get("time_restrictions", data.get("timeRestrictions"))
        time_window = None
        if window is not None:
            if not isinstance(window, Mapping):
                raise ValidationError("time_restrictions must be an object")
            try:
                time_window = TimeWindow(
                    start_hour=window.get("start_hour", window.get("startHour")),
                    end_hour=window.get("end_hour", window.get("endHour")),
                )
            except TypeError as e:
                raise ValidationError(f"time_restrictions is malformed: {e}") from e

        if ips is None and time_window is None:
            return None
        return cls(ip_restrictions=ips, time_restrictions=time_window)

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.ip_restrictions is not None:
            data["ip_restrictions"] = list(self.ip_restrictions)
        if self.time_restrictions is not None:
            data["time_restrictions"] = {
                "start_hour": self.time_restrictions.start_hour,
                "end_hour": self.time_restrictions.end_hour,
            }
        return data


@dataclass
class RoleGrant:
    """Default grant for every principal holding a role. Never expires."""

    id: UUID
    role: str
    category: str
    action: str
    resource: str | None = None
    granted: bool = True
    created_at: datetime | None = None

    def matches(self, request: PermissionRequest) -> bool:
        return (
            self.category == request.category
            and self.action == request.action
            and resource_matches(self.resource, request.resource)
        )


@dataclass
class UserGrant:
    """Per-user override of the role default. Revoked by setting granted=False."""

    id: UUID
    user_id: str
    category: str
    action: str
    created_at: datetime
    updated_at: datetime
    resource: str | None = None
    granted: bool = True
    granted_by: str | None = None
    expires_at: datetime | None = None
    conditions: GrantConditions | None = field(default=None)

    def matches(self, request: PermissionRequest) -> bool:
        return (
            self.category == request.category
            and self.action == request.action
            and resource_matches(self.resource, request.resource)
        )

    def is_expired(self, at: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= at

    def same_scope(self, category: str, action: str, resource: str | None) -> bool:
        """Exact (category, action, resource) identity used for write-time uniqueness."""
        return self.category == category and self.action == action and self.resource == resource
