"""Parsing of permission payloads from the HTTP layer."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from talentgate.domain.exceptions import ValidationError
from talentgate.domain.value_objects import (
    PermissionAction,
    PermissionCategory,
    PermissionRequest,
)

_CATEGORIES = frozenset(c.value for c in PermissionCategory)
_ACTIONS = frozenset(a.value for a in PermissionAction)


def parse_permission(data: Any) -> PermissionRequest:
    """Build a PermissionRequest from a JSON object, rejecting unknown names.

    An already built PermissionRequest is returned as is.
    """
    if isinstance(data, PermissionRequest):
        return data
    if not isinstance(data, Mapping):
        raise ValidationError("permission must be an object")

    category = data.get("category")
    action = data.get("action")
    resource = data.get("resource")
    if not isinstance(category, str) or not isinstance(action, str):
        raise ValidationError("permission.category and permission.action are required")

    category = category.strip().lower()
    action = action.strip().lower()
    if category not in _CATEGORIES:
        raise ValidationError(f"Unknown permission category: {category}")
    if action not in _ACTIONS:
        raise ValidationError(f"Unknown permission action: {action}")
    if resource is not None and (not isinstance(resource, str) or not resource.strip()):
        raise ValidationError("permission.resource must be a non-empty string")

    return PermissionRequest(
        category=category,
        action=action,
        resource=resource.strip() if resource else None,
    )


def parse_permissions(items: Any) -> list[PermissionRequest]:
    if not isinstance(items, list) or not items:
        raise ValidationError("permissions must be a non-empty list")
    return [parse_permission(item) for item in items]


def parse_user_id(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("user_id must be a non-empty string")
    return value.strip()


def parse_timestamp(value: Any, field: str) -> datetime | None:
    """ISO 8601 string (or datetime) with an explicit offset; None passes through."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise ValidationError(f"{field} is not a valid ISO 8601 timestamp") from e
    if not isinstance(value, datetime):
        raise ValidationError(f"{field} must be an ISO 8601 string")
    if value.tzinfo is None:
        raise ValidationError(f"{field} must include a timezone offset")
    return value
