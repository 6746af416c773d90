"""Domain value objects."""

from talentgate.domain.value_objects.access_context import AccessContext
from talentgate.domain.value_objects.permission_action import PermissionAction
from talentgate.domain.value_objects.permission_category import PermissionCategory
from talentgate.domain.value_objects.permission_request import (
    RESOURCE_ALL,
    RESOURCE_OWN,
    PermissionRequest,
    resource_matches,
)
from talentgate.domain.value_objects.user_role import UserRole

__all__ = [
    "RESOURCE_ALL",
    "RESOURCE_OWN",
    "AccessContext",
    "PermissionAction",
    "PermissionCategory",
    "PermissionRequest",
    "UserRole",
    "resource_matches",
]
