"""Built-in permission policy."""

from talentgate.domain.policy.catalog import DEFAULT_ROLE_PERMISSIONS, PermissionChecks

__all__ = ["DEFAULT_ROLE_PERMISSIONS", "PermissionChecks"]
