"""Effective permission DTOs."""

from dataclasses import dataclass, field
from typing import Literal

from talentgate.domain.entities import RoleGrant, UserGrant


@dataclass
class EffectivePermission:
    """One resolved grant and the layer it came from."""

    category: str
    action: str
    resource: str | None
    granted: bool
    source: Literal["role", "user"]


@dataclass
class EffectivePermissions:
    """Role defaults, user overrides, and the merged view."""

    role_grants: list[RoleGrant] = field(default_factory=list)
    user_grants: list[UserGrant] = field(default_factory=list)
    effective: list[EffectivePermission] = field(default_factory=list)
