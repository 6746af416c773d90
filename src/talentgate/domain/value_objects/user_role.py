"""Marketplace roles."""

from enum import StrEnum


class UserRole(StrEnum):
    """Roles that carry default grants."""

    TALENT = "talent"
    MANAGER = "manager"
    PRODUCER = "producer"
    ADMIN = "admin"
