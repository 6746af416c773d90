"""Permission actions (operation verbs)."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Verbs a grant can allow or deny."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    APPROVE = "approve"
    REJECT = "reject"
    PUBLISH = "publish"
    UNPUBLISH = "unpublish"
    VERIFY = "verify"
    UNVERIFY = "unverify"
    EXPORT = "export"
    IMPORT = "import"
    MODERATE = "moderate"
    ASSIGN = "assign"
    UNASSIGN = "unassign"
