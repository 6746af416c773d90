"""Domain exceptions."""


class TalentGateError(Exception):
    """Base exception for TalentGate."""


class PermissionDenied(TalentGateError):
    """Caller lacks the permission an operation requires."""


class NotFound(TalentGateError):
    """Requested grant or record does not exist."""

    def __init__(self, entity: str, key: str) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class ValidationError(TalentGateError):
    """Input failed validation (bad permission, role, conditions or timestamp)."""
