"""Permission categories (functional areas of the marketplace)."""

from enum import StrEnum


class PermissionCategory(StrEnum):
    """Functional areas a grant applies to."""

    USER_MANAGEMENT = "user_management"
    PROFILE_MANAGEMENT = "profile_management"
    MEDIA_MANAGEMENT = "media_management"
    JOB_MANAGEMENT = "job_management"
    APPLICATION_MANAGEMENT = "application_management"
    MESSAGING = "messaging"
    ANALYTICS = "analytics"
    SYSTEM_SETTINGS = "system_settings"
    CONTENT_MODERATION = "content_moderation"
    BILLING_PAYMENTS = "billing_payments"
    VERIFICATION = "verification"
    NOTIFICATIONS = "notifications"
    CALENDAR_SCHEDULING = "calendar_scheduling"
    AI_FEATURES = "ai_features"
    REPORTS = "reports"
