"""Permission catalogue and the default grants seeded for each role."""

from talentgate.domain.value_objects import (
    RESOURCE_ALL,
    RESOURCE_OWN,
    PermissionAction as A,
    PermissionCategory as C,
    PermissionRequest,
    UserRole,
)


def _p(category: C, action: A, resource: str | None = None) -> PermissionRequest:
    return PermissionRequest(category=category.value, action=action.value, resource=resource)


class PermissionChecks:
    """Named permissions used across the marketplace."""

    # User management
    CREATE_USER = _p(C.USER_MANAGEMENT, A.CREATE)
    VIEW_ALL_USERS = _p(C.USER_MANAGEMENT, A.READ, RESOURCE_ALL)
    VIEW_OWN_USER = _p(C.USER_MANAGEMENT, A.READ, RESOURCE_OWN)
    UPDATE_ANY_USER = _p(C.USER_MANAGEMENT, A.UPDATE, RESOURCE_ALL)
    UPDATE_OWN_USER = _p(C.USER_MANAGEMENT, A.UPDATE, RESOURCE_OWN)
    DELETE_USER = _p(C.USER_MANAGEMENT, A.DELETE)

    # Profiles
    CREATE_PROFILE = _p(C.PROFILE_MANAGEMENT, A.CREATE)
    VIEW_ALL_PROFILES = _p(C.PROFILE_MANAGEMENT, A.READ, RESOURCE_ALL)
    VIEW_OWN_PROFILE = _p(C.PROFILE_MANAGEMENT, A.READ, RESOURCE_OWN)
    UPDATE_ANY_PROFILE = _p(C.PROFILE_MANAGEMENT, A.UPDATE, RESOURCE_ALL)
    UPDATE_OWN_PROFILE = _p(C.PROFILE_MANAGEMENT, A.UPDATE, RESOURCE_OWN)
    VERIFY_PROFILE = _p(C.PROFILE_MANAGEMENT, A.VERIFY)

    # Media
    UPLOAD_MEDIA = _p(C.MEDIA_MANAGEMENT, A.CREATE)
    VIEW_ALL_MEDIA = _p(C.MEDIA_MANAGEMENT, A.READ, RESOURCE_ALL)
    VIEW_OWN_MEDIA = _p(C.MEDIA_MANAGEMENT, A.READ, RESOURCE_OWN)
    DELETE_ANY_MEDIA = _p(C.MEDIA_MANAGEMENT, A.DELETE, RESOURCE_ALL)
    DELETE_OWN_MEDIA = _p(C.MEDIA_MANAGEMENT, A.DELETE, RESOURCE_OWN)
    MODERATE_MEDIA = _p(C.MEDIA_MANAGEMENT, A.MODERATE)

    # Jobs
    CREATE_JOB = _p(C.JOB_MANAGEMENT, A.CREATE)
    VIEW_ALL_JOBS = _p(C.JOB_MANAGEMENT, A.READ, RESOURCE_ALL)
    VIEW_OWN_JOBS = _p(C.JOB_MANAGEMENT, A.READ, RESOURCE_OWN)
    UPDATE_ANY_JOB = _p(C.JOB_MANAGEMENT, A.UPDATE, RESOURCE_ALL)
    UPDATE_OWN_JOB = _p(C.JOB_MANAGEMENT, A.UPDATE, RESOURCE_OWN)
    DELETE_ANY_JOB = _p(C.JOB_MANAGEMENT, A.DELETE, RESOURCE_ALL)
    DELETE_OWN_JOB = _p(C.JOB_MANAGEMENT, A.DELETE, RESOURCE_OWN)
    PUBLISH_JOB = _p(C.JOB_MANAGEMENT, A.PUBLISH)

    # Applications
    APPLY_TO_JOB = _p(C.APPLICATION_MANAGEMENT, A.CREATE)
    VIEW_ALL_APPLICATIONS = _p(C.APPLICATION_MANAGEMENT, A.READ, RESOURCE_ALL)
    VIEW_OWN_APPLICATIONS = _p(C.APPLICATION_MANAGEMENT, A.READ, RESOURCE_OWN)
    APPROVE_APPLICATION = _p(C.APPLICATION_MANAGEMENT, A.APPROVE)
    REJECT_APPLICATION = _p(C.APPLICATION_MANAGEMENT, A.REJECT)

    # Messaging
    SEND_MESSAGE = _p(C.MESSAGING, A.CREATE)
    VIEW_ALL_MESSAGES = _p(C.MESSAGING, A.READ, RESOURCE_ALL)
    VIEW_OWN_MESSAGES = _p(C.MESSAGING, A.READ, RESOURCE_OWN)
    MODERATE_MESSAGES = _p(C.MESSAGING, A.MODERATE)

    # Analytics
    VIEW_ANALYTICS = _p(C.ANALYTICS, A.READ)
    EXPORT_ANALYTICS = _p(C.ANALYTICS, A.EXPORT)

    # System settings
    MANAGE_SETTINGS = _p(C.SYSTEM_SETTINGS, A.UPDATE)
    VIEW_SETTINGS = _p(C.SYSTEM_SETTINGS, A.READ)

    # Content moderation
    MODERATE_CONTENT = _p(C.CONTENT_MODERATION, A.MODERATE)
    APPROVE_CONTENT = _p(C.CONTENT_MODERATION, A.APPROVE)
    REJECT_CONTENT = _p(C.CONTENT_MODERATION, A.REJECT)

    # Verification
    VERIFY_USERS = _p(C.VERIFICATION, A.VERIFY)
    UNVERIFY_USERS = _p(C.VERIFICATION, A.UNVERIFY)

    # AI features
    USE_AI_ENHANCEMENT = _p(C.AI_FEATURES, A.CREATE)
    MANAGE_AI_SETTINGS = _p(C.AI_FEATURES, A.UPDATE)

    # Reports
    GENERATE_REPORTS = _p(C.REPORTS, A.CREATE)
    VIEW_REPORTS = _p(C.REPORTS, A.READ)
    EXPORT_REPORTS = _p(C.REPORTS, A.EXPORT)


P = PermissionChecks

_TALENT = (
    P.VIEW_OWN_PROFILE,
    P.UPDATE_OWN_PROFILE,
    P.CREATE_PROFILE,
    P.UPLOAD_MEDIA,
    P.VIEW_OWN_MEDIA,
    P.DELETE_OWN_MEDIA,
    P.VIEW_ALL_JOBS,
    P.APPLY_TO_JOB,
    P.VIEW_OWN_APPLICATIONS,
    P.SEND_MESSAGE,
    P.VIEW_OWN_MESSAGES,
    P.USE_AI_ENHANCEMENT,
)

_MANAGER = (
    P.VIEW_OWN_PROFILE,
    P.UPDATE_OWN_PROFILE,
    P.VIEW_ALL_PROFILES,
    P.VIEW_ALL_JOBS,
    P.CREATE_JOB,
    P.UPDATE_OWN_JOB,
    P.DELETE_OWN_JOB,
    P.PUBLISH_JOB,
    P.VIEW_ALL_APPLICATIONS,
    P.APPROVE_APPLICATION,
    P.REJECT_APPLICATION,
    P.SEND_MESSAGE,
    P.VIEW_OWN_MESSAGES,
    P.VIEW_ANALYTICS,
    P.USE_AI_ENHANCEMENT,
    P.GENERATE_REPORTS,
    P.VIEW_REPORTS,
)

# Producers get everything managers do, plus report export.
_PRODUCER = _MANAGER + (P.EXPORT_REPORTS,)

_ADMIN = (
    P.CREATE_USER,
    P.VIEW_ALL_USERS,
    P.UPDATE_ANY_USER,
    P.DELETE_USER,
    P.VIEW_ALL_PROFILES,
    P.UPDATE_ANY_PROFILE,
    P.VERIFY_PROFILE,
    P.VIEW_ALL_MEDIA,
    P.DELETE_ANY_MEDIA,
    P.MODERATE_MEDIA,
    P.VIEW_ALL_JOBS,
    P.UPDATE_ANY_JOB,
    P.DELETE_ANY_JOB,
    P.PUBLISH_JOB,
    P.VIEW_ALL_APPLICATIONS,
    P.APPROVE_APPLICATION,
    P.REJECT_APPLICATION,
    P.VIEW_ALL_MESSAGES,
    P.MODERATE_MESSAGES,
    P.VIEW_ANALYTICS,
    P.EXPORT_ANALYTICS,
    P.MANAGE_SETTINGS,
    P.VIEW_SETTINGS,
    P.MODERATE_CONTENT,
    P.APPROVE_CONTENT,
    P.REJECT_CONTENT,
    P.VERIFY_USERS,
    P.UNVERIFY_USERS,
    P.USE_AI_ENHANCEMENT,
    P.MANAGE_AI_SETTINGS,
    P.GENERATE_REPORTS,
    P.VIEW_REPORTS,
    P.EXPORT_REPORTS,
)

DEFAULT_ROLE_PERMISSIONS: dict[str, tuple[PermissionRequest, ...]] = {
    UserRole.TALENT.value: _TALENT,
    UserRole.MANAGER.value: _MANAGER,
    UserRole.PRODUCER.value: _PRODUCER,
    UserRole.ADMIN.value: _ADMIN,
}
