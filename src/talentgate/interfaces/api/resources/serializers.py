"""JSON shapes for API responses."""

from typing import Any

from talentgate.application.dto.effective_permission import EffectivePermissions
from talentgate.domain.entities import AuditRecord, RoleGrant, UserGrant
from talentgate.domain.value_objects import PermissionRequest


def permission_to_dict(p: PermissionRequest) -> dict[str, Any]:
    return {"category": p.category, "action": p.action, "resource": p.resource}


def role_grant_to_dict(g: RoleGrant) -> dict[str, Any]:
    return {
        "id": str(g.id),
        "role": g.role,
        "category": g.category,
        "action": g.action,
        "resource": g.resource,
        "granted": g.granted,
    }


def user_grant_to_dict(g: UserGrant) -> dict[str, Any]:
    return {
        "id": str(g.id),
        "user_id": g.user_id,
        "category": g.category,
        "action": g.action,
        "resource": g.resource,
        "granted": g.granted,
        "granted_by": g.granted_by,
        "expires_at": g.expires_at.isoformat() if g.expires_at else None,
        "conditions": g.conditions.to_mapping() if g.conditions else None,
        "created_at": g.created_at.isoformat(),
        "updated_at": g.updated_at.isoformat(),
    }


def audit_record_to_dict(r: AuditRecord) -> dict[str, Any]:
    return {
        "id": str(r.id),
        "user_id": r.user_id,
        "user_role": r.user_role,
        "permission": permission_to_dict(r.permission_requested),
        "granted": r.granted,
        "timestamp": r.timestamp.isoformat(),
        "ip_address": r.ip_address,
        "user_agent": r.user_agent,
        "reason": r.reason,
    }


def effective_to_dict(e: EffectivePermissions) -> dict[str, Any]:
    return {
        "role_permissions": [role_grant_to_dict(g) for g in e.role_grants],
        "user_permissions": [user_grant_to_dict(g) for g in e.user_grants],
        "effective": [
            {
                "category": p.category,
                "action": p.action,
                "resource": p.resource,
                "granted": p.granted,
                "source": p.source,
            }
            for p in e.effective
        ],
    }
