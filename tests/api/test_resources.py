"""API resource tests."""

from datetime import UTC, datetime, timedelta

import pytest
from falcon.testing import TestClient

from talentgate.domain.entities import GrantConditions
from talentgate.domain.policy import DEFAULT_ROLE_PERMISSIONS
from talentgate.interfaces.api.middleware.auth import RequestUser

SEND = {"category": "messaging", "action": "create"}
EXPORT = {"category": "reports", "action": "export"}
UNKNOWN = {"category": "spaceships", "action": "read"}


def _as_talent(auth, user_id: str = "talent-1") -> None:
    auth.user = RequestUser(user_id=user_id, role="talent")


class TestHealth:
    def test_health_liveness(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/health")
        assert result.status_code == 200
        assert result.json["status"] == "ok"

    def test_health_ready_without_pool(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/health/ready")
        assert result.status_code == 200
        assert result.json["status"] == "ready"


class TestAuthentication:
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("POST", "/v1/permissions/check"),
            ("POST", "/v1/permissions/grant"),
            ("GET", "/v1/permissions/audit"),
            ("GET", "/v1/users/talent-1/permissions"),
        ],
    )
    def test_anonymous_request_is_unauthorized(self, client: TestClient, auth, method, path) -> None:
        auth.user = None
        result = client.simulate_request(method, path, json={})
        assert result.status_code == 401
        assert result.json["error"] == "Authentication required"


class TestCheck:
    def test_check_own_permission(self, client: TestClient, auth, seeded_uow) -> None:
        _as_talent(auth)
        result = client.simulate_post("/v1/permissions/check", json={"permission": SEND})

        assert result.status_code == 200
        assert result.json["has_permission"] is True
        assert result.json["user_id"] == "talent-1"
        assert seeded_uow.audit_records.records[-1].granted is True

    def test_check_denied_by_default(self, client: TestClient, auth) -> None:
        _as_talent(auth)
        result = client.simulate_post("/v1/permissions/check", json={"permission": EXPORT})

        assert result.status_code == 200
        assert result.json["has_permission"] is False

    def test_admin_checks_other_user(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/permissions/check",
            json={"user_id": "talent-1", "role": "talent", "permission": SEND},
        )
        assert result.status_code == 200
        assert result.json["has_permission"] is True

    def test_talent_cannot_check_other_user(self, client: TestClient, auth) -> None:
        _as_talent(auth)
        result = client.simulate_post(
            "/v1/permissions/check",
            json={"user_id": "talent-2", "role": "talent", "permission": SEND},
        )
        assert result.status_code == 403
        assert result.json["error"] == "Permission denied"

    def test_unknown_category_is_bad_request(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/permissions/check",
            json={"permission": {"category": "spaceships", "action": "read"}},
        )
        assert result.status_code == 400

    def test_unknown_role_is_bad_request(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/permissions/check",
            json={"user_id": "talent-1", "role": "pilot", "permission": SEND},
        )
        assert result.status_code == 400

    def test_on_behalf_check_ignores_caller_address(
        self, client: TestClient, auth, seeded_uow
    ) -> None:
        office_only = GrantConditions(ip_restrictions=("10.9.9.9",))
        seeded_uow.user_grants.add("talent-1", "reports", "export", conditions=office_only)
        body = {"user_id": "talent-1", "role": "talent", "permission": EXPORT}

        result = client.simulate_post("/v1/permissions/check", json=body, remote_addr="192.0.2.10")
        assert result.json["has_permission"] is True

        _as_talent(auth)
        result = client.simulate_post(
            "/v1/permissions/check", json={"permission": EXPORT}, remote_addr="192.0.2.10"
        )
        assert result.json["has_permission"] is False

    @pytest.mark.parametrize(
        "subject",
        [
            {"user_id": 42, "role": "talent"},
            {"user_id": "  ", "role": "talent"},
            {"user_id": "talent-1", "role": ["talent"]},
        ],
    )
    def test_malformed_subject_is_bad_request(self, client: TestClient, subject) -> None:
        result = client.simulate_post("/v1/permissions/check", json={**subject, "permission": SEND})
        assert result.status_code == 400

    def test_check_any_and_all(self, client: TestClient, auth) -> None:
        _as_talent(auth)
        body = {"permissions": [EXPORT, SEND]}

        assert client.simulate_post("/v1/permissions/check-any", json=body).json["has_permission"] is True
        assert client.simulate_post("/v1/permissions/check-all", json=body).json["has_permission"] is False

    def test_check_any_requires_permissions_list(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/permissions/check-any", json={"permissions": []})
        assert result.status_code == 400


class TestGrantAndRevoke:
    def test_grant_then_revoke(self, client: TestClient, auth) -> None:
        result = client.simulate_post(
            "/v1/permissions/grant",
            json={
                "user_id": "talent-1",
                "permission": EXPORT,
                "conditions": {"ipRestrictions": ["127.0.0.1"]},
            },
        )
        assert result.status_code == 201
        assert result.json["granted"] is True
        assert result.json["granted_by"] == "admin-1"
        assert result.json["conditions"] == {"ip_restrictions": ["127.0.0.1"]}

        result = client.simulate_post(
            "/v1/permissions/revoke", json={"user_id": "talent-1", "permission": EXPORT}
        )
        assert result.status_code == 200
        assert result.json == {"success": True}

        _as_talent(auth)
        result = client.simulate_post("/v1/permissions/check", json={"permission": EXPORT})
        assert result.json["has_permission"] is False

    def test_grant_with_expiry(self, client: TestClient) -> None:
        expires = (datetime.now(UTC) + timedelta(days=7)).isoformat()
        result = client.simulate_post(
            "/v1/permissions/grant",
            json={"user_id": "talent-1", "permission": EXPORT, "expires_at": expires},
        )
        assert result.status_code == 201
        assert result.json["expires_at"] is not None

    def test_grant_rejects_naive_expiry(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/permissions/grant",
            json={"user_id": "talent-1", "permission": EXPORT, "expires_at": "2030-01-01T00:00:00"},
        )
        assert result.status_code == 400

    @pytest.mark.parametrize(
        "window",
        [{"start_hour": 25, "end_hour": 3}, {"start_hour": 22, "end_hour": 6}],
    )
    def test_grant_rejects_malformed_conditions(self, client: TestClient, window) -> None:
        result = client.simulate_post(
            "/v1/permissions/grant",
            json={
                "user_id": "talent-1",
                "permission": EXPORT,
                "conditions": {"time_restrictions": window},
            },
        )
        assert result.status_code == 400

    def test_talent_cannot_grant(self, client: TestClient, auth) -> None:
        _as_talent(auth)
        result = client.simulate_post(
            "/v1/permissions/grant", json={"user_id": "talent-1", "permission": EXPORT}
        )
        assert result.status_code == 403

    @pytest.mark.parametrize(
        ("path", "body"),
        [
            ("/v1/permissions/grant", {"user_id": "talent-1", "permission": EXPORT, "conditions": {"ip_restrictions": "x"}}),
            ("/v1/permissions/grant", {"user_id": "talent-1", "permission": EXPORT, "expires_at": "soon"}),
            ("/v1/permissions/grant", {"user_id": 7, "permission": UNKNOWN}),
            ("/v1/permissions/revoke", {"user_id": "talent-1", "permission": UNKNOWN}),
        ],
    )
    def test_invalid_payload_from_non_admin_is_forbidden(
        self, client: TestClient, auth, path, body
    ) -> None:
        _as_talent(auth)
        result = client.simulate_post(path, json=body)
        assert result.status_code == 403

    def test_revoke_unknown_override_is_not_found(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/permissions/revoke", json={"user_id": "talent-1", "permission": EXPORT}
        )
        assert result.status_code == 404


class TestAudit:
    def test_audit_lists_decisions(self, client: TestClient, auth) -> None:
        _as_talent(auth)
        client.simulate_post("/v1/permissions/check", json={"permission": EXPORT})
        auth.user = RequestUser(user_id="admin-1", role="admin")

        result = client.simulate_get(
            "/v1/permissions/audit", params={"user_id": "talent-1", "granted": "false"}
        )

        assert result.status_code == 200
        [log] = result.json["logs"]
        assert log["permission"] == {"category": "reports", "action": "export", "resource": None}
        assert log["granted"] is False

    def test_talent_cannot_read_audit(self, client: TestClient, auth) -> None:
        _as_talent(auth)
        assert client.simulate_get("/v1/permissions/audit").status_code == 403


class TestInit:
    def test_init_seeds_missing_role_grants(self, client: TestClient) -> None:
        total = sum(len(perms) for perms in DEFAULT_ROLE_PERMISSIONS.values())

        first = client.simulate_post("/v1/permissions/init")
        second = client.simulate_post("/v1/permissions/init")

        assert first.status_code == 200
        # The fixture already holds four of the default grants.
        assert first.json["role_permissions"] == total - 4
        assert second.json["role_permissions"] == 0


class TestUserPermissions:
    def test_own_effective_permissions(self, client: TestClient, auth) -> None:
        _as_talent(auth)
        result = client.simulate_get("/v1/users/talent-1/permissions")

        assert result.status_code == 200
        assert result.json["role"] == "talent"
        assert result.json["effective"] == [
            {
                "category": "messaging",
                "action": "create",
                "resource": None,
                "granted": True,
                "source": "role",
            }
        ]

    def test_admin_needs_role_for_other_user(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/users/talent-1/permissions")
        assert result.status_code == 400

        result = client.simulate_get("/v1/users/talent-1/permissions", params={"role": "talent"})
        assert result.status_code == 200

    def test_talent_cannot_view_other_user(self, client: TestClient, auth) -> None:
        _as_talent(auth)
        result = client.simulate_get(
            "/v1/users/talent-2/permissions", params={"role": "talent"}
        )
        assert result.status_code == 403
