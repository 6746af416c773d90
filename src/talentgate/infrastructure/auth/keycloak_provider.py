"""Keycloak OIDC provider - token introspection and marketplace role."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from keycloak import KeycloakOpenID

from talentgate.config import Settings
from talentgate.domain.value_objects import UserRole
from talentgate.logging import get_logger

logger = get_logger(__name__)

# Highest first: a user holding several marketplace roles acts as the strongest.
_ROLE_PRECEDENCE = (UserRole.ADMIN, UserRole.PRODUCER, UserRole.MANAGER, UserRole.TALENT)


def marketplace_role(roles: Iterable[str]) -> str:
    """Pick the marketplace role from token roles; talent when none is present."""
    held = set(roles)
    for role in _ROLE_PRECEDENCE:
        if role.value in held:
            return role.value
    return UserRole.TALENT.value


@dataclass
class OIDCUser:
    """Authenticated user from an introspected token."""

    user_id: str
    email: str | None
    username: str | None
    roles: list[str] = field(default_factory=list)

    @property
    def marketplace_role(self) -> str:
        return marketplace_role(self.roles)


class KeycloakProvider:
    """Validates bearer tokens against Keycloak."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._client_id = client_id
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "KeycloakProvider | None":
        """Provider for the configured realm, or None without a client secret."""
        if not settings.keycloak_client_secret:
            return None
        return cls(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token. Inactive tokens and Keycloak errors yield None."""
        try:
            token_info = self._keycloak.introspect(token)
        except Exception:
            logger.warning("token_introspection_failed", exc_info=True)
            return None
        if not token_info.get("active"):
            return None
        return OIDCUser(
            user_id=token_info.get("sub", ""),
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
            roles=self._token_roles(token_info),
        )

    def _token_roles(self, token_info: dict[str, Any]) -> list[str]:
        """Realm roles plus roles granted on this API's client."""
        roles = list(token_info.get("realm_access", {}).get("roles", []))
        client = token_info.get("resource_access", {}).get(self._client_id, {})
        roles.extend(client.get("roles", []))
        return roles
