"""Requested permission - the (category, action, resource) triple."""

from dataclasses import dataclass

RESOURCE_ALL = "all"
RESOURCE_OWN = "own"


@dataclass(frozen=True)
class PermissionRequest:
    """What the caller wants to do: action on a category, optionally scoped."""

    category: str
    action: str
    resource: str | None = None

    @property
    def is_well_formed(self) -> bool:
        return bool(self.category) and bool(self.action)

    def __str__(self) -> str:
        label = f"{self.category}.{self.action}"
        if self.resource:
            label += f" ({self.resource})"
        return label


def resource_matches(granted_resource: str | None, requested_resource: str | None) -> bool:
    """Check whether a grant's scope covers the requested scope.

    A request without a resource matches any grant. A grant without a
    resource, or scoped to "all", matches any request. Otherwise the
    scopes must be equal, so a request for "all" is not covered by a grant
    scoped to "own".
    """
    if requested_resource is None:
        return True
    if granted_resource is None or granted_resource == RESOURCE_ALL:
        return True
    return granted_resource == requested_resource
