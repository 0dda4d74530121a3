"""RBAC permission checks for the clinic application."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from clinica.auth.roles import ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT
from clinica.models.permission import PermissionEntry

logger = logging.getLogger(__name__)

_ALL = (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT)
_STAFF = (ROLE_ADMIN, ROLE_DOCTOR)
_ADMIN_ONLY = (ROLE_ADMIN,)


def _freeze(table: Mapping[str, Iterable[str]]) -> Mapping[str, frozenset[str]]:
    return MappingProxyType({action: frozenset(roles) for action, roles in table.items()})


# action -> roles allowed to perform it
PERMISSIONS: Mapping[str, frozenset[str]] = _freeze(
    {
        "view:dashboard": _ALL,
        "view:appointments": _ALL,
        "create:appointments": (ROLE_ADMIN, ROLE_PATIENT, ROLE_DOCTOR),
        "view:patients": _STAFF,
        "view:doctors": _ALL,
        "view:areas": _ALL,
        "manage:users": _ADMIN_ONLY,
        "view:clinical": _ALL,
        "create:clinical": _STAFF,
        "edit:clinical": _STAFF,
        "delete:clinical": _ADMIN_ONLY,
        "view:security": _ADMIN_ONLY,
        "manage:security": _ADMIN_ONLY,
        "view:audit": _ADMIN_ONLY,
        "manage:sessions": _ADMIN_ONLY,
        "manage:policies": _ADMIN_ONLY,
    }
)


def plain_str(value: Any) -> str | None:
    """Return a str value as an exact str, dropping any subclass behavior; None otherwise."""
    if not isinstance(value, str):
        return None
    return str.__str__(value)


def has_role(role: Any) -> bool:
    """Check that a role is assigned: a non-empty string."""
    role = plain_str(role)
    return role is not None and role != ""


class PermissionChecker:
    """Decides whether a role may perform an action.

    The admin role passes every check, including actions missing from the
    table. Any other role needs to be listed for the action. Unknown actions,
    missing roles and malformed input all deny.
    """

    def __init__(self, permissions: Mapping[str, Iterable[str]] | None = None) -> None:
        self._permissions = PERMISSIONS if permissions is None else _freeze(permissions)
        logger.debug("Permission checker loaded with %d actions", len(self._permissions))

    @property
    def permissions(self) -> Mapping[str, frozenset[str]]:
        return self._permissions

    def can(self, role: Any, action: Any) -> bool:
        """Check if a role may perform an action."""
        if not has_role(role):
            return False
        role = plain_str(role)
        if role == ROLE_ADMIN:
            return True
        action = plain_str(action)
        if action is None:
            return False
        allowed = self._permissions.get(action)
        if allowed is None:
            return False
        return role in allowed

    def actions(self) -> list[str]:
        """List every action in the table, in declaration order."""
        return list(self._permissions)

    def allowed_roles(self, action: Any) -> frozenset[str]:
        """Roles listed for an action. The admin override is not included for unknown actions."""
        action = plain_str(action)
        if action is None:
            return frozenset()
        return self._permissions.get(action, frozenset())

    def allowed_actions(self, role: Any) -> list[str]:
        """List the table actions a role may perform."""
        return [action for action in self._permissions if self.can(role, action)]

    def entries(self) -> list[PermissionEntry]:
        return [
            PermissionEntry(action=action, roles=tuple(sorted(roles)))
            for action, roles in self._permissions.items()
        ]


_default_checker = PermissionChecker()


def get_checker() -> PermissionChecker:
    """Return the process-wide checker over the built-in table."""
    return _default_checker


def can(role: Any, action: Any) -> bool:
    """Check if a role may perform an action against the built-in table."""
    return _default_checker.can(role, action)
