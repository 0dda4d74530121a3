"""Role and permission checks."""

from clinica.auth.permissions import PERMISSIONS, PermissionChecker, can, has_role
from clinica.auth.roles import KNOWN_ROLES, ROLE_ADMIN

__all__ = ["KNOWN_ROLES", "PERMISSIONS", "ROLE_ADMIN", "PermissionChecker", "can", "has_role"]
