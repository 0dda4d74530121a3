"""Clinica — role-based access checks for the clinic application."""

from clinica.auth.permissions import PermissionChecker, can

__all__ = ["PermissionChecker", "can"]
