"""Clinica response models."""

from clinica.models.permission import PermissionEntry
from clinica.models.route import NavRoute

__all__ = ["NavRoute", "PermissionEntry"]
