"""Role identifiers used across the clinic application."""

from __future__ import annotations

from typing import Any

ROLE_ADMIN = "admin"
ROLE_DOCTOR = "doctor"
ROLE_PATIENT = "patient"
ROLE_NURSE = "nurse"

KNOWN_ROLES: tuple[str, ...] = (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT, ROLE_NURSE)


def is_known_role(value: Any) -> bool:
    """Return True if the value is one of the roles the application assigns."""
    return isinstance(value, str) and value in KNOWN_ROLES
