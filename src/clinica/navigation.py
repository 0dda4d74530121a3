"""Navigation menu visibility per role."""

from __future__ import annotations

from typing import Any

from clinica.auth.permissions import has_role, plain_str
from clinica.auth.roles import ROLE_ADMIN, ROLE_DOCTOR, ROLE_NURSE, ROLE_PATIENT
from clinica.models.route import NavRoute

_ALL = (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT)

# Menu order
ROUTES: tuple[NavRoute, ...] = (
    NavRoute(key="dashboard", label="Dashboard", public=True),
    NavRoute(key="appointments", label="Citas", roles=_ALL),
    NavRoute(key="patients", label="Pacientes", roles=(ROLE_ADMIN, ROLE_DOCTOR)),
    NavRoute(key="doctors", label="Médicos", roles=_ALL),
    NavRoute(key="areas", label="Áreas", roles=_ALL),
    NavRoute(key="clinical", label="Historia Clínica", roles=_ALL),
    NavRoute(key="triage", label="Triage", roles=(ROLE_ADMIN, ROLE_DOCTOR, ROLE_NURSE)),
)

_ROUTES_BY_KEY = {route.key: route for route in ROUTES}


def get_route(key: Any) -> NavRoute | None:
    key = plain_str(key)
    if key is None:
        return None
    return _ROUTES_BY_KEY.get(key)


def can_view_route(role: Any, key: Any) -> bool:
    """Check if a role may see a navigation route. Unknown routes are hidden."""
    if not has_role(role):
        return False
    route = get_route(key)
    if route is None:
        return False
    return route.allows(plain_str(role))


def visible_routes(role: Any) -> list[NavRoute]:
    """Routes shown in the menu for a role, in menu order."""
    if not has_role(role):
        return []
    role = plain_str(role)
    return [route for route in ROUTES if route.allows(role)]
