"""Permission table entry model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class PermissionEntry(BaseModel):
    """One row of the permission table: an action and the roles allowed to perform it."""

    model_config = ConfigDict(frozen=True)

    action: str
    roles: tuple[str, ...]

    def to_response(self) -> dict[str, Any]:
        return {"_v": "1.0", "action": self.action, "roles": list(self.roles)}
