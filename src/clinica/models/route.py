"""Navigation route model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class NavRoute(BaseModel):
    """A navigation menu entry and the roles that may see it.

    Public routes are shown to any caller with a role assigned.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    roles: tuple[str, ...] = ()
    public: bool = False

    def allows(self, role: str) -> bool:
        return self.public or role in self.roles

    def to_response(self, *, detail: str = "summary") -> dict[str, Any]:
        data: dict[str, Any] = {"_v": "1.0", "key": self.key, "label": self.label}
        if detail != "summary":
            data.update({"roles": list(self.roles), "public": self.public})
        return data
