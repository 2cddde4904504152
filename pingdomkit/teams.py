"""Alerting teams as submitted to the API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .contacts import _compact_json, _require_name


@dataclass
class Team:
    """A Pingdom alerting team."""

    id: int = 0
    name: str = ""
    member_ids: Optional[list[int]] = None

    def render_for_json_api(self) -> str:
        """Return the JSON body submitted when creating or updating the team."""
        return _compact_json({"name": self.name, "member_ids": self.member_ids})

    def validate(self) -> None:
        """Raise ValidationError unless the team can be submitted."""
        _require_name(self.name)