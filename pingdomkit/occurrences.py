"""Occurrences of maintenance windows."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import ValidationError


def _load(body: str | bytes | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    if isinstance(body, str):
        body = json.loads(body)
    return body or {}


def _value(data: Mapping[str, Any], key: str, default: Any) -> Any:
    value = data.get(key)
    return default if value is None else value


@dataclass
class Occurrence:
    """One occurrence of a maintenance window."""

    id: int = 0
    maintenance_id: int = 0
    from_: int = 0
    to: int = 0
    duration: int = 0
    duration_unit: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Occurrence":
        return cls(
            id=_value(data, "id", 0),
            maintenance_id=_value(data, "maintenanceid", 0),
            from_=_value(data, "from", 0),
            to=_value(data, "to", 0),
            duration=_value(data, "duration", 0),
            duration_unit=_value(data, "durationunit", ""),
        )

    def validate(self) -> None:
        """Raise ValidationError unless both ends of the occurrence are set."""
        if self.from_ == 0:
            raise ValidationError("Invalid value for `From`.  Must contain time")
        if self.to == 0:
            raise ValidationError("Invalid value for `To`.  Must contain time")

    def render_for_json_api(self) -> str:
        """Return the JSON body submitted when updating the occurrence."""
        return json.dumps({"from": self.from_, "to": self.to}, separators=(",", ":"))


@dataclass
class ListOccurrenceQuery:
    """Filters for listing occurrences."""

    from_: int = 0
    to: int = 0
    maintenance_id: int = 0

    def to_params(self) -> dict[str, str]:
        """Return the query parameters; unset filters are left out."""
        params: dict[str, str] = {}
        if self.from_ != 0:
            params["from"] = str(self.from_)
        if self.to != 0:
            params["to"] = str(self.to)
        if self.maintenance_id != 0:
            params["maintenanceid"] = str(self.maintenance_id)
        return params


def parse_occurrence_list(body: str | bytes | Mapping[str, Any]) -> list[Occurrence]:
    """Decode the body of an occurrence listing."""
    return [Occurrence.from_dict(item) for item in _load(body).get("occurrences") or []]


def parse_occurrence_details(body: str | bytes | Mapping[str, Any]) -> Occurrence:
    """Decode the body of a single occurrence."""
    return Occurrence.from_dict(_load(body).get("occurrence") or {})