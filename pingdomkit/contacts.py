"""Alerting contacts and their notification targets."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from .errors import ValidationError


def _value(data: Mapping[str, Any], key: str, default: Any) -> Any:
    value = data.get(key)
    return default if value is None else value


def _require_name(name: str) -> None:
    """Raise ValidationError when a name that must be given is empty."""
    if not name:
        raise ValidationError("Invalid value for `Name`.  Must contain non-empty string")


def _compact_json(body: Mapping[str, Any]) -> str:
    """Serialise a request body without insignificant whitespace."""
    return json.dumps(body, separators=(",", ":"))


def _record_values(keys: Mapping[str, str], data: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the attributes present in a JSON object, keyed by attribute name."""
    return {attr: data[key] for attr, key in keys.items() if data.get(key) is not None}


def _record_dict(record: Any, keys: Mapping[str, str]) -> dict[str, Any]:
    """Return the JSON form of a record, keyed by JSON name."""
    return {key: getattr(record, attr) for attr, key in keys.items()}


@dataclass
class SMSNotification:
    """A text message notification target."""

    _keys: ClassVar[Mapping[str, str]] = {
        "country_code": "country_code",
        "number": "number",
        "provider": "provider",
        "severity": "severity",
    }

    country_code: str = ""
    number: str = ""
    provider: str = ""
    severity: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SMSNotification":
        return cls(**_record_values(cls._keys, data))

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self, self._keys)


@dataclass
class EmailNotification:
    """An e-mail address notification target."""

    _keys: ClassVar[Mapping[str, str]] = {"address": "address", "severity": "severity"}

    address: str = ""
    severity: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmailNotification":
        return cls(**_record_values(cls._keys, data))

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self, self._keys)


@dataclass
class APNSNotification:
    """An APNS device notification target."""

    _keys: ClassVar[Mapping[str, str]] = {
        "device": "apns_device",
        "name": "device_name",
        "severity": "severity",
    }

    device: str = ""
    name: str = ""
    severity: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "APNSNotification":
        return cls(**_record_values(cls._keys, data))

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self, self._keys)


@dataclass
class AGCMNotification:
    """An AGCM notification target."""

    _keys: ClassVar[Mapping[str, str]] = {"agcm_id": "agcm_id", "severity": "severity"}

    agcm_id: str = ""
    severity: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AGCMNotification":
        return cls(**_record_values(cls._keys, data))

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self, self._keys)


_TARGET_KINDS: dict[str, Any] = {
    "sms": SMSNotification,
    "email": EmailNotification,
    "apns": APNSNotification,
    "agcm": AGCMNotification,
}


@dataclass
class NotificationTargets:
    """The ways a contact can be notified of alerts."""

    sms: list[SMSNotification] = field(default_factory=list)
    email: list[EmailNotification] = field(default_factory=list)
    apns: list[APNSNotification] = field(default_factory=list)
    agcm: list[AGCMNotification] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "NotificationTargets":
        data = data or {}
        return cls(
            **{
                key: [kind.from_dict(item) for item in data.get(key) or []]
                for key, kind in _TARGET_KINDS.items()
            }
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; empty target lists are left out."""
        return {
            key: [item.to_dict() for item in getattr(self, key)]
            for key in _TARGET_KINDS
            if getattr(self, key)
        }


@dataclass
class ContactTeam:
    """An alerting team as seen from a contact."""

    _keys: ClassVar[Mapping[str, str]] = {"id": "id", "name": "name"}

    id: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContactTeam":
        return cls(**_record_values(cls._keys, data))


@dataclass
class Contact:
    """A Pingdom alerting contact."""

    id: int = 0
    name: str = ""
    notification_targets: NotificationTargets = field(default_factory=NotificationTargets)
    owner: bool = False
    paused: bool = False
    teams: list[ContactTeam] = field(default_factory=list)
    type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Contact":
        return cls(
            id=_value(data, "id", 0),
            name=_value(data, "name", ""),
            notification_targets=NotificationTargets.from_dict(data.get("notification_targets")),
            owner=_value(data, "owner", False),
            paused=_value(data, "paused", False),
            teams=[ContactTeam.from_dict(item) for item in data.get("teams") or []],
            type=_value(data, "type", ""),
        )

    def validate(self) -> None:
        """Raise ValidationError unless the contact can be submitted."""
        _require_name(self.name)

    def render_for_json_api(self) -> str:
        """Return the JSON body submitted when creating or updating a contact."""
        return _compact_json(
            {
                "name": self.name,
                "notification_targets": self.notification_targets.to_dict(),
                "paused": self.paused,
            }
        )