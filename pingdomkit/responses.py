"""Data returned by the Pingdom API, decoded from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .contacts import Contact


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
class PingdomResponse:
    """A general message response."""

    message: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PingdomResponse":
        return cls(message=_value(data, "message", ""))


@dataclass
class CheckTeamResponse:
    """A team listed inside a check."""

    id: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckTeamResponse":
        return cls(id=_value(data, "id", 0), name=_value(data, "name", ""))


@dataclass
class CheckResponseHTTPDetails:
    """Details specific to HTTP checks."""

    url: str = ""
    encryption: bool = False
    port: int = 0
    username: str = ""
    password: str = ""
    should_contain: str = ""
    should_not_contain: str = ""
    post_data: str = ""
    request_headers: dict[str, str] = field(default_factory=dict)
    verify_certificate: bool = False
    ssl_down_days_before: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckResponseHTTPDetails":
        return cls(
            url=_value(data, "url", ""),
            encryption=_value(data, "encryption", False),
            port=_value(data, "port", 0),
            username=_value(data, "username", ""),
            password=_value(data, "password", ""),
            should_contain=_value(data, "shouldcontain", ""),
            should_not_contain=_value(data, "shouldnotcontain", ""),
            post_data=_value(data, "postdata", ""),
            request_headers=dict(data.get("requestheaders") or {}),
            verify_certificate=_value(data, "verify_certificate", False),
            ssl_down_days_before=_value(data, "ssl_down_days_before", 0),
        )


@dataclass
class CheckResponseTCPDetails:
    """Details specific to TCP checks."""

    port: int = 0
    string_to_send: str = ""
    string_to_expect: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckResponseTCPDetails":
        return cls(
            port=_value(data, "port", 0),
            string_to_send=_value(data, "stringtosend", ""),
            string_to_expect=_value(data, "stringtoexpect", ""),
        )


@dataclass
class CheckResponseDNSDetails:
    """Details specific to DNS checks."""

    expected_ip: str = ""
    name_server: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckResponseDNSDetails":
        return cls(
            expected_ip=_value(data, "expectedip", ""),
            name_server=_value(data, "nameserver", ""),
        )


@dataclass
class CheckResponseType:
    """The type of a check, with type-specific details when the API gives them."""

    name: str = ""
    http: Optional[CheckResponseHTTPDetails] = None
    tcp: Optional[CheckResponseTCPDetails] = None
    dns: Optional[CheckResponseDNSDetails] = None

    @classmethod
    def from_json(cls, value: Any) -> "CheckResponseType":
        """Decode either a bare type name or a one-key object of type details."""
        if isinstance(value, str):
            return cls(name=value)
        if isinstance(value, Mapping):
            if len(value) != 1:
                raise ValueError(
                    "Check detailed response `check.type` contains more than one object: "
                    f"{dict(value)!r}"
                )
            (name,) = value
            http = value.get("http")
            tcp = value.get("tcp")
            dns = value.get("dns")
            return cls(
                name=name,
                http=CheckResponseHTTPDetails.from_dict(http) if isinstance(http, Mapping) else None,
                tcp=CheckResponseTCPDetails.from_dict(tcp) if isinstance(tcp, Mapping) else None,
                dns=CheckResponseDNSDetails.from_dict(dns) if isinstance(dns, Mapping) else None,
            )
        return cls()


@dataclass
class CheckResponseTag:
    """A tag attached to a check."""

    name: str = ""
    type: str = ""
    count: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckResponseTag":
        return cls(
            name=_value(data, "name", ""),
            type=_value(data, "type", ""),
            count=data.get("count"),
        )


@dataclass
class CheckResponse:
    """A check as returned by the API."""

    id: int = 0
    name: str = ""
    resolution: int = 0
    send_notification_when_down: int = 0
    notify_again_every: int = 0
    notify_when_backup: bool = False
    created: int = 0
    hostname: str = ""
    status: str = ""
    last_error_time: int = 0
    last_test_time: int = 0
    last_response_time: int = 0
    paused: bool = False
    integration_ids: list[int] = field(default_factory=list)
    severity_level: str = ""
    type: CheckResponseType = field(default_factory=CheckResponseType)
    tags: list[CheckResponseTag] = field(default_factory=list)
    user_ids: list[int] = field(default_factory=list)
    teams: list[CheckTeamResponse] = field(default_factory=list)
    response_time_threshold: int = 0
    probe_filters: list[str] = field(default_factory=list)
    ipv6: bool = False
    # Not sent by the API; filled in from ``teams`` when a single check is read.
    team_ids: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckResponse":
        return cls(
            id=_value(data, "id", 0),
            name=_value(data, "name", ""),
            resolution=_value(data, "resolution", 0),
            send_notification_when_down=_value(data, "sendnotificationwhendown", 0),
            notify_again_every=_value(data, "notifyagainevery", 0),
            notify_when_backup=_value(data, "notifywhenbackup", False),
            created=_value(data, "created", 0),
            hostname=_value(data, "hostname", ""),
            status=_value(data, "status", ""),
            last_error_time=_value(data, "lasterrortime", 0),
            last_test_time=_value(data, "lasttesttime", 0),
            last_response_time=_value(data, "lastresponsetime", 0),
            paused=_value(data, "paused", False),
            integration_ids=list(data.get("integrationids") or []),
            severity_level=_value(data, "severity_level", ""),
            type=CheckResponseType.from_json(data.get("type")),
            tags=[CheckResponseTag.from_dict(item) for item in data.get("tags") or []],
            user_ids=list(data.get("userids") or []),
            teams=[CheckTeamResponse.from_dict(item) for item in data.get("teams") or []],
            response_time_threshold=_value(data, "responsetime_threshold", 0),
            probe_filters=list(data.get("probe_filters") or []),
            ipv6=_value(data, "ipv6", False),
        )


@dataclass
class MaintenanceCheckResponse:
    """The checks a maintenance window applies to."""

    uptime: list[int] = field(default_factory=list)
    tms: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "MaintenanceCheckResponse":
        data = data or {}
        return cls(uptime=list(data.get("uptime") or []), tms=list(data.get("tms") or []))


@dataclass
class MaintenanceResponse:
    """A maintenance window as returned by the API."""

    id: int = 0
    description: str = ""
    from_: int = 0
    to: int = 0
    recurrence_type: str = ""
    repeat_every: int = 0
    effective_to: int = 0
    checks: MaintenanceCheckResponse = field(default_factory=MaintenanceCheckResponse)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MaintenanceResponse":
        return cls(
            id=_value(data, "id", 0),
            description=_value(data, "description", ""),
            from_=_value(data, "from", 0),
            to=_value(data, "to", 0),
            recurrence_type=_value(data, "recurrencetype", ""),
            repeat_every=_value(data, "repeatevery", 0),
            effective_to=_value(data, "effectiveto", 0),
            checks=MaintenanceCheckResponse.from_dict(data.get("checks")),
        )


@dataclass
class ProbeResponse:
    """A probe server."""

    id: int = 0
    country: str = ""
    city: str = ""
    name: str = ""
    active: bool = False
    hostname: str = ""
    ip: str = ""
    ipv6: str = ""
    country_iso: str = ""
    region: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProbeResponse":
        return cls(
            id=_value(data, "id", 0),
            country=_value(data, "country", ""),
            city=_value(data, "city", ""),
            name=_value(data, "name", ""),
            active=_value(data, "active", False),
            hostname=_value(data, "hostname", ""),
            ip=_value(data, "ip", ""),
            ipv6=_value(data, "ipv6", ""),
            country_iso=_value(data, "countryiso", ""),
            region=_value(data, "region", ""),
        )


@dataclass
class TeamMemberResponse:
    """A member of an alerting team."""

    id: int = 0
    name: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TeamMemberResponse":
        return cls(
            id=_value(data, "id", 0),
            name=_value(data, "name", ""),
            type=_value(data, "type", ""),
        )


@dataclass
class TeamResponse:
    """An alerting team as returned by the API."""

    id: int = 0
    name: str = ""
    members: list[TeamMemberResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TeamResponse":
        return cls(
            id=_value(data, "id", 0),
            name=_value(data, "name", ""),
            members=[TeamMemberResponse.from_dict(item) for item in data.get("members") or []],
        )


@dataclass
class TeamDeleteResponse:
    """The response to deleting a team."""

    message: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TeamDeleteResponse":
        return cls(message=_value(data, "message", ""))


@dataclass
class SummaryPerformanceSummary:
    """Performance metrics for one interval."""

    avg_response: int = 0
    downtime: int = 0
    start_time: int = 0
    unmonitored: int = 0
    uptime: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SummaryPerformanceSummary":
        return cls(
            avg_response=_value(data, "avgresponse", 0),
            downtime=_value(data, "downtime", 0),
            start_time=_value(data, "starttime", 0),
            unmonitored=_value(data, "unmonitored", 0),
            uptime=_value(data, "uptime", 0),
        )


@dataclass
class SummaryPerformanceMap:
    """Performance broken down by hours, days or weeks."""

    hours: list[SummaryPerformanceSummary] = field(default_factory=list)
    days: list[SummaryPerformanceSummary] = field(default_factory=list)
    weeks: list[SummaryPerformanceSummary] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "SummaryPerformanceMap":
        data = data or {}

        def summaries(key: str) -> list[SummaryPerformanceSummary]:
            return [SummaryPerformanceSummary.from_dict(item) for item in data.get(key) or []]

        return cls(hours=summaries("hours"), days=summaries("days"), weeks=summaries("weeks"))


@dataclass
class SummaryPerformanceResponse:
    """A performance summary."""

    summary: SummaryPerformanceMap = field(default_factory=SummaryPerformanceMap)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SummaryPerformanceResponse":
        return cls(summary=SummaryPerformanceMap.from_dict(data.get("summary")))


@dataclass
class Result:
    """One raw check result."""

    probe_id: int = 0
    time: int = 0
    status: str = ""
    response_time: int = 0
    status_desc: str = ""
    status_desc_long: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Result":
        return cls(
            probe_id=_value(data, "probeid", 0),
            time=_value(data, "time", 0),
            status=_value(data, "status", ""),
            response_time=_value(data, "responsetime", 0),
            status_desc=_value(data, "statusdesc", ""),
            status_desc_long=_value(data, "statusdesclong", ""),
        )


@dataclass
class ResultsResponse:
    """Raw check results and the probes that produced them."""

    active_probes: list[int] = field(default_factory=list)
    results: list[Result] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResultsResponse":
        return cls(
            active_probes=list(data.get("activeprobes") or []),
            results=[Result.from_dict(item) for item in data.get("results") or []],
        )


def parse_check_list(body: str | bytes | Mapping[str, Any]) -> list[CheckResponse]:
    """Decode the body of a check listing."""
    return [CheckResponse.from_dict(item) for item in _load(body).get("checks") or []]


def parse_check_details(body: str | bytes | Mapping[str, Any]) -> Optional[CheckResponse]:
    """Decode the body of a single check, filling in ``team_ids`` from its teams."""
    raw = _load(body).get("check")
    if raw is None:
        return None
    check = CheckResponse.from_dict(raw)
    check.team_ids = [team.id for team in check.teams]
    return check


def parse_maintenance_list(body: str | bytes | Mapping[str, Any]) -> list[MaintenanceResponse]:
    """Decode the body of a maintenance window listing."""
    return [MaintenanceResponse.from_dict(item) for item in _load(body).get("maintenance") or []]


def parse_maintenance_details(
    body: str | bytes | Mapping[str, Any],
) -> Optional[MaintenanceResponse]:
    """Decode the body of a single maintenance window."""
    raw = _load(body).get("maintenance")
    return None if raw is None else MaintenanceResponse.from_dict(raw)


def parse_probe_list(body: str | bytes | Mapping[str, Any]) -> list[ProbeResponse]:
    """Decode the body of a probe listing."""
    return [ProbeResponse.from_dict(item) for item in _load(body).get("probes") or []]


def parse_team_list(body: str | bytes | Mapping[str, Any]) -> list[TeamResponse]:
    """Decode the body of a team listing."""
    return [TeamResponse.from_dict(item) for item in _load(body).get("teams") or []]


def parse_team_details(body: str | bytes | Mapping[str, Any]) -> Optional[TeamResponse]:
    """Decode the body of a single team."""
    raw = _load(body).get("team")
    return None if raw is None else TeamResponse.from_dict(raw)


def parse_contact_list(body: str | bytes | Mapping[str, Any]) -> list[Contact]:
    """Decode the body of a contact listing."""
    return [Contact.from_dict(item) for item in _load(body).get("contacts") or []]


def parse_contact_details(body: str | bytes | Mapping[str, Any]) -> Optional[Contact]:
    """Decode the body of a single contact."""
    raw = _load(body).get("contact")
    return None if raw is None else Contact.from_dict(raw)