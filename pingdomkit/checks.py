"""Uptime check definitions and the request parameters they produce."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Optional

from .errors import BadResolutionError, MissingIdError, ValidationError

_ALLOWED_RESOLUTIONS = frozenset({0, 1, 5, 15, 30, 60})
_SUMMARY_RESOLUTIONS = frozenset({"", "hour", "day", "week"})


def _text(value: object) -> str:
    """Format a parameter value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join_ids(integers: Iterable[int] | None) -> str:
    """Join integers into a comma-delimited string."""
    return ",".join(str(item) for item in integers or ())


def validate_common_parameters(name: str, hostname: str, resolution: int) -> None:
    """Raise ValidationError unless the fields every check shares are valid."""
    if not name:
        raise ValidationError("invalid value for `Name`, must contain non-empty string")
    if not hostname:
        raise ValidationError("invalid value for `Hostname`, must contain non-empty string")
    # A resolution of 0 lets the API apply its default of 5.
    if resolution not in _ALLOWED_RESOLUTIONS:
        raise ValidationError(
            f"invalid value {resolution} for `Resolution`, allowed values are [1,5,15,30,60]"
        )


def _add_nonzero(params: dict[str, str], **values: int) -> None:
    params.update({key: str(value) for key, value in values.items() if value != 0})


def _post_from_put(put: dict[str, str], check_type: str) -> dict[str, str]:
    """Drop empty values from PUT parameters and add the check type."""
    params = {key: value for key, value in put.items() if value != ""}
    params["type"] = check_type
    return params


@dataclass
class _BaseCheck:
    """Fields and parameters that every kind of check shares."""

    check_type: ClassVar[str] = ""

    name: str = ""
    hostname: str = ""
    integration_ids: list[int] = field(default_factory=list)
    notify_again_every: int = 0
    notify_when_backup: bool = False
    paused: bool = False
    probe_filters: str = ""
    resolution: int = 0
    send_notification_when_down: int = 0
    tags: str = ""
    team_ids: list[int] = field(default_factory=list)
    user_ids: list[int] = field(default_factory=list)

    def put_params(self) -> dict[str, str]:
        """Return the parameters sent with a PUT request."""
        params = {
            "host": self.hostname,
            "integrationids": join_ids(self.integration_ids),
            "name": self.name,
            "notifyagainevery": _text(self.notify_again_every),
            "notifywhenbackup": _text(self.notify_when_backup),
            "paused": _text(self.paused),
            "probe_filters": self.probe_filters,
            "tags": self.tags,
            "teamids": join_ids(self.team_ids),
            "userids": join_ids(self.user_ids),
        }
        _add_nonzero(
            params,
            resolution=self.resolution,
            sendnotificationwhendown=self.send_notification_when_down,
        )
        return params

    def post_params(self) -> dict[str, str]:
        """Return the PUT parameters without empty values, plus the check type."""
        return _post_from_put(self.put_params(), self.check_type)

    def validate(self) -> None:
        """Raise ValidationError if the check holds values the API would reject."""
        validate_common_parameters(self.name, self.hostname, self.resolution)


@dataclass
class HttpCheck(_BaseCheck):
    """A Pingdom HTTP check."""

    check_type: ClassVar[str] = "http"

    custom_message: str = ""
    encryption: bool = False
    ipv6: bool = False
    password: str = ""
    port: int = 0
    post_data: str = ""
    request_headers: dict[str, str] = field(default_factory=dict)
    response_time_threshold: int = 0
    ssl_down_days_before: Optional[int] = None
    should_contain: str = ""
    should_not_contain: str = ""
    url: str = ""
    username: str = ""
    verify_certificate: Optional[bool] = None

    def put_params(self) -> dict[str, str]:
        """Return the parameters sent with a PUT request."""
        params = super().put_params()
        params.update(
            custom_message=self.custom_message,
            encryption=_text(self.encryption),
            ipv6=_text(self.ipv6),
            postdata=self.post_data,
            url=self.url,
        )
        _add_nonzero(
            params, port=self.port, responsetime_threshold=self.response_time_threshold
        )
        optional = {
            "verify_certificate": self.verify_certificate,
            "ssl_down_days_before": self.ssl_down_days_before,
        }
        params.update({key: _text(value) for key, value in optional.items() if value is not None})

        # The two are exclusive, but one is always sent so it can be cleared.
        if self.should_contain:
            params["shouldcontain"] = self.should_contain
        else:
            params["shouldnotcontain"] = self.should_not_contain

        if self.username:
            params["auth"] = f"{self.username}:{self.password}"

        for index, key in enumerate(sorted(self.request_headers)):
            params[f"requestheader{index}"] = f"{key}:{self.request_headers[key]}"
        return params

    def post_params(self) -> dict[str, str]:
        """Return the PUT parameters without empty values, plus the check type."""
        return _post_from_put(self.put_params(), self.check_type)

    def validate(self) -> None:
        """Raise ValidationError if the check holds values the API would reject."""
        super().validate()
        if self.should_contain and self.should_not_contain:
            raise ValidationError(
                "`ShouldContain` and `ShouldNotContain` must not be declared at the same time"
            )


@dataclass
class PingCheck(_BaseCheck):
    """A Pingdom ping check."""

    check_type: ClassVar[str] = "ping"

    response_time_threshold: int = 0

    def put_params(self) -> dict[str, str]:
        """Return the parameters sent with a PUT request."""
        params = super().put_params()
        _add_nonzero(params, responsetime_threshold=self.response_time_threshold)
        return params

    def post_params(self) -> dict[str, str]:
        """Return the PUT parameters without empty values, plus the check type."""
        return _post_from_put(self.put_params(), self.check_type)

    def validate(self) -> None:
        """Raise ValidationError if the check holds values the API would reject."""
        validate_common_parameters(self.name, self.hostname, self.resolution)


@dataclass
class TCPCheck(_BaseCheck):
    """A Pingdom TCP check."""

    check_type: ClassVar[str] = "tcp"

    port: int = 0
    custom_message: str = ""
    ipv6: bool = False
    response_time_threshold: int = 0
    string_to_expect: str = ""
    string_to_send: str = ""

    def put_params(self) -> dict[str, str]:
        """Return the parameters sent with a PUT request."""
        params = super().put_params()
        params.update(
            custom_message=self.custom_message,
            ipv6=_text(self.ipv6),
            port=_text(self.port),
        )
        _add_nonzero(params, responsetime_threshold=self.response_time_threshold)
        optional = {"stringtosend": self.string_to_send, "stringtoexpect": self.string_to_expect}
        params.update({key: value for key, value in optional.items() if value})
        return params

    def post_params(self) -> dict[str, str]:
        """Return the PUT parameters without empty values, plus the check type."""
        return _post_from_put(self.put_params(), self.check_type)

    def validate(self) -> None:
        """Raise ValidationError if the check holds values the API would reject."""
        super().validate()
        if not 1 <= self.port <= 65535:
            raise ValidationError(
                "Invalid value for `Port`.  Must contain an integer >= 1 and <= 65535"
            )


@dataclass
class DNSCheck(_BaseCheck):
    """A Pingdom DNS check."""

    check_type: ClassVar[str] = "dns"

    expected_ip: str = ""
    name_server: str = ""
    ipv6: bool = False

    def put_params(self) -> dict[str, str]:
        """Return the parameters sent with a PUT request."""
        params = super().put_params()
        params.update(
            expectedip=self.expected_ip,
            nameserver=self.name_server,
            ipv6=_text(self.ipv6),
        )
        return params

    def post_params(self) -> dict[str, str]:
        """Return the PUT parameters without empty values, plus the check type."""
        return _post_from_put(self.put_params(), self.check_type)

    def validate(self) -> None:
        """Raise ValidationError if the check holds values the API would reject."""
        super().validate()
        for label, value in (("ExpectedIP", self.expected_ip), ("NameServer", self.name_server)):
            if not value:
                raise ValidationError(
                    f"invalid value for `{label}`, must contain non-empty string"
                )


@dataclass
class SummaryPerformanceRequest:
    """A request for a check's performance summary."""

    id: int = 0
    from_: int = 0
    to: int = 0
    include_uptime: bool = False
    order: str = ""
    probes: str = ""
    resolution: str = ""

    def validate(self) -> None:
        """Raise MissingIdError or BadResolutionError for an unusable request."""
        if self.id == 0:
            raise MissingIdError()
        if self.resolution not in _SUMMARY_RESOLUTIONS:
            raise BadResolutionError()

    def get_params(self) -> dict[str, str]:
        """Return the query parameters for the request."""
        params: dict[str, str] = {}
        if self.resolution:
            params["resolution"] = self.resolution
        if self.include_uptime:
            params["includeuptime"] = "true"
        return params