"""Exceptions raised for API errors and invalid request values."""

from __future__ import annotations

import json
from typing import Any, Mapping


class PingdomError(Exception):
    """An error reported by the Pingdom API."""

    def __init__(self, status_code: int = 0, status_desc: str = "", message: str = "") -> None:
        super().__init__(status_code, status_desc, message)
        self.status_code = status_code
        self.status_desc = status_desc
        self.message = message

    def __str__(self) -> str:
        return f"{self.status_code} {self.status_desc}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code!r}, "
            f"status_desc={self.status_desc!r}, message={self.message!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PingdomError):
            return NotImplemented
        return (self.status_code, self.status_desc, self.message) == (
            other.status_code,
            other.status_desc,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.status_code, self.status_desc, self.message))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PingdomError":
        """Build the error from the decoded ``error`` object of a response."""
        return cls(
            status_code=data.get("statuscode") or 0,
            status_desc=data.get("statusdesc") or "",
            message=data.get("errormessage") or "",
        )

    @classmethod
    def from_error_body(cls, data: str | bytes | Mapping[str, Any]) -> "PingdomError":
        """Build the error from a whole error response body."""
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        if isinstance(data, str):
            data = json.loads(data)
        error = data.get("error") if isinstance(data, Mapping) else None
        if not isinstance(error, Mapping):
            raise ValueError("response body holds no error object")
        return cls.from_dict(error)


class ValidationError(ValueError):
    """A request object holds values the API would reject."""


class MissingIdError(ValidationError):
    """A required Id field is missing."""

    def __init__(self) -> None:
        super().__init__("required field 'Id' missing")


class BadResolutionError(ValidationError):
    """An invalid summary resolution was given."""

    def __init__(self) -> None:
        super().__init__("resolution must be either 'hour', 'day' or 'week'")