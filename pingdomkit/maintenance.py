"""Maintenance windows and the request parameters they produce."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ValidationError


@dataclass
class MaintenanceWindow:
    """A Pingdom maintenance window."""

    description: str = ""
    from_: int = 0
    to: int = 0
    recurrence_type: str = ""
    repeat_every: int = 0
    effective_to: int = 0
    uptime_ids: str = ""
    tms_ids: str = ""

    def put_params(self) -> dict[str, str]:
        """Return the parameters sent with a PUT request; unset options are left out."""
        params = {
            "description": self.description,
            "from": str(self.from_),
            "to": str(self.to),
        }
        if self.recurrence_type:
            params["recurrencetype"] = self.recurrence_type
        if self.uptime_ids:
            params["uptimeids"] = self.uptime_ids
        if self.tms_ids:
            params["tmsids"] = self.tms_ids
        if self.repeat_every != 0:
            params["repeatevery"] = str(self.repeat_every)
        if self.effective_to != 0:
            params["effectiveto"] = str(self.effective_to)
        return params

    def post_params(self) -> dict[str, str]:
        """Return the PUT parameters with empty values removed."""
        return {key: value for key, value in self.put_params().items() if value != ""}

    def validate(self) -> None:
        """Raise ValidationError if the window holds values the API would reject."""
        if not self.description:
            raise ValidationError(
                "Invalid value for `Description`.  Must contain non-empty string"
            )
        if self.from_ == 0:
            raise ValidationError("Invalid value for `From`.  Must contain time")
        if self.to == 0:
            raise ValidationError("Invalid value for `To`.  Must contain time")


@dataclass
class MaintenanceWindowDelete:
    """Parameters for deleting several maintenance windows at once."""

    maintenance_ids: str = ""

    def delete_params(self) -> dict[str, str]:
        """Return the parameters sent with the DELETE request."""
        return {"maintenanceids": self.maintenance_ids}

    def validate(self) -> None:
        """Raise ValidationError unless some window IDs are given."""
        if not self.maintenance_ids:
            raise ValidationError("Invalid value for `IDs`.  Must contain non-empty string")