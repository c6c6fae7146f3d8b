"""Recoverable rejections raised when a schedule cannot be admitted."""

from __future__ import annotations

from datetime import datetime


class ScheduleRejected(Exception):
    """Base class for user-correctable admission failures."""

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message

    def to_detail(self) -> dict:
        return {"reason": self.reason, "message": self.message}


class ValidationError(ScheduleRejected):
    """One or more required form fields are missing."""

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__("missing_fields", "Please fill in all fields")
        self.missing_fields = list(missing_fields)

    def to_detail(self) -> dict:
        detail = super().to_detail()
        detail["missing_fields"] = self.missing_fields
        return detail


class OrderError(ScheduleRejected):
    """The end instant is not strictly after the start instant."""

    def __init__(self) -> None:
        super().__init__("end_not_after_start", "End time must be after start time")


class ConflictError(ScheduleRejected):
    """The candidate overlaps an existing schedule on the same day."""

    def __init__(
        self,
        earliest_allowed: datetime,
        conflicting_id: int | None = None,
        candidate_start: datetime | None = None,
    ) -> None:
        # Time of day alone is ambiguous once the conflict ends on another day
        if candidate_start is None or candidate_start.date() != earliest_allowed.date():
            shown = f"{earliest_allowed:%Y-%m-%d %H:%M}"
        else:
            shown = f"{earliest_allowed:%H:%M}"
        super().__init__("conflict", f"Please select a time after {shown}")
        self.earliest_allowed = earliest_allowed
        self.conflicting_id = conflicting_id

    def to_detail(self) -> dict:
        detail = super().to_detail()
        detail["earliest_allowed"] = self.earliest_allowed.isoformat()
        detail["conflicting_id"] = self.conflicting_id
        return detail


class UnknownOwnerError(ScheduleRejected):
    """The owner name is not in the configured owner table."""

    def __init__(self, owner: str) -> None:
        super().__init__("unknown_owner", f"Unknown owner: {owner}")
        self.owner = owner
