"""Appointment/schedule models.

Field names follow Zermelo's appointment specification, translated from
camelCase to snake_case. Every field is optional: the API leaves fields
out depending on the appointment type and on the requested fields, and
a missing field is kept as ``None`` instead of being defaulted.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import (
    AliasChoices,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from zermelo.api.exceptions import MalformedResponseError
from zermelo.api.models.base import ZermeloModel
from zermelo.utils.timestamps import to_datetime


class AppointmentType(str, Enum):
    """Kind of appointment, ``type`` in Zermelo's API."""

    UNKNOWN = "unknown"
    LESSON = "lesson"
    EXAM = "exam"
    ACTIVITY = "activity"
    CHOICE = "choice"
    TALK = "talk"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> "AppointmentType | None":
        """Parse a wire value, returning None for anything unrecognized.

        >>> AppointmentType.parse("exam")
        <AppointmentType.EXAM: 'exam'>
        >>> AppointmentType.parse("abc") is None
        True
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def _wire(name: str, *legacy: str) -> Any:
    """Optional field read from its camelCase wire name (or a legacy spelling)."""
    if legacy:
        return Field(default=None, alias=name, validation_alias=AliasChoices(name, *legacy))
    return Field(default=None, alias=name)


class Appointment(ZermeloModel):
    """One version of an appointment in the schedule."""

    # Identity
    appointment_instance: StrictInt | None = _wire("appointmentInstance", "appointmentInstanceId")
    id: StrictInt | None = _wire("id")

    # Timing, as UTC Unix time
    start: StrictInt | None = _wire("start")
    end: StrictInt | None = _wire("end")
    start_time_slot: StrictInt | None = _wire("startTimeSlot")
    end_time_slot: StrictInt | None = _wire("endTimeSlot")

    # Content
    subjects: list[StrictStr] | None = _wire("subjects")
    appointment_type: AppointmentType | None = _wire("type", "appointmentType")
    remark: StrictStr | None = _wire("remark")

    # Location and participants
    locations: list[StrictStr] | None = _wire("locations")
    teachers: list[StrictStr] | None = _wire("teachers")
    groups: list[StrictStr] | None = _wire("groups")

    # Versioning and status
    created: StrictInt | None = _wire("created")
    last_modified: StrictInt | None = _wire("lastModified")
    valid: StrictBool | None = _wire("valid")
    hidden: StrictBool | None = _wire("hidden")
    cancelled: StrictBool | None = _wire("cancelled")
    modified: StrictBool | None = _wire("modified")
    moved: StrictBool | None = _wire("moved")
    new: StrictBool | None = _wire("new", "isNew")
    change_description: StrictStr | None = _wire("changeDescription")

    # Organization
    branch_of_school: StrictInt | None = _wire("branchOfSchool", "branchOfSchoolId")
    branch: StrictStr | None = _wire("branch")

    @field_validator("appointment_type", mode="before")
    @classmethod
    def parse_appointment_type(cls, v: Any) -> AppointmentType | None:
        """Unknown types become None instead of failing the appointment."""
        return AppointmentType.parse(v)

    @property
    def sort_key(self) -> int:
        """Start time used for ordering; a missing start sorts first."""
        return self.start if self.start is not None else 0

    @property
    def start_datetime(self) -> datetime | None:
        """Start as an aware UTC datetime."""
        return to_datetime(self.start)

    @property
    def end_datetime(self) -> datetime | None:
        """End as an aware UTC datetime."""
        return to_datetime(self.end)

    def summary(self) -> str:
        """Short multi-line description: time slot and participants."""
        slot = self.start_time_slot if self.start_time_slot is not None else -1
        return (
            f"#{slot}\n"
            f"subjects: {', '.join(self.subjects or [])}\n"
            f"locations: {', '.join(self.locations or [])}\n"
            f"teachers: {', '.join(self.teachers or [])}\n"
            f"groups: {', '.join(self.groups or [])}\n"
        )


class AppointmentResponse(ZermeloModel):
    """The ``response`` envelope of an appointments request.

    Only ``data`` decides whether a response is usable. The other envelope
    fields are informational: a wrongly typed value is dropped to None.
    """

    status: StrictInt | None = None
    message: StrictStr | None = None
    start_row: StrictInt | None = Field(default=None, alias="startRow")
    end_row: StrictInt | None = Field(default=None, alias="endRow")
    total_rows: StrictInt | None = Field(default=None, alias="totalRows")
    data: list[Appointment] = Field(default_factory=list)

    @field_validator("status", "start_row", "end_row", "total_rows", mode="before")
    @classmethod
    def drop_invalid_count(cls, v: Any) -> int | None:
        """Keep integers, drop anything else."""
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        return None

    @field_validator("message", mode="before")
    @classmethod
    def drop_invalid_message(cls, v: Any) -> str | None:
        """Keep strings, drop anything else."""
        return v if isinstance(v, str) else None

    @classmethod
    def from_response(cls, payload: Any) -> "AppointmentResponse":
        """Validate a decoded ``{"response": {"data": [...]}}`` document.

        Raises:
            MalformedResponseError: If an envelope key is missing, an entry
                is not an object, or a field has the wrong type
        """
        if not isinstance(payload, dict) or "response" not in payload:
            raise MalformedResponseError("Missing key 'response' in body", key="response")

        envelope = payload["response"]
        if not isinstance(envelope, dict) or "data" not in envelope:
            raise MalformedResponseError("Missing key 'data' in response", key="data")

        items = envelope["data"]
        if not isinstance(items, list):
            raise MalformedResponseError("Expected 'data' to be a list")

        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise MalformedResponseError(f"Appointment at index {index} is not an object")

        try:
            return cls.model_validate(envelope)
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid appointment data: {e}") from e
